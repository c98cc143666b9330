"""Errors raised while summarizing and exporting benchmark results."""


class ExportError(ValueError):
    """Base class for failures that abort a whole export."""


class EmptySampleSetError(ExportError):
    """A benchmark result carries no measurements."""

    def __init__(self, command: str = ""):
        self.command = command
        if command:
            message = f"Benchmark result for '{command}' has no measurements"
        else:
            message = "Cannot compute statistics of an empty sample set"
        super().__init__(message)


class UndefinedRatioError(ExportError):
    """A mean wall-clock time of zero makes relative speeds undefined."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(
            f"Mean wall-clock time of '{command}' is zero, relative speed is undefined"
        )


class EncodingFailureError(ExportError):
    """Rendered report text could not be encoded."""
