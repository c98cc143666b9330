"""Number formatting for report cells."""


def format_absolute(value: float) -> str:
    """Format a time already converted to the report unit.

    Values below 10 keep three decimals, larger ones keep one.
    """
    if abs(value) < 10:
        return f"{value:.3f}"
    return f"{value:.1f}"


def format_ratio(value: float) -> str:
    """Format a relative speed or its uncertainty with two decimals."""
    return f"{value:.2f}"
