"""Display units and row ordering shared by a whole report."""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Unit(Enum):
    """Time unit used for every absolute-time column of a report."""

    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "µs"

    @property
    def short_name(self) -> str:
        return self.value

    @property
    def factor(self) -> float:
        """Multiplier converting seconds into this unit."""
        return _FACTORS[self]

    @classmethod
    def from_name(cls, name: str) -> "Unit":
        """Parse a unit from its short ('ms') or long ('millisecond') name."""
        key = name.strip().lower()
        for unit in cls:
            if key in (unit.value, unit.name.lower()):
                return unit
        if key == "us":
            return cls.MICROSECOND
        raise ValueError(
            f"Unknown time unit '{name}'. Use 's', 'ms' or 'µs'"
        )


_FACTORS = {
    Unit.SECOND: 1.0,
    Unit.MILLISECOND: 1e3,
    Unit.MICROSECOND: 1e6,
}


class SortOrder(Enum):
    """Presentation order of the report rows."""

    COMMAND = "command"
    MEAN_TIME = "mean-time"

    @classmethod
    def from_name(cls, name: str) -> "SortOrder":
        key = name.strip().lower().replace("_", "-")
        for order in cls:
            if key == order.value:
                return order
        raise ValueError(
            f"Unknown sort order '{name}'. Use 'command' or 'mean-time'"
        )


def resolve_unit(explicit: Optional[Unit], reference_mean_seconds: float) -> Unit:
    """Choose the display unit for a report.

    An explicit unit always wins. Otherwise the mean of the first result in
    the original, unsorted input decides: one second or more selects seconds,
    anything shorter selects milliseconds.

    Args:
        explicit: Unit requested by the caller, if any
        reference_mean_seconds: Mean wall-clock time of the first input result

    Returns:
        The unit applied to every row of the report
    """
    if explicit is not None:
        return explicit

    unit = Unit.SECOND if reference_mean_seconds >= 1.0 else Unit.MILLISECOND
    logger.debug(f"Resolved time unit {unit.short_name} from reference mean {reference_mean_seconds}s")
    return unit
