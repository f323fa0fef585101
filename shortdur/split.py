"""Major/minor decomposition and the year/week seam correction."""

import logging
import math
from typing import Any

from shortdur.util import DOUBLE, Units

logger = logging.getLogger(__name__)

# Highest week count the two-digit week field may show
LAST_WEEK = 51


def split(seconds: Any, greater: Any, lesser: Any) -> tuple[int, Any]:
    """Split ``seconds`` into whole ``greater`` units and a remainder.

    The remainder is expressed in ``lesser`` units and keeps the precision of
    the inputs.

    Example:
        >>> split(7630.0, 3600.0, 60.0)
        (2, 7.166666666666667)
    """
    major = math.floor(seconds / greater)
    minor = (seconds % greater) / lesser
    return major, minor


def correct_year_week(
    years: int, weeks: Any, units: Units = DOUBLE
) -> tuple[int, Any]:
    """Resolve a week remainder past the 51st week.

    A year has no room for a 52nd week in the display. Remainders in the first
    half of the year-end tail clamp to week 51; the rest roll into week 0 of
    the next year.
    """
    if weeks <= LAST_WEEK:
        return years, weeks

    tail = units.year - (weeks * units.week)
    if tail <= units.end_of_year / units.num(2.0):
        logger.debug(
            "Rounded %s weeks into year %d (tail %ss)", weeks, years + 1, tail
        )
        return years + 1, units.num(0.0)

    logger.debug("Clamped %s weeks to %d (tail %ss)", weeks, LAST_WEEK, tail)
    return years, units.num(float(LAST_WEEK))
