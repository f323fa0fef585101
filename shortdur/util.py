"""Time unit constants for shortdur.

Every constant represents a duration in seconds. ``Units.build`` evaluates
the same expressions in a chosen float precision so that the bucket table,
the splitter and the corrector all round the way that precision does.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class Units:
    num: Callable[[float], Any]
    minute: Any
    hour: Any
    day: Any
    week: Any
    year: Any
    end_of_year: Any

    @classmethod
    def build(cls, num: Callable[[float], Any]) -> "Units":
        """Compute the unit constants with ``num`` (e.g. ``float``)."""
        day = num(86400.0)
        week = day * num(7.0)
        # Gregorian mean year
        year = day * num(365.2425)
        return cls(
            num=num,
            minute=num(60.0),
            hour=num(3600.0),
            day=day,
            week=week,
            year=year,
            # Part of a year not covered by 51 whole weeks
            end_of_year=year - (num(51.0) * week),
        )


DOUBLE = Units.build(float)

# Time unit constants (all values in seconds)
MINUTE = DOUBLE.minute
HOUR = DOUBLE.hour
DAY = DOUBLE.day
WEEK = DOUBLE.week
YEAR = DOUBLE.year
END_OF_YEAR = DOUBLE.end_of_year
