import math
import numbers
from datetime import timedelta
from typing import Any

from shortdur.buckets import BUCKETS, Bucket, classify
from shortdur.split import correct_year_week, split
from shortdur.util import DOUBLE, Units


def coerce_seconds(seconds: Any, *, strict: bool = True) -> float:
    """Convert a duration to float seconds and check it is in range.

    Accepts:
    - int, float or any other real number (numpy scalars included)
    - timedelta: Converted with ``total_seconds()``

    With ``strict=False`` out-of-range values are clamped instead: negatives
    (and -inf) become 0.0 and +inf is kept so it lands in the overflow bucket.

    Raises:
        TypeError: If seconds is not a real number or timedelta
        ValueError: If seconds is NaN, or negative/infinite in strict mode
    """
    if isinstance(seconds, timedelta):
        value = seconds.total_seconds()
    elif isinstance(seconds, numbers.Real) and not isinstance(seconds, bool):
        try:
            value = float(seconds)
        except OverflowError:
            # Integers too large for a double are past every bucket
            if seconds > 0:
                return math.inf
            value = -math.inf
    else:
        raise TypeError(
            f"Duration must be a real number of seconds or a timedelta.\n"
            f"Got {type(seconds).__name__!r}: {seconds!r}\n"
            f"Examples:\n"
            f"  present(151.67)  # float seconds\n"
            f"  present(timedelta(minutes=2, seconds=31))"
        )

    if math.isnan(value):
        raise ValueError(
            f"Duration must not be NaN, got {seconds!r}.\n"
            f"NaN has no bucket, not even with strict=False."
        )
    if value < 0:
        if strict:
            raise ValueError(
                f"Duration must be non-negative, got {seconds!r}.\n"
                f"Fix: Pass strict=False to clamp negatives to 0: "
                f"present(x, strict=False)"
            )
        return 0.0
    if math.isinf(value) and strict:
        raise ValueError(
            f"Duration must be finite, got {seconds!r}.\n"
            f"Fix: Pass strict=False to render infinity as '10ky+': "
            f"present(x, strict=False)"
        )
    return value


def render(bucket: Bucket, seconds: Any, units: Units = DOUBLE) -> str:
    """Format ``seconds`` with the bucket's fixed pattern.

    ``units`` must be the set the bucket table was built from, so that scaling
    and splitting happen in the same precision as classification.
    """
    if bucket.kind == "milliseconds":
        values = (seconds * units.num(1000.0),)
    elif bucket.kind in ("sub_10s", "sub_100s"):
        values = (seconds,)
    elif bucket.kind == "years":
        values = (seconds / units.year,)
    elif bucket.kind == "years_weeks":
        years, weeks = split(seconds, *bucket.units)
        values = correct_year_week(years, weeks, units)
    elif bucket.units is not None:
        values = split(seconds, *bucket.units)
    else:
        values = ()
    # float() is exact for both precisions and keeps numpy out of formatting
    return bucket.pattern.format(*(float(value) for value in values))


def present(seconds: float | timedelta, *, strict: bool = True) -> str:
    """Format a duration in seconds as a five character string.

    Example:
        >>> present(0.0156)
        '016ms'
        >>> present(151.67)
        '2m32s'
        >>> present(timedelta(hours=7, minutes=7, seconds=10))
        '7h07m'
    """
    value = coerce_seconds(seconds, strict=strict)
    return render(classify(value, BUCKETS), value, DOUBLE)
