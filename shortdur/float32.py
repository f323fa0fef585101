"""Single precision rendition of ``present``.

The number of seconds in a year is 31556952. Floats of 32 bits represent
every integer up to 16777216 exactly; between 2^n and 2^(n+1) they round to
a multiple of 2^(n-23). At one year that means even seconds only, and at
10000 years (between 2^38 and 2^39 seconds) steps of 32768 seconds, a little
over 9 hours.

In practice a handful of boundary cases need corrections of 1 to 16 seconds
to agree with the double precision ``present``. This module keeps those
cases reproducible; ``present`` remains the canonical behavior.
"""

from datetime import timedelta

import numpy as np

from shortdur.buckets import Bucket, build_buckets, classify
from shortdur.core import coerce_seconds, render
from shortdur.util import Units

SINGLE = Units.build(np.float32)
BUCKETS32: tuple[Bucket, ...] = build_buckets(SINGLE)


def present32(seconds: float | timedelta, *, strict: bool = True) -> str:
    """Format a duration like ``present`` using float32 arithmetic throughout."""
    value = coerce_seconds(seconds, strict=strict)
    # Doubles beyond float32 range become inf, which is still overflow
    with np.errstate(over="ignore"):
        value32 = np.float32(value)
    return render(classify(value32, BUCKETS32), value32, SINGLE)
