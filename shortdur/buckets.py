"""The ordered table of output buckets and the classifier that walks it.

Each threshold sits where the previous bucket's pattern would round up into
a value it cannot show: 9.995 seconds prints as ``10.0`` with one decimal,
so it already belongs to the next bucket.
"""

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from shortdur.util import DOUBLE, Units

Kind: TypeAlias = Literal[
    "zero",
    "milliseconds",
    "sub_10s",
    "sub_100s",
    "minutes",
    "hours",
    "days",
    "weeks",
    "years_weeks",
    "years",
    "overflow",
]


@dataclass(frozen=True, kw_only=True)
class Bucket:
    kind: Kind
    threshold: Any
    pattern: str
    units: tuple[Any, Any] | None = None

    def __str__(self) -> str:
        return f"Bucket({self.kind}, <{float(self.threshold)}s)"


def build_buckets(units: Units) -> tuple[Bucket, ...]:
    """Build the bucket table with thresholds computed in ``units`` precision.

    Buckets are ordered from finest to coarsest and their thresholds are
    exclusive upper bounds. The last bucket has no upper bound.
    """
    n = units.num
    return (
        Bucket(kind="zero", threshold=n(0.0005), pattern="000ms"),
        Bucket(kind="milliseconds", threshold=n(0.9995), pattern="{0:03.0f}ms"),
        Bucket(kind="sub_10s", threshold=n(9.995), pattern="{0:01.2f}s"),
        Bucket(kind="sub_100s", threshold=n(99.95), pattern="{0:02.1f}s"),
        Bucket(
            kind="minutes",
            threshold=(n(9.0) * units.minute) + n(59.5),
            pattern="{0:01.0f}m{1:02.0f}s",
            units=(units.minute, n(1.0)),
        ),
        Bucket(
            kind="hours",
            threshold=(n(9.0) * units.hour) + (n(59.5) * units.minute),
            pattern="{0:01.0f}h{1:02.0f}m",
            units=(units.hour, units.minute),
        ),
        Bucket(
            kind="days",
            threshold=(n(9.0) * units.day) + (n(23.5) * units.hour),
            pattern="{0:01.0f}d{1:02.0f}h",
            units=(units.day, units.hour),
        ),
        Bucket(
            kind="weeks",
            threshold=(n(99.0) * units.week) + (n(6.5) * units.day),
            pattern="{0:02.0f}w{1:01.0f}d",
            units=(units.week, units.day),
        ),
        Bucket(
            kind="years_weeks",
            threshold=(n(10.0) * units.year) - (n(0.5) * units.end_of_year),
            pattern="{0:01.0f}y{1:02.0f}w",
            units=(units.year, units.week),
        ),
        Bucket(kind="years", threshold=n(9999.5) * units.year, pattern="{0:04.0f}y"),
        Bucket(kind="overflow", threshold=n(float("inf")), pattern="10ky+"),
    )


BUCKETS: tuple[Bucket, ...] = build_buckets(DOUBLE)


def classify(seconds: Any, buckets: tuple[Bucket, ...] = BUCKETS) -> Bucket:
    """Return the first bucket whose threshold is strictly above ``seconds``."""
    for bucket in buckets:
        if seconds < bucket.threshold:
            return bucket
    # Only +inf gets here; the overflow bucket is unbounded.
    return buckets[-1]
