from importlib.resources import files

from .buckets import BUCKETS, Bucket, build_buckets, classify
from .core import coerce_seconds, present, render
from .float32 import BUCKETS32, present32
from .split import correct_year_week, split
from .util import DAY, END_OF_YEAR, HOUR, MINUTE, WEEK, YEAR, Units

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
}

__all__ = [
    "present",
    "present32",
    "classify",
    "split",
    "correct_year_week",
    "render",
    "coerce_seconds",
    "build_buckets",
    "Bucket",
    "BUCKETS",
    "BUCKETS32",
    "Units",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "YEAR",
    "END_OF_YEAR",
    "docs",
]
