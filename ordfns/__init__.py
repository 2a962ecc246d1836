"""
ordfns - Ordering functions for generic ordered containers.

Hand it a value, get back a comparator and a score.

Quick Start:
    >>> from ordfns import fns, fn_score_reversed
    >>> less, score = fns("apple")
    >>> less("apple", "banana")
    True
    >>> less, s = fn_score_reversed(5)
    >>> s
    -5.0

Custom types opt in by defining ``less(other)`` and, optionally,
``score()``.
"""

__version__ = "0.1.0"

from .core import (
    Fns,
    FnScore,
    Ordered,
    Scored,
    Shape,
    fns,
    fns_reversed,
    fn_score,
    fn_score_reversed,
    resolve_shape,
    OrdfnsError,
    UnsupportedShapeError,
    ConfigurationError,
)
from .config import DEFAULT_CONFIG, Config

__all__ = [
    "fns",
    "fns_reversed",
    "fn_score",
    "fn_score_reversed",
    "resolve_shape",
    "Fns",
    "FnScore",
    "Ordered",
    "Scored",
    "Shape",
    "Config",
    "DEFAULT_CONFIG",
    "OrdfnsError",
    "UnsupportedShapeError",
    "ConfigurationError",
    "__version__",
]
