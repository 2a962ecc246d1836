"""
ordfns Core.

Shape resolution, score primitives, and the dispatcher.
"""

from .exceptions import (
    OrdfnsError,
    PermanentError,
    UnsupportedShapeError,
    ConfigurationError,
)
from .shapes import (
    Ordered,
    Scored,
    Shape,
    resolve_shape,
    supported_shapes,
    type_name,
)
from .scorer import (
    SCORE_PREFIX_BYTES,
    MAX_EXACT_INTEGER,
    score_bytes,
    score_text,
    score_float,
    score_integer,
)
from .dispatch import (
    Fns,
    FnScore,
    Ordering,
    build_orderings,
    resolve_ordering,
    fns,
    fns_reversed,
    fn_score,
    fn_score_reversed,
)

__all__ = [
    # Exceptions
    "OrdfnsError",
    "PermanentError",
    "UnsupportedShapeError",
    "ConfigurationError",
    # Shapes
    "Ordered",
    "Scored",
    "Shape",
    "resolve_shape",
    "supported_shapes",
    "type_name",
    # Scoring
    "SCORE_PREFIX_BYTES",
    "MAX_EXACT_INTEGER",
    "score_bytes",
    "score_text",
    "score_float",
    "score_integer",
    # Dispatch
    "Fns",
    "FnScore",
    "Ordering",
    "build_orderings",
    "resolve_ordering",
    "fns",
    "fns_reversed",
    "fn_score",
    "fn_score_reversed",
]
