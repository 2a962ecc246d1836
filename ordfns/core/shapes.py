"""
ordfns Shape Resolution.

A shape is the runtime category of a value. It decides which comparison
and score behavior the dispatcher hands out. Resolution is a closed,
priority-ordered match; the first rule that fits wins:

    1. Scored   - value has less(other) and score()
    2. Ordered  - value has less(other)
    3. bytes    - bytes / bytearray
    4. text     - str
    5. numeric  - Python int / float, NumPy fixed-width scalars

Anything else raises UnsupportedShapeError.
"""

from enum import Enum
from typing import Any, Dict, Protocol, Tuple, runtime_checkable

import numpy as np

from .exceptions import UnsupportedShapeError


@runtime_checkable
class Ordered(Protocol):
    """Plain capability: a deterministic, transitive, irreflexive strict-less."""

    def less(self, other: Any) -> bool:
        ...


@runtime_checkable
class Scored(Ordered, Protocol):
    """
    Rich capability: strict-less plus a native score.

    ``score()`` must never rank a value above one it is ``less`` than.
    """

    def score(self) -> float:
        ...


class Shape(Enum):
    """Supported value shapes, in resolution priority order."""
    SCORED = "scored"
    ORDERED = "ordered"
    BYTES = "bytes"
    TEXT = "text"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def constant_score(self) -> bool:
        """Every value of this shape scores the same."""
        return self is Shape.ORDERED

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_SHAPES


_INTEGER_SHAPES = frozenset((
    Shape.INT,
    Shape.INT8, Shape.INT16, Shape.INT32, Shape.INT64,
    Shape.UINT8, Shape.UINT16, Shape.UINT32, Shape.UINT64,
))

# NumPy scalars keyed by (dtype kind, itemsize). Native and pointer-sized
# aliases (intp, uintp, intc, longlong, ...) land on the same keys.
_NUMPY_SHAPES: Dict[Tuple[str, int], Shape] = {
    ("i", 1): Shape.INT8,
    ("i", 2): Shape.INT16,
    ("i", 4): Shape.INT32,
    ("i", 8): Shape.INT64,
    ("u", 1): Shape.UINT8,
    ("u", 2): Shape.UINT16,
    ("u", 4): Shape.UINT32,
    ("u", 8): Shape.UINT64,
    ("f", 4): Shape.FLOAT32,
    ("f", 8): Shape.FLOAT64,
}


def supported_shapes() -> Tuple[Shape, ...]:
    """All shapes, in the order resolution tries them."""
    return tuple(Shape)


def _has_method(value: Any, name: str) -> bool:
    # Protocol isinstance only checks the attribute exists; a dataclass
    # field named "score" must not pass for a method
    return callable(getattr(value, name, None))


def type_name(value: Any) -> str:
    """Descriptive name of a value's concrete type for diagnostics."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _numeric_shape(value: Any):
    # bool is an int subclass but has no place in the numeric kinds
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, np.generic):
        dtype = value.dtype
        return _NUMPY_SHAPES.get((dtype.kind, dtype.itemsize))
    if isinstance(value, int):
        return Shape.INT
    if isinstance(value, float):
        return Shape.FLOAT64
    return None


def resolve_shape(value: Any) -> Shape:
    """
    Resolve the shape of a value.

    Args:
        value: Any value

    Returns:
        The first matching Shape

    Raises:
        UnsupportedShapeError: If no shape matches
    """
    if _has_method(value, "less"):
        if _has_method(value, "score"):
            return Shape.SCORED
        return Shape.ORDERED
    if isinstance(value, (bytes, bytearray)):
        return Shape.BYTES
    if isinstance(value, str):
        return Shape.TEXT

    shape = _numeric_shape(value)
    if shape is not None:
        return shape

    name = type_name(value)
    raise UnsupportedShapeError(
        f"cannot order type {name}: no method less(other) -> bool",
        type_name=name,
    )
