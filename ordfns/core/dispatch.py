"""
ordfns Dispatcher.

Maps a runtime value to the comparison and score functions for its shape.
Four entry points cover {function pair, function + immediate score} x
{ascending, descending}:

    fns(sample)                 -> Fns(less, score_fn)
    fns_reversed(sample)        -> Fns(less, score_fn)
    fn_score(value)             -> FnScore(less, score)
    fn_score_reversed(value)    -> FnScore(less, score)

Containers call ``fns`` once with a representative value and keep the
returned functions. Containers that cannot cache them call ``fn_score``
per value instead.

Example:
    >>> less, score = fns(0)
    >>> less(0, 1), score(1)
    (True, 1.0)
    >>> less, score = fn_score_reversed(b"abc")
    >>> less(b"b", b"a")
    True
"""

from dataclasses import dataclass
from functools import lru_cache, partial
from types import MappingProxyType
from typing import Any, Callable, Mapping, NamedTuple, Optional, Tuple

from ..config import DEFAULT_CONFIG, Config
from ..logging_config import get_logger
from .exceptions import UnsupportedShapeError
from .scorer import score_bytes, score_float, score_integer, score_text
from .shapes import Shape, resolve_shape, supported_shapes

logger = get_logger(__name__)

LessFunc = Callable[[Any, Any], bool]
ScoreFunc = Callable[[Any], float]


class Fns(NamedTuple):
    """Reusable comparator and score function for one shape."""
    less: LessFunc
    score: ScoreFunc


class FnScore(NamedTuple):
    """Reusable comparator plus the score of one concrete value."""
    less: LessFunc
    score: float


@dataclass(frozen=True)
class Ordering:
    """Comparison and score behavior of one shape in one direction."""
    shape: Shape
    less: LessFunc
    score: ScoreFunc
    descending: bool = False

    def reversed(self) -> "Ordering":
        """Mirror image: swapped comparator arguments, negated score."""
        ascending_less = self.less
        ascending_score = self.score

        def less(a: Any, b: Any) -> bool:
            return ascending_less(b, a)

        def score(value: Any) -> float:
            return -ascending_score(value)

        return Ordering(self.shape, less, score, not self.descending)


# =============================================================================
# PER-SHAPE BEHAVIOR
# =============================================================================

def _natural_less(a: Any, b: Any) -> bool:
    # NumPy comparisons return numpy.bool_
    return bool(a < b)


def _capability_less(a: Any, b: Any) -> bool:
    return bool(a.less(b))


def _capability_score(value: Any) -> float:
    return float(value.score())


def _constant_score(value: Any) -> float:
    return 0.0


def _ascending(shape: Shape, config: Config) -> Ordering:
    if shape.constant_score:
        return Ordering(shape, _capability_less, _constant_score)
    if shape is Shape.SCORED:
        return Ordering(shape, _capability_less, _capability_score)
    if shape is Shape.BYTES:
        return Ordering(shape, _natural_less, score_bytes)
    if shape is Shape.TEXT:
        return Ordering(shape, _natural_less, score_text)
    if shape.is_integer:
        return Ordering(shape, _natural_less, partial(score_integer, config=config))
    return Ordering(shape, _natural_less, score_float)


@lru_cache(maxsize=None)
def build_orderings(config: Config) -> Mapping[Shape, Tuple[Ordering, Ordering]]:
    """
    Build the behavior table for a configuration.

    Args:
        config: Active configuration (frozen, so it keys the cache)

    Returns:
        Read-only mapping of shape -> (ascending, descending)
    """
    table = {}
    for shape in supported_shapes():
        ascending = _ascending(shape, config)
        table[shape] = (ascending, ascending.reversed())
    logger.debug(f"Built ordering table for {len(table)} shapes with {config}")
    return MappingProxyType(table)


def resolve_ordering(
    value: Any,
    descending: bool = False,
    config: Optional[Config] = None,
) -> Ordering:
    """
    Resolve the Ordering for a value's shape.

    Raises:
        UnsupportedShapeError: If the value matches no supported shape
    """
    try:
        shape = resolve_shape(value)
    except UnsupportedShapeError as e:
        logger.debug(f"Rejected value of unsupported type {e.type_name}")
        raise

    ascending, reversed_ = build_orderings(config or DEFAULT_CONFIG)[shape]
    return reversed_ if descending else ascending


# =============================================================================
# ENTRY POINTS
# =============================================================================

def fns(sample: Any, config: Optional[Config] = None) -> Fns:
    """
    Comparator and score function for sorting values like ``sample``
    in increasing order.

    Only the shape of ``sample`` is used. If the container cannot
    conveniently cache the results, consider ``fn_score`` instead.

    Raises:
        UnsupportedShapeError: If ``sample`` matches no supported shape
    """
    ordering = resolve_ordering(sample, descending=False, config=config)
    return Fns(ordering.less, ordering.score)


def fns_reversed(sample: Any, config: Optional[Config] = None) -> Fns:
    """Like ``fns``, but sorts in decreasing order."""
    ordering = resolve_ordering(sample, descending=True, config=config)
    return Fns(ordering.less, ordering.score)


def fn_score(value: Any, config: Optional[Config] = None) -> FnScore:
    """
    Comparator for values like ``value`` plus the score of ``value``.

    Used by containers that do not cache the less and score functions.

    Args:
        value: The value to score
        config: Optional configuration override

    Returns:
        FnScore(less, score)

    Raises:
        UnsupportedShapeError: If ``value`` matches no supported shape
    """
    ordering = resolve_ordering(value, descending=False, config=config)
    return FnScore(ordering.less, ordering.score(value))


def fn_score_reversed(value: Any, config: Optional[Config] = None) -> FnScore:
    """Like ``fn_score``, but for sorting in decreasing order."""
    ordering = resolve_ordering(value, descending=True, config=config)
    return FnScore(ordering.less, ordering.score(value))
