"""
ordfns Score Primitives.

A score is a float that never contradicts the comparison order of its
shape: if a < b then score(a) <= score(b).

Rules:
    numbers     score = float(value), exact up to 2**53 in magnitude
    bytes/text  first 6 bytes, big-endian, zero-padded on the right

Sequences sharing their first 6 bytes tie. 6 bytes (48 bits) always fit
in the 53-bit float mantissa, so the packed integer is exact.
"""

import math
from typing import Any, Union

from ..config import Config
from ..logging_config import get_logger

logger = get_logger(__name__)

SCORE_PREFIX_BYTES = 6

# Largest magnitude at which every integer has an exact float
MAX_EXACT_INTEGER = 2 ** 53


def score_bytes(data: Union[bytes, bytearray]) -> float:
    """
    Pack up to the first 6 bytes of data into an integer-valued float.

    Args:
        data: Byte sequence

    Returns:
        Score in [0, 2**48)

    Example:
        >>> score_bytes(b"ab")
        107073534689280.0
    """
    prefix = bytes(data[:SCORE_PREFIX_BYTES]).ljust(SCORE_PREFIX_BYTES, b"\x00")
    return float(int.from_bytes(prefix, "big"))


def score_text(text: str) -> float:
    """Score text by its UTF-8 bytes (UTF-8 preserves code point order)."""
    # Only the first 6 code points can reach the first 6 bytes
    return score_bytes(text[:SCORE_PREFIX_BYTES].encode("utf-8", "surrogatepass"))


def score_float(value: Any) -> float:
    return float(value)


def score_integer(value: Any, config: Config) -> float:
    """
    Widen an integer to a float score.

    NumPy integers always fit a float. Python ints are unbounded; past the
    float range they clamp to +/-inf, which keeps the score monotonic.

    Args:
        value: Python int or NumPy integer scalar
        config: Active configuration

    Returns:
        float(value), or +/-inf past the float range
    """
    try:
        result = float(value)
    except OverflowError:
        result = math.inf if value > 0 else -math.inf

    if config.warn_precision_loss and abs(int(value)) > MAX_EXACT_INTEGER:
        logger.warning(
            f"Score for {type(value).__name__} value {int(value)} is not exact "
            f"(magnitude above 2**53)"
        )
    return result
