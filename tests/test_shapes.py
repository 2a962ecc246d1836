"""
Tests for shape resolution.

Tests the priority order of resolution, the capability protocols,
NumPy alias handling, and diagnostic type names.
"""

from dataclasses import dataclass

import numpy as np
import pytest

from ordfns import fn_score, fns
from ordfns.core.exceptions import UnsupportedShapeError
from ordfns.core.shapes import (
    Ordered,
    Scored,
    Shape,
    resolve_shape,
    supported_shapes,
    type_name,
)


class Plain:
    def less(self, other):
        return False


class Rich:
    def less(self, other):
        return False

    def score(self):
        return 0.0


class ScoreOnly:
    def score(self):
        return 1.0


@dataclass
class Task:
    priority: int
    score: float

    def less(self, other):
        return self.priority < other.priority


class LessAttribute:
    less = True


class TestProtocols:
    """Tests for the Ordered and Scored capability protocols."""

    def test_plain_is_ordered_not_scored(self):
        assert isinstance(Plain(), Ordered)
        assert not isinstance(Plain(), Scored)

    def test_rich_is_both(self):
        assert isinstance(Rich(), Ordered)
        assert isinstance(Rich(), Scored)

    def test_score_without_less_is_neither(self):
        assert not isinstance(ScoreOnly(), Ordered)
        assert not isinstance(ScoreOnly(), Scored)

    def test_builtins_have_no_capability(self):
        for value in (1, 1.0, "a", b"a", np.int8(1)):
            assert not isinstance(value, Ordered)


class TestResolveShape:
    """Tests for resolve_shape()."""

    @pytest.mark.parametrize("value,shape", [
        (Rich(), Shape.SCORED),
        (Plain(), Shape.ORDERED),
        (b"abc", Shape.BYTES),
        (bytearray(b"abc"), Shape.BYTES),
        (np.bytes_(b"abc"), Shape.BYTES),
        ("abc", Shape.TEXT),
        (np.str_("abc"), Shape.TEXT),
        (7, Shape.INT),
        (7.5, Shape.FLOAT64),
        (np.int8(1), Shape.INT8),
        (np.int16(1), Shape.INT16),
        (np.int32(1), Shape.INT32),
        (np.int64(1), Shape.INT64),
        (np.uint8(1), Shape.UINT8),
        (np.uint16(1), Shape.UINT16),
        (np.uint32(1), Shape.UINT32),
        (np.uint64(1), Shape.UINT64),
        (np.float32(1), Shape.FLOAT32),
        (np.float64(1), Shape.FLOAT64),
    ])
    def test_supported(self, value, shape):
        assert resolve_shape(value) is shape

    @pytest.mark.parametrize("value", [np.intp(1), np.intc(1), np.longlong(1)])
    def test_native_signed_aliases(self, value):
        assert resolve_shape(value) in (Shape.INT32, Shape.INT64)

    @pytest.mark.parametrize("value", [np.uintp(1), np.uint(1), np.ulonglong(1)])
    def test_native_unsigned_aliases(self, value):
        assert resolve_shape(value) in (Shape.UINT32, Shape.UINT64)

    def test_int_subclass(self):
        from enum import IntEnum

        class Level(IntEnum):
            LOW = 1

        assert resolve_shape(Level.LOW) is Shape.INT

    def test_scored_beats_ordered(self):
        class Both(Plain):
            def score(self):
                return 1.0

        assert resolve_shape(Both()) is Shape.SCORED

    def test_capability_beats_text(self):
        class OrderedText(str):
            def less(self, other):
                return len(self) < len(other)

        assert resolve_shape(OrderedText("a")) is Shape.ORDERED

    @pytest.mark.parametrize("value", [
        True, np.bool_(False), None, (), [], {}, set(), 1j,
        np.float16(1), np.complex64(1), memoryview(b"a"), ScoreOnly(),
    ])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedShapeError):
            resolve_shape(value)

    def test_error_message(self):
        with pytest.raises(UnsupportedShapeError) as exc_info:
            resolve_shape({})

        assert str(exc_info.value) == "cannot order type dict: no method less(other) -> bool"


class TestShapeProperties:
    """Tests for Shape enum helpers."""

    def test_constant_score(self):
        assert [s for s in Shape if s.constant_score] == [Shape.ORDERED]

    def test_is_integer(self):
        integers = {s for s in Shape if s.is_integer}

        assert Shape.INT in integers
        assert Shape.UINT64 in integers
        assert Shape.FLOAT32 not in integers
        assert Shape.BYTES not in integers
        assert len(integers) == 9

    def test_supported_shapes_in_priority_order(self):
        shapes = supported_shapes()

        assert shapes[:4] == (Shape.SCORED, Shape.ORDERED, Shape.BYTES, Shape.TEXT)
        assert len(shapes) == len(Shape)


class TestTypeName:
    """Tests for type_name()."""

    def test_builtin(self):
        assert type_name(1) == "int"
        assert type_name({}) == "dict"

    def test_numpy(self):
        assert type_name(np.float16(1)) == "numpy.float16"

    def test_user_class(self):
        assert type_name(Plain()).endswith("test_shapes.Plain")


class TestNonCallableCapabilities:
    """Attributes that share a capability name but are not methods."""

    def test_score_field_is_not_rich_capability(self):
        assert resolve_shape(Task(1, 0.5)) is Shape.ORDERED

    def test_score_field_scores_as_plain_capability(self):
        low, high = Task(1, 9.0), Task(2, 0.5)
        less, score = fns(low)

        assert less(low, high) is True
        assert score(low) == score(high) == 0.0
        assert fn_score(low).score == 0.0

    def test_less_attribute_is_unsupported(self):
        with pytest.raises(UnsupportedShapeError) as exc_info:
            resolve_shape(LessAttribute())

        assert exc_info.value.type_name.endswith("LessAttribute")
