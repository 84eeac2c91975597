import math
from decimal import Decimal
from fractions import Fraction

import pytest

from geoconv import DecodeError, EncodeError, ValidationError, check_coordinate_type
from geoconv._numeric import from_double, to_double


class Clamped(float):
    """A float type with a narrower range, overflowing to inf like float32"""

    def __new__(cls, value):
        if abs(value) > 3.4e38:
            value = math.copysign(math.inf, value)
        return super().__new__(cls, value)


class TestCheckCoordinateType:
    @pytest.mark.parametrize("type", [float, Decimal, Fraction, Clamped])
    def test_supported(self, type):
        assert check_coordinate_type(type) is type

    @pytest.mark.parametrize("type", [int, bool, str, complex, object, list])
    def test_unsupported(self, type):
        with pytest.raises(TypeError, match="floating point semantics"):
            check_coordinate_type(type)

    @pytest.mark.parametrize("obj", [1.0, "float", None])
    def test_not_a_class(self, obj):
        with pytest.raises(TypeError, match="must be a class"):
            check_coordinate_type(obj)


class TestToDouble:
    @pytest.mark.parametrize(
        "value, sol",
        [
            (1.5, 1.5),
            (2, 2.0),
            (Decimal("0.25"), 0.25),
            (Fraction(1, 4), 0.25),
            (-0.0, -0.0),
        ],
    )
    def test_to_double(self, value, sol):
        out = to_double(value)
        assert type(out) is float
        assert out == sol

    def test_infinity_passes_through(self):
        assert to_double(math.inf) == math.inf
        assert to_double(Decimal("-Infinity")) == -math.inf

    def test_nan_passes_through(self):
        assert math.isnan(to_double(math.nan))

    def test_decimal_out_of_range(self):
        with pytest.raises(EncodeError, match="out of range"):
            to_double(Decimal("1e400"))

    def test_fraction_out_of_range(self):
        with pytest.raises(EncodeError):
            to_double(Fraction(10**400))

    @pytest.mark.parametrize(
        "value", ["abc", "1.5", b"2", bytearray(b"2"), True, False]
    )
    def test_not_a_number(self, value):
        with pytest.raises(EncodeError, match="Expected a number"):
            to_double(value)


class TestFromDouble:
    @pytest.mark.parametrize("type", [float, Decimal, Fraction, Clamped])
    def test_from_double(self, type):
        out = from_double(0.5, type)
        assert isinstance(out, type)
        assert out == 0.5

    def test_decimal_is_exact(self):
        assert from_double(0.1, Decimal) == Decimal(0.1)

    def test_out_of_range(self):
        with pytest.raises(DecodeError, match="out of range"):
            from_double(1e300, Clamped)

    def test_infinity_passes_through(self):
        assert from_double(math.inf, Clamped) == math.inf

    def test_unrepresentable(self):
        with pytest.raises(DecodeError):
            from_double(math.nan, Fraction)
        with pytest.raises(DecodeError):
            from_double(math.inf, Fraction)

    @pytest.mark.parametrize("value", ["1.5", "1e400", b"2", True, False, None])
    @pytest.mark.parametrize("type", [float, Decimal])
    def test_not_a_number(self, value, type):
        with pytest.raises(ValidationError, match="Expected a number"):
            from_double(value, type)

    def test_decimal_input_rejected(self):
        with pytest.raises(ValidationError):
            from_double(Decimal("1e400"), Decimal)

    def test_int_accepted(self):
        assert from_double(2, float) == 2.0
