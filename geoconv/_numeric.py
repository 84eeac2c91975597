import decimal
import inspect
import math
import numbers
from typing import Any, Type, TypeVar

from ._errors import DecodeError, EncodeError, ValidationError

__all__ = ("check_coordinate_type", "to_double", "from_double")

T = TypeVar("T")

_CHECKED_TYPES = {float: float}


def check_coordinate_type(type: Any) -> Type:
    """Check that ``type`` can be used as a coordinate type.

    Coordinate types need floating point semantics: any subclass of
    `numbers.Real` that isn't integral (``float``, ``fractions.Fraction``,
    numpy floating scalars), or ``decimal.Decimal``.

    Parameters
    ----------
    type : type
        The candidate coordinate type.

    Returns
    -------
    type : type
        The same type, once checked.

    Raises
    ------
    TypeError
        If ``type`` isn't a supported coordinate type.
    """
    try:
        return _CHECKED_TYPES[type]
    except (KeyError, TypeError):
        pass

    if not inspect.isclass(type):
        raise TypeError(f"Coordinate type must be a class, got {type!r}")
    if issubclass(type, decimal.Decimal) or (
        issubclass(type, numbers.Real) and not issubclass(type, numbers.Integral)
    ):
        _CHECKED_TYPES[type] = type
        return type
    raise TypeError(
        f"Coordinate type must have floating point semantics, got `{type.__name__}`"
    )


def to_double(value: Any) -> float:
    """Convert a coordinate value to a ``float``.

    Raises `EncodeError` if the value can't be represented as a double,
    rather than letting it silently become ``inf``.
    """
    if isinstance(value, (str, bytes, bytearray, bool)):
        raise EncodeError(
            f"Expected a number, got `{value.__class__.__name__}`: {value!r}"
        )
    try:
        out = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise EncodeError(f"Can't represent {value!r} as a double: {exc}") from None
    # `float(Decimal("1e400"))` doesn't raise, it rounds to inf
    if math.isinf(out) and out != value:
        raise EncodeError(f"Can't represent {value!r} as a double: out of range")
    return out


def _overflowed(out, value):
    try:
        return math.isinf(out) and not math.isinf(value)
    except (TypeError, ValueError, OverflowError):
        return False


def from_double(value: float, type: Type[T]) -> T:
    """Convert a ``float`` to a coordinate value of type ``type``.

    Raises `ValidationError` if ``value`` isn't a real number, and
    `DecodeError` if ``type`` can't hold the value.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"Expected a number, got `{value.__class__.__name__}`: {value!r}"
        )
    try:
        out = type(value)
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise DecodeError(
            f"Can't represent {value!r} as `{type.__name__}`: {exc}"
        ) from None
    if _overflowed(out, value):
        raise DecodeError(
            f"Can't represent {value!r} as `{type.__name__}`: out of range"
        )
    return out
