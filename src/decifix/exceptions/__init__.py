from decifix.exceptions.base import DecifixError, DecifixTypeError, DecifixValueError
from decifix.exceptions.fixed_point import (
    FixedPointError,
    FixedPointParseError,
    FixedPointRangeError,
    IntegerOverflow,
    PrecisionMismatch,
    UnsupportedConversion,
)
from decifix.exceptions.literal import InvalidConstantName, InvalidLiteral, LiteralError

from . import fixed_point, literal

__all__ = (
    "DecifixError",
    "DecifixTypeError",
    "DecifixValueError",
    "FixedPointError",
    "FixedPointParseError",
    "FixedPointRangeError",
    "IntegerOverflow",
    "InvalidConstantName",
    "InvalidLiteral",
    "LiteralError",
    "PrecisionMismatch",
    "UnsupportedConversion",
    "fixed_point",
    "literal",
)
