"""
Fixed-point decimal values backed by a bounded integer.

A `FixedPoint[T, D]` value stores one integer of kind `T` whose real value is `stored / 10**D`.
Concrete types are created by subscription and cached, so `FixedPoint[I32, 2]` and
`FixedPoint["i32", 2]` are the same class:

```
Price = FixedPoint[U16, 2]
price = Price.from_str("1.25")      # stored value 125
str(price / 2)                      # "0.62", the stored integer is divided and truncated
```

Dividing by a scalar divides the stored integer, so `FixedPoint[I32, 1](10) / 3` has stored value
3 ("0.3"). Division by another fixed-point value is not supported.
"""

import math
import re
import threading
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from decifix.constants import MAX_FRACTION_DIGITS, MAX_PRECISION, MIN_PRECISION
from decifix.exceptions import (
    DecifixTypeError,
    DecifixValueError,
    FixedPointParseError,
    FixedPointRangeError,
    PrecisionMismatch,
    UnsupportedConversion,
)
from decifix.integer_kinds import I32, IntegerKind, get_integer_kind
from decifix.logging import logger

__all__ = (
    "FixedPoint",
    "div_toward_zero",
    "parse_fixed_point",
)

_FIXED_POINT_PATTERN = re.compile(r"(-?)([0-9]+)(?:\.([0-9]+))?")


def div_toward_zero(numerator: int, denominator: int) -> int:
    """
    Divide two integers, truncating the quotient toward zero.

    Python floor division rounds toward negative infinity, which differs for negative operands.
    """

    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _reconstruct(kind_name: str, precision: int, stored: int) -> "FixedPoint":
    return FixedPoint[kind_name, precision](stored)


class FixedPoint:
    """
    An immutable fixed-point decimal value.

    Subscript with an integer kind and a precision (number of decimal digits, 0-255) to get a
    concrete type. Values of different concrete types cannot be combined. Calling a concrete type
    without a stored value gives zero, and `sum(values)` works because integer zero is accepted as
    the left operand of `+`. No other plain integer can be added to a fixed-point value.
    """

    __slots__ = ("_stored",)

    storage: ClassVar[IntegerKind]
    precision: ClassVar[int]

    _types: ClassVar[dict[tuple[IntegerKind, int], type["FixedPoint"]]] = {}
    _types_lock: ClassVar[threading.Lock] = threading.Lock()

    def __class_getitem__(cls, params: tuple[IntegerKind | str, int]) -> type["FixedPoint"]:
        if cls._is_parameterized():
            raise DecifixTypeError(message=f"{cls.__name__} is already parameterized")

        try:
            kind, precision = params
        except (TypeError, ValueError):
            raise DecifixTypeError(
                message="FixedPoint must be subscripted with an integer kind and a precision"
            ) from None

        kind = get_integer_kind(kind)
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise DecifixTypeError(message=f"Precision must be an int, got {precision!r}")
        if not (MIN_PRECISION <= precision <= MAX_PRECISION):
            raise DecifixValueError(
                message=f"Precision {precision} outside range {MIN_PRECISION}-{MAX_PRECISION}"
            )

        key = (kind, precision)
        with cls._types_lock:
            if key not in cls._types:
                name = f"FixedPoint[{kind.name}, {precision}]"
                cls._types[key] = type(
                    name,
                    (FixedPoint,),
                    {
                        "__slots__": (),
                        "__module__": __name__,
                        "__qualname__": name,
                        "storage": kind,
                        "precision": precision,
                    },
                )
                logger.debug(f"Created fixed-point type {name}")
            return cls._types[key]

    @classmethod
    def _is_parameterized(cls) -> bool:
        return "storage" in cls.__dict__

    def __init__(self, stored: int = 0) -> None:
        if not self._is_parameterized():
            raise DecifixTypeError(
                message="FixedPoint must be parameterized before use, e.g. FixedPoint[I32, 2]"
            )
        if isinstance(stored, bool) or not isinstance(stored, int):
            raise DecifixTypeError(message=f"Stored value must be an int, got {stored!r}")
        object.__setattr__(self, "_stored", self.storage.check(stored))

    def __setattr__(self, name: str, value: Any) -> None:
        raise DecifixTypeError(message=f"{type(self).__name__} values are immutable")

    def __delattr__(self, name: str) -> None:
        raise DecifixTypeError(message=f"{type(self).__name__} values are immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        # Concrete types are created at runtime and cannot be located by name during unpickling
        return _reconstruct, (self.storage.name, self.precision, self._stored)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    @classmethod
    def new(cls, number: int, decimal: int) -> Self:
        """
        Create a value from an integer already scaled to `decimal` fractional digits, e.g.
        `FixedPoint[I32, 3].new(11, 1)` is 1.1 with stored value 1100.

        The source precision must not exceed the precision of the type. Callers narrowing a value
        must truncate it first.
        """

        if isinstance(decimal, bool) or not isinstance(decimal, int):
            raise DecifixTypeError(message=f"Decimal digit count must be an int, got {decimal!r}")
        if not (0 <= decimal <= cls.precision):
            raise DecifixValueError(
                message=f"Source precision {decimal} exceeds the type precision {cls.precision}"
            )
        return cls(number * cls.storage.pow10(cls.precision - decimal))

    @property
    def stored(self) -> int:
        return self._stored

    def decimal_length(self) -> int:
        return self.precision

    def exp(self) -> int:
        return self.storage.pow10(self.precision)

    def integer(self) -> int:
        """
        The integer part, truncated toward zero.
        """

        return div_toward_zero(self._stored, self.exp())

    def decimal(self) -> int:
        """
        The fractional part as an integer scaled by `exp()`. The sign follows the stored value.
        """

        return self._stored - self.integer() * self.exp()

    # ---------------------------------------------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------------------------------------------

    def _same_type_stored(self, other: object) -> int:
        if type(other) is not type(self):
            raise PrecisionMismatch(left=type(self).__name__, right=type(other).__name__)
        assert isinstance(other, FixedPoint)
        return other._stored

    @staticmethod
    def _scalar(value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecifixTypeError(
                message=f"Fixed-point values only support integer scalars, got {value!r}"
            )
        return value

    def __add__(self, other: object) -> Self:
        return type(self)(self._stored + self._same_type_stored(other))

    def __radd__(self, other: object) -> Self:
        # integer zero is the start value of the builtin `sum`
        if type(other) is int and other == 0:
            return self
        return self.__add__(other)

    def __sub__(self, other: object) -> Self:
        return type(self)(self._stored - self._same_type_stored(other))

    def __mul__(self, other: object) -> Self:
        return type(self)(self._stored * self._scalar(other))

    def __rmul__(self, other: object) -> Self:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Self:
        """
        Divide the stored integer by an integer scalar, truncating toward zero.
        """

        return type(self)(div_toward_zero(self._stored, self._scalar(other)))

    def __neg__(self) -> Self:
        return type(self)(-self._stored)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return type(self)(abs(self._stored))

    def __bool__(self) -> bool:
        return self._stored != 0

    # ---------------------------------------------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, FixedPoint)
        return self._stored == other._stored

    def __hash__(self) -> int:
        return hash((self.storage, self.precision, self._stored))

    def __lt__(self, other: object) -> bool:
        return self._stored < self._same_type_stored(other)

    def __le__(self, other: object) -> bool:
        return self._stored <= self._same_type_stored(other)

    def __gt__(self, other: object) -> bool:
        return self._stored > self._same_type_stored(other)

    def __ge__(self, other: object) -> bool:
        return self._stored >= self._same_type_stored(other)

    # ---------------------------------------------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------------------------------------------

    def __float__(self) -> float:
        """
        Widen the stored integer through i32 and divide by the scale exponent.

        Storage kinds that do not convert losslessly into i32 (u32 and anything wider than 32 bits)
        are not supported.
        """

        if not self.storage.converts_into(I32):
            raise UnsupportedConversion(kind=self.storage.name, target=I32.name)
        return float(I32.check(self._stored)) / self.exp()

    @classmethod
    def from_float(cls, value: float) -> Self:
        """
        Scale a float by `10**D`, truncate toward zero and check the result against the storage.
        """

        if not math.isfinite(value):
            raise FixedPointRangeError(message=f"Not fixed-point: {value} is not a finite number")
        out_of_range = FixedPointRangeError(
            message=(
                f"Not fixed-point: {value} does not fit {cls.storage.name} storage with "
                f"{cls.precision} decimal digits"
            )
        )
        try:
            scaled = int(value * cls.storage.pow10(cls.precision))
        except OverflowError:
            raise out_of_range from None
        if not cls.storage.contains(scaled):
            raise out_of_range
        return cls(scaled)

    @classmethod
    def from_str(cls, string: str) -> Self:
        """
        Parse `[-]digits['.'digits]`.

        Extra fractional digits are truncated. Malformed strings and values outside the storage
        kind both raise `FixedPointParseError`.
        """

        if not isinstance(string, str):
            raise DecifixTypeError(message=f"Expected a string, got {string!r}")

        match = _FIXED_POINT_PATTERN.fullmatch(string)
        if match is None:
            raise FixedPointParseError

        sign, integer_digits, fraction_digits = match.groups()
        negative = sign == "-"

        try:
            stored = int(integer_digits) * cls.storage.pow10(cls.precision)
        except ValueError:
            # integer strings beyond the interpreter's digit limit
            raise FixedPointParseError from None
        if negative:
            stored = -stored

        if fraction_digits is not None:
            fraction_digits = fraction_digits[:MAX_FRACTION_DIGITS]
            fraction_length = len(fraction_digits)
            fraction = int(fraction_digits)
            if negative:
                fraction = -fraction
            if cls.precision >= fraction_length:
                fraction *= cls.storage.pow10(cls.precision - fraction_length)
            else:
                fraction = div_toward_zero(
                    fraction, cls.storage.pow10(fraction_length - cls.precision)
                )
            stored += fraction

        if not cls.storage.contains(stored):
            raise FixedPointParseError
        return cls(stored)

    def __str__(self) -> str:
        integer = self.integer()
        decimal = abs(self.decimal())
        if self.precision == 0 or decimal == 0:
            return f"{integer}.0"

        length = self.precision
        while decimal % 10 == 0:
            decimal //= 10
            length -= 1

        # -0.x has an integer part of zero, which carries no sign
        sign = "-" if integer == 0 and self._stored < 0 else ""
        return f"{sign}{integer}.{decimal:0{length}d}"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._stored})"

    # ---------------------------------------------------------------------------------------------
    # Pydantic integration
    # ---------------------------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        if not cls._is_parameterized():
            raise DecifixTypeError(
                message="Use a parameterized type such as FixedPoint[I32, 2] in models"
            )

        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                float,
                return_schema=core_schema.float_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return handler(core_schema.float_schema())

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if type(value) is cls:
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticCustomError("float_type", "Input should be a valid number")
        try:
            return cls.from_float(value)
        except FixedPointRangeError as exc:
            raise PydanticCustomError(
                "fixed_point_range",
                "{error}",
                {"error": exc.message},
            ) from exc


def parse_fixed_point(string: str, storage: IntegerKind | str, precision: int) -> FixedPoint:
    """
    Parse a string into a `FixedPoint[storage, precision]` value.
    """

    return FixedPoint[storage, precision].from_str(string)
