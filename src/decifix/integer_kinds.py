__all__ = (
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INTEGER_KINDS",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "IntegerKind",
    "get_integer_kind",
)

import dataclasses

from decifix.constants import (
    MAX_INT8,
    MAX_INT16,
    MAX_INT32,
    MAX_INT64,
    MAX_INT128,
    MAX_UINT8,
    MAX_UINT16,
    MAX_UINT32,
    MAX_UINT64,
    MAX_UINT128,
    MIN_INT8,
    MIN_INT16,
    MIN_INT32,
    MIN_INT64,
    MIN_INT128,
    MIN_UINT8,
    MIN_UINT16,
    MIN_UINT32,
    MIN_UINT64,
    MIN_UINT128,
    POINTER_WIDTH,
)
from decifix.exceptions import DecifixValueError, IntegerOverflow

# (bits, signed) -> (min, max)
_BOUNDS: dict[tuple[int, bool], tuple[int, int]] = {
    (8, False): (MIN_UINT8, MAX_UINT8),
    (8, True): (MIN_INT8, MAX_INT8),
    (16, False): (MIN_UINT16, MAX_UINT16),
    (16, True): (MIN_INT16, MAX_INT16),
    (32, False): (MIN_UINT32, MAX_UINT32),
    (32, True): (MIN_INT32, MAX_INT32),
    (64, False): (MIN_UINT64, MAX_UINT64),
    (64, True): (MIN_INT64, MAX_INT64),
    (128, False): (MIN_UINT128, MAX_UINT128),
    (128, True): (MIN_INT128, MAX_INT128),
}


@dataclasses.dataclass(slots=True, frozen=True)
class IntegerKind:
    """
    A fixed-width integer used as the storage for fixed-point values.

    Python integers are unbounded, so the kind carries the bounds and checks every stored value
    against them instead of wrapping.
    """

    name: str
    bits: int
    signed: bool

    def __repr__(self) -> str:
        return self.name.upper()

    def __str__(self) -> str:
        return self.name

    @property
    def min_value(self) -> int:
        return _BOUNDS[self.bits, self.signed][0]

    @property
    def max_value(self) -> int:
        return _BOUNDS[self.bits, self.signed][1]

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def check(self, value: int) -> int:
        """
        Return the value unchanged if the kind can represent it, otherwise raise `IntegerOverflow`.
        """

        if not self.contains(value):
            raise IntegerOverflow(value=value, kind=self.name)
        return value

    def converts_into(self, other: "IntegerKind") -> bool:
        """
        Whether every value of this kind is also a value of `other`.
        """

        return other.min_value <= self.min_value and self.max_value <= other.max_value

    @staticmethod
    def ten() -> int:
        return 10

    @staticmethod
    def zero() -> int:
        return 0

    def pow10(self, exponent: int) -> int:
        return self.ten() ** exponent


U8 = IntegerKind("u8", 8, signed=False)
I8 = IntegerKind("i8", 8, signed=True)
U16 = IntegerKind("u16", 16, signed=False)
I16 = IntegerKind("i16", 16, signed=True)
U32 = IntegerKind("u32", 32, signed=False)
I32 = IntegerKind("i32", 32, signed=True)
U64 = IntegerKind("u64", 64, signed=False)
I64 = IntegerKind("i64", 64, signed=True)
U128 = IntegerKind("u128", 128, signed=False)
I128 = IntegerKind("i128", 128, signed=True)
USIZE = IntegerKind("usize", POINTER_WIDTH, signed=False)
ISIZE = IntegerKind("isize", POINTER_WIDTH, signed=True)

INTEGER_KINDS: dict[str, IntegerKind] = {
    kind.name: kind for kind in (U8, I8, U16, I16, U32, I32, U64, I64, U128, I128, USIZE, ISIZE)
}


def get_integer_kind(kind: IntegerKind | str) -> IntegerKind:
    """
    Resolve an integer kind from an `IntegerKind` instance or its name, e.g. "u16".
    """

    if isinstance(kind, IntegerKind):
        return kind
    try:
        return INTEGER_KINDS[kind.lower()]
    except (KeyError, AttributeError):
        raise DecifixValueError(message=f"Unknown integer kind {kind!r}") from None
