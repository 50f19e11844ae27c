__all__ = (
    "DEFAULT_STORAGE",
    "MAX_FRACTION_DIGITS",
    "MAX_INT8",
    "MAX_INT16",
    "MAX_INT32",
    "MAX_INT64",
    "MAX_INT128",
    "MAX_PRECISION",
    "MAX_UINT8",
    "MAX_UINT16",
    "MAX_UINT32",
    "MAX_UINT64",
    "MAX_UINT128",
    "MIN_INT8",
    "MIN_INT16",
    "MIN_INT32",
    "MIN_INT64",
    "MIN_INT128",
    "MIN_PRECISION",
    "MIN_UINT8",
    "MIN_UINT16",
    "MIN_UINT32",
    "MIN_UINT64",
    "MIN_UINT128",
    "POINTER_WIDTH",
)

import typing


def _min_uint(_: int) -> int:
    return 0


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


def _min_int(bits: int) -> int:
    return typing.cast("int", -(2 ** (bits - 1)))


def _max_int(bits: int) -> int:
    return typing.cast("int", (2 ** (bits - 1)) - 1)


MIN_INT8 = _min_int(8)
MAX_INT8 = _max_int(8)

MIN_INT16 = _min_int(16)
MAX_INT16 = _max_int(16)

MIN_INT32 = _min_int(32)
MAX_INT32 = _max_int(32)

MIN_INT64 = _min_int(64)
MAX_INT64 = _max_int(64)

MIN_INT128 = _min_int(128)
MAX_INT128 = _max_int(128)

MIN_UINT8 = _min_uint(8)
MAX_UINT8 = _max_uint(8)

MIN_UINT16 = _min_uint(16)
MAX_UINT16 = _max_uint(16)

MIN_UINT32 = _min_uint(32)
MAX_UINT32 = _max_uint(32)

MIN_UINT64 = _min_uint(64)
MAX_UINT64 = _max_uint(64)

MIN_UINT128 = _min_uint(128)
MAX_UINT128 = _max_uint(128)

# usize / isize are modeled on a 64-bit target
POINTER_WIDTH = 64

# Precision is the length of a digit string, held in a single byte
MIN_PRECISION = 0
MAX_PRECISION = 255

# Fraction digits beyond this length are discarded before scaling
MAX_FRACTION_DIGITS = 255

# Storage kind used by literals without a type suffix
DEFAULT_STORAGE = "i32"
