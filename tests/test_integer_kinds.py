import pytest

from decifix import constants
from decifix.exceptions import DecifixValueError, IntegerOverflow
from decifix.integer_kinds import (
    I8,
    I16,
    I32,
    I64,
    I128,
    INTEGER_KINDS,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    get_integer_kind,
)


@pytest.mark.parametrize(
    ("kind", "min_value", "max_value"),
    [
        (U8, constants.MIN_UINT8, constants.MAX_UINT8),
        (I8, constants.MIN_INT8, constants.MAX_INT8),
        (U16, constants.MIN_UINT16, constants.MAX_UINT16),
        (I16, constants.MIN_INT16, constants.MAX_INT16),
        (U32, constants.MIN_UINT32, constants.MAX_UINT32),
        (I32, constants.MIN_INT32, constants.MAX_INT32),
        (U64, constants.MIN_UINT64, constants.MAX_UINT64),
        (I64, constants.MIN_INT64, constants.MAX_INT64),
        (U128, constants.MIN_UINT128, constants.MAX_UINT128),
        (I128, constants.MIN_INT128, constants.MAX_INT128),
        (USIZE, constants.MIN_UINT64, constants.MAX_UINT64),
        (ISIZE, constants.MIN_INT64, constants.MAX_INT64),
    ],
)
def test_bounds(kind, min_value, max_value):
    assert kind.min_value == min_value
    assert kind.max_value == max_value


def test_bound_values():
    assert constants.MAX_UINT8 == 255
    assert constants.MIN_INT8 == -128
    assert constants.MAX_INT32 == 2_147_483_647
    assert constants.MAX_UINT128 == 2**128 - 1
    assert constants.POINTER_WIDTH == USIZE.bits == ISIZE.bits == 64


def test_all_kinds_registered():
    assert set(INTEGER_KINDS) == {
        "u8",
        "i8",
        "u16",
        "i16",
        "u32",
        "i32",
        "u64",
        "i64",
        "u128",
        "i128",
        "usize",
        "isize",
    }


def test_check():
    assert U8.check(0) == 0
    assert U8.check(255) == 255
    assert I16.check(-32768) == -32768

    with pytest.raises(IntegerOverflow) as exc_info:
        U8.check(256)
    assert exc_info.value.value == 256
    assert exc_info.value.kind == "u8"
    assert exc_info.value.message == "256 outside range of u8 values"

    with pytest.raises(IntegerOverflow):
        U16.check(-1)
    with pytest.raises(IntegerOverflow):
        I8.check(128)


def test_contains():
    assert U16.contains(65535)
    assert not U16.contains(65536)
    assert I8.contains(-128)
    assert not I8.contains(-129)


def test_converts_into():
    for kind in (U8, I8, U16, I16, I32):
        assert kind.converts_into(I32)
    for kind in (U32, I64, U64, I128, USIZE, ISIZE):
        assert not kind.converts_into(I32)
    assert U8.converts_into(U16)
    assert not I8.converts_into(U16)


def test_numeric_constants():
    assert I32.ten() == 10
    assert I32.zero() == 0
    assert U8.pow10(0) == 1
    assert U8.pow10(3) == 1_000
    assert I128.pow10(38) == 10**38


def test_get_integer_kind():
    assert get_integer_kind("u16") is U16
    assert get_integer_kind("U16") is U16
    assert get_integer_kind(I64) is I64

    with pytest.raises(DecifixValueError, match="Unknown integer kind"):
        get_integer_kind("u7")
    with pytest.raises(DecifixValueError, match="Unknown integer kind"):
        get_integer_kind(16)  # type: ignore[arg-type]


def test_repr_and_str():
    assert repr(I16) == "I16"
    assert str(I16) == "i16"
    assert repr(USIZE) == "USIZE"
