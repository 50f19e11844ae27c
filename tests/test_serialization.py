import math

import pydantic
import pydantic_core
import pytest

from decifix.exceptions import DecifixTypeError, FixedPointRangeError
from decifix.fixed_point import FixedPoint
from decifix.integer_kinds import I16, I32, I64, U8


class SensorReading(pydantic.BaseModel):
    temperature: FixedPoint[I16, 2]
    humidity: FixedPoint[U8, 1] | None = None


def test_validate_from_float():
    reading = SensorReading(temperature=21.5)
    assert type(reading.temperature) is FixedPoint[I16, 2]
    assert reading.temperature.stored == 2_150
    assert str(reading.temperature) == "21.5"


def test_validate_from_int():
    reading = SensorReading(temperature=-3)
    assert reading.temperature.stored == -300


def test_validate_instance_passthrough():
    temperature = FixedPoint[I16, 2](2_150)
    reading = SensorReading(temperature=temperature)
    assert reading.temperature is temperature


def test_serialize_as_float():
    reading = SensorReading(temperature=FixedPoint[I16, 2](-125), humidity=FixedPoint[U8, 1](255))
    assert reading.model_dump() == {"temperature": -1.25, "humidity": 25.5}
    assert reading.model_dump_json() == '{"temperature":-1.25,"humidity":25.5}'


def test_json_round_trip():
    reading = SensorReading.model_validate_json('{"temperature": -1.25, "humidity": 42.0}')
    assert reading.temperature.stored == -125
    assert reading.humidity is not None
    assert reading.humidity.stored == 420
    assert SensorReading.model_validate_json(reading.model_dump_json()) == reading


def test_out_of_range_rejected():
    with pytest.raises(pydantic.ValidationError) as exc_info:
        SensorReading(temperature=400.0)

    (error,) = exc_info.value.errors()
    assert error["type"] == "fixed_point_range"
    assert error["loc"] == ("temperature",)
    assert "Not fixed-point" in error["msg"]

    with pytest.raises(pydantic.ValidationError):
        SensorReading(temperature=1.0, humidity=-0.5)


def test_non_finite_rejected():
    for value in (math.nan, math.inf, -math.inf):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            SensorReading(temperature=value)
        assert exc_info.value.errors()[0]["type"] == "fixed_point_range"


def test_non_numeric_rejected():
    for value in ("21.5", True, None, FixedPoint[I16, 3](1)):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            SensorReading(temperature=value)
        assert exc_info.value.errors()[0]["type"] == "float_type"


def test_json_schema():
    schema = SensorReading.model_json_schema()
    assert schema["properties"]["temperature"]["type"] == "number"


def test_from_float():
    assert FixedPoint[U8, 1].from_float(25.5).stored == 255
    assert FixedPoint[I32, 2].from_float(0.5).stored == 50
    assert FixedPoint[I32, 0].from_float(1e9).stored == 1_000_000_000

    # Truncation toward zero after scaling
    assert FixedPoint[I32, 1].from_float(-1.25).stored == -12
    assert FixedPoint[I32, 1].from_float(1.25).stored == 12


def test_from_float_errors():
    with pytest.raises(FixedPointRangeError, match="does not fit u8 storage with 1 decimal digits"):
        FixedPoint[U8, 1].from_float(25.75)
    with pytest.raises(FixedPointRangeError):
        FixedPoint[U8, 1].from_float(-0.5)
    with pytest.raises(FixedPointRangeError, match="not a finite number"):
        FixedPoint[I32, 2].from_float(math.inf)
    with pytest.raises(FixedPointRangeError):
        FixedPoint[I64, 10].from_float(1e308)


def test_wide_storage_cannot_serialize():
    class Ledger(pydantic.BaseModel):
        balance: FixedPoint[I64, 2]

    ledger = Ledger(balance=12.5)
    assert ledger.balance.stored == 1_250
    with pytest.raises(pydantic_core.PydanticSerializationError):
        ledger.model_dump_json()


def test_unparameterized_annotation_rejected():
    with pytest.raises(DecifixTypeError):

        class Broken(pydantic.BaseModel):
            value: FixedPoint
