from typing import Annotated

from pydantic import AfterValidator, Field
from typing_extensions import TypeAliasType

from decifix.constants import MAX_PRECISION, MIN_PRECISION
from decifix.integer_kinds import INTEGER_KINDS

ValidatedPrecision = TypeAliasType(
    "ValidatedPrecision", Annotated[int, Field(strict=True, ge=MIN_PRECISION, le=MAX_PRECISION)]
)


def _check_kind_name(name: str) -> str:
    name = name.lower()
    if name not in INTEGER_KINDS:
        msg = f"Unknown integer kind {name!r}, expected one of {', '.join(INTEGER_KINDS)}"
        raise ValueError(msg)
    return name


ValidatedKindName = TypeAliasType("ValidatedKindName", Annotated[str, AfterValidator(_check_kind_name)])
