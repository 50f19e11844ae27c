"""
Construction of fixed-point constants from decimal literal tokens.

A token is written like a numeric literal with an optional integer kind suffix, and underscores
may separate digits:

```
fixed("0.25", 3)        # FixedPoint[i32, 3], stored 250
fixed("-1.1i16", 2)     # FixedPoint[i16, 2], stored -110
fixed("1_1.0_1u16")     # FixedPoint[u16, 2], stored 1101, precision inferred from the token
```

The scaled integer is built directly from the digit string, so no floating point value is ever
involved. Extra fraction digits beyond the precision are truncated. Recently used literals are
cached, so a constant built in a loop is only parsed once.
"""

import dataclasses
import functools
import re

from decifix.config import settings
from decifix.constants import MAX_PRECISION, MIN_PRECISION
from decifix.exceptions import DecifixTypeError, DecifixValueError, InvalidLiteral
from decifix.fixed_point import FixedPoint
from decifix.integer_kinds import IntegerKind, get_integer_kind
from decifix.logging import logger

__all__ = (
    "LiteralValue",
    "fixed",
    "literal_components",
    "render_literal",
)

_LITERAL_PATTERN = re.compile(
    r"(?P<sign>-?)"
    r"(?P<integer>[0-9][0-9_]*)"
    r"(?:\.(?P<fraction>[0-9][0-9_]*))?"
    r"(?P<suffix>[iu](?:8|16|32|64|128|size))?"
)


@dataclasses.dataclass(slots=True, frozen=True)
class LiteralValue:
    storage: IntegerKind
    precision: int
    stored: int

    @property
    def fixed_point_type(self) -> type[FixedPoint]:
        return FixedPoint[self.storage, self.precision]

    def to_fixed_point(self) -> FixedPoint:
        return self.fixed_point_type(self.stored)


@functools.lru_cache(maxsize=512)
def _evaluate_literal(token: str, precision: int | None, default_storage: str) -> LiteralValue:
    match = _LITERAL_PATTERN.fullmatch(token)
    if match is None:
        raise InvalidLiteral(token)

    integer_digits = match["integer"].replace("_", "")
    fraction_digits = (match["fraction"] or "").replace("_", "")
    storage = get_integer_kind(match["suffix"] or default_storage)

    if precision is None:
        precision = len(fraction_digits)
    if not (MIN_PRECISION <= precision <= MAX_PRECISION):
        raise DecifixValueError(
            message=f"Precision {precision} outside range {MIN_PRECISION}-{MAX_PRECISION}"
        )

    # Appending the fraction digits, truncated or zero-padded to the precision, scales the
    # integer part by 10**precision exactly
    scaled_digits = integer_digits + fraction_digits[:precision].ljust(precision, "0")
    try:
        stored = int(scaled_digits)
    except ValueError:
        # digit strings beyond the interpreter's conversion limit
        raise InvalidLiteral(token) from None
    if match["sign"]:
        stored = -stored

    storage.check(stored)
    logger.debug(
        f"Evaluated literal {token!r} as {storage.name} {stored} with precision {precision}"
    )
    return LiteralValue(storage=storage, precision=precision, stored=stored)


def literal_components(token: str, precision: int | None = None) -> LiteralValue:
    """
    Evaluate a literal token into its storage kind, precision and stored integer.

    Unsuffixed tokens use the configured default storage kind. A malformed token raises
    `InvalidLiteral`, and a value outside the storage kind raises `IntegerOverflow`.
    """

    if not isinstance(token, str):
        raise DecifixTypeError(
            message=f"Literal tokens must be strings to avoid float conversion, got {token!r}"
        )
    if precision is not None and (isinstance(precision, bool) or not isinstance(precision, int)):
        raise DecifixTypeError(message=f"Precision must be an int, got {precision!r}")

    return _evaluate_literal(token, precision, settings.literal.default_storage)


def fixed(token: str, precision: int | None = None) -> FixedPoint:
    """
    Build a fixed-point constant from a literal token, inferring the precision from the number
    of fraction digits when it is not given.
    """

    return literal_components(token, precision).to_fixed_point()


def render_literal(token: str, precision: int | None = None) -> str:
    """
    Render a Python expression that rebuilds the literal's value without parsing, e.g.
    `FixedPoint[I16, 2](-110)` for "-1.1i16".
    """

    literal = literal_components(token, precision)
    return f"FixedPoint[{literal.storage!r}, {literal.precision}]({literal.stored})"
