from .config import settings
from .version import __version__

# isort: split

from .codegen import generate_constants_module, load_literal_definitions
from .exceptions import (
    DecifixError,
    FixedPointParseError,
    FixedPointRangeError,
    IntegerOverflow,
    InvalidLiteral,
    PrecisionMismatch,
    UnsupportedConversion,
)
from .fixed_point import FixedPoint, parse_fixed_point
from .integer_kinds import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    IntegerKind,
    get_integer_kind,
)
from .literal import fixed, literal_components, render_literal
from .logging import logger

__all__ = (
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "DecifixError",
    "FixedPoint",
    "FixedPointParseError",
    "FixedPointRangeError",
    "IntegerKind",
    "IntegerOverflow",
    "InvalidLiteral",
    "PrecisionMismatch",
    "UnsupportedConversion",
    "__version__",
    "fixed",
    "generate_constants_module",
    "get_integer_kind",
    "literal_components",
    "load_literal_definitions",
    "logger",
    "parse_fixed_point",
    "render_literal",
    "settings",
)
