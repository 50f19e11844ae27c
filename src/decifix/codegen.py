"""
Build-time generation of Python modules holding fixed-point constants.

Definitions are read from the `[constants]` table of a TOML file. Each entry is either a literal
token or a table with an explicit precision:

```
[constants]
ONE_CENT = "0.01u32"
FEE_RATE = { literal = "0.0025", precision = 6 }
```

The generated module constructs each constant from its stored integer, so importing it performs no
string parsing.
"""

import keyword
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter

from decifix.exceptions import DecifixValueError, InvalidConstantName
from decifix.integer_kinds import INTEGER_KINDS
from decifix.literal import literal_components, render_literal
from decifix.logging import logger
from decifix.validation.int_values import ValidatedPrecision

__all__ = (
    "LiteralDefinition",
    "generate_constants_module",
    "load_literal_definitions",
    "parse_literal_definitions",
    "write_constants_module",
)

MODULE_HEADER = '''"""
Fixed-point constants generated by `decifix codegen`. Do not edit.
"""
'''

# Names bound by the generated module's imports
_IMPORTED_NAMES = frozenset({"FixedPoint", *(repr(kind) for kind in INTEGER_KINDS.values())})


class LiteralDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    literal: str
    precision: ValidatedPrecision | None = None


_DEFINITIONS_ADAPTER: TypeAdapter[dict[str, str | LiteralDefinition]] = TypeAdapter(
    dict[str, str | LiteralDefinition]
)


def parse_literal_definitions(
    raw_definitions: Mapping[str, Any],
) -> dict[str, LiteralDefinition]:
    """
    Validate raw definitions, normalizing bare literal tokens into `LiteralDefinition` entries.
    """

    return {
        name: LiteralDefinition(literal=definition) if isinstance(definition, str) else definition
        for name, definition in _DEFINITIONS_ADAPTER.validate_python(dict(raw_definitions)).items()
    }


def load_literal_definitions(path: Path) -> dict[str, LiteralDefinition]:
    document = tomllib.loads(path.read_text())
    try:
        constants = document["constants"]
    except KeyError:
        raise DecifixValueError(message=f"No [constants] table found in {path}") from None
    return parse_literal_definitions(constants)


def generate_constants_module(definitions: Mapping[str, Any]) -> str:
    """
    Generate the source of a module declaring one constant per definition, in definition order.
    """

    parsed_definitions = parse_literal_definitions(definitions)

    constant_lines: list[str] = []
    kind_names: set[str] = set()
    for name, definition in parsed_definitions.items():
        if not name.isidentifier() or keyword.iskeyword(name) or name in _IMPORTED_NAMES:
            raise InvalidConstantName(name)

        components = literal_components(definition.literal, definition.precision)
        kind_names.add(repr(components.storage))
        constant_lines.append(
            f"{name} = {render_literal(definition.literal, definition.precision)}"
            f"  # {components.to_fixed_point()}"
        )

    lines = [MODULE_HEADER]
    if constant_lines:
        lines.append("from decifix import FixedPoint")
        lines.append(f"from decifix.integer_kinds import {', '.join(sorted(kind_names))}")
        lines.append("")
        lines.extend(constant_lines)
    return "\n".join(lines) + "\n"


def write_constants_module(definitions: Mapping[str, Any], output_path: Path) -> None:
    output_path.write_text(generate_constants_module(definitions))
    logger.info(f"Wrote {len(definitions)} fixed-point constants to {output_path}")
