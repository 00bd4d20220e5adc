"""Constant exports for static values."""

import json
from typing import Any, Mapping

AS_CONST = " as const"


def static_literal(value: Any) -> str:
    """Serialize a JSON-like value to its compact literal form."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def const_qualifier(value: Any) -> str:
    # null stays widened, every other JSON shape is narrowed
    if value is None:
        return ""
    return AS_CONST


def render_statics(statics: Mapping[str, Any]) -> str:
    """
    Render each static as an exported constant, in mapping order.

    Values that cannot be serialized (cycles, NaN, arbitrary objects) raise
    the error from :mod:`json` unchanged.
    """
    return "\n".join(
        f"export const {name} = {static_literal(value)}{const_qualifier(value)};"
        for name, value in statics.items()
    )
