"""
Type rendering backed by a pre-rendered type map.

The type-resolution stage hands over literal TypeScript text for every type
reference; rendering here is a lookup with an error channel for references
the map does not know.
"""

from typing import Mapping

from ...core.generator import TypeRenderError
from ...core.schema import TypeRef


class TypeMapRenderer:
    """Callable renderer resolving type references through a type map."""

    def __init__(self, type_map: Mapping[TypeRef, str]):
        """
        Initialize renderer.

        Args:
            type_map: Mapping of type reference to rendered TypeScript text
        """
        self.type_map = dict(type_map)

    def __call__(self, type_ref: TypeRef) -> str:
        try:
            rendered = self.type_map[type_ref]
        except (KeyError, TypeError):
            raise TypeRenderError(f"Unresolved type reference: {type_ref!r}") from None

        if not isinstance(rendered, str) or not rendered:
            raise TypeRenderError(
                f"Type reference {type_ref!r} has no rendered text: {rendered!r}"
            )
        return rendered
