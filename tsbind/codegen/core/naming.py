"""
Naming utilities for binding generation.

Handles the camelCase transform of declared names, the wire-name policy
applied to commands and events, and keyword/duplicate checks on generated
identifiers.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set


class ItemKind(Enum):
    """Kinds of items that carry a wire name."""

    COMMAND = "command"
    EVENT = "event"


# Underscores and every non-word character separate words
_SEPARATOR_PATTERN = re.compile(r"[\W_]+")


def _split_chunk(chunk: str) -> List[str]:
    words = []
    i, n = 0, len(chunk)

    while i < n:
        j = i
        while j < n and chunk[j].isupper():
            j += 1

        if j - i > 1 or (j - i == 1 and j == n):
            # Acronym run; its last capital starts the next word if a
            # letter follows
            if j < n and chunk[j].isalpha():
                j -= 1
            words.append(chunk[i:j])
            i = j
            continue

        while j < n and not chunk[j].isupper():
            j += 1
        words.append(chunk[i:j])
        i = j

    return words


def split_words(name: str) -> List[str]:
    """
    Split a declared name into words.

    Boundaries are underscores and non-word characters, a lowercase-to-uppercase
    transition and the last capital of an acronym run (``HTTPServer`` gives
    ``HTTP`` and ``Server``). Letter classes are Unicode-aware.
    """
    words: List[str] = []
    for chunk in _SEPARATOR_PATTERN.split(name):
        words.extend(_split_chunk(chunk))
    return words


def to_call_name(name: str) -> str:
    """Convert a declared name to the lowerCamelCase binding identifier."""
    words = split_words(name)
    if not words:
        return ""
    return words[0].lower() + "".join(
        word[:1].upper() + word[1:].lower() for word in words[1:]
    )


@dataclass(frozen=True)
class NamingPolicy:
    """
    Namespace prefixing rules for wire names.

    Each format is a ``str.format`` template receiving ``namespace`` and the
    declared ``name``. Without a namespace the declared name is used as-is.

    Raises:
        ValueError: If a format uses any other placeholder or unbalanced braces
    """

    namespace: Optional[str] = None
    command_format: str = "plugin:{namespace}|{name}"
    event_format: str = "plugin:{namespace}:{name}"

    def __post_init__(self):
        for field_name in ("command_format", "event_format"):
            template = getattr(self, field_name)
            try:
                template.format(namespace="", name="")
            except (KeyError, IndexError, AttributeError, ValueError) as e:
                raise ValueError(
                    f"Invalid {field_name} {template!r}: {type(e).__name__}: {e}"
                ) from e

    def format_for(self, kind: ItemKind) -> str:
        """Return the prefix template for an item kind."""
        if kind == ItemKind.COMMAND:
            return self.command_format
        return self.event_format


def to_wire_name(
    name: str, kind: ItemKind, policy: Optional[NamingPolicy] = None
) -> str:
    """
    Resolve the key used for a command or event across the invocation boundary.

    Args:
        name: Declared (untransformed) item name
        kind: Whether the item is a command or an event
        policy: Naming policy, or None for no namespacing

    Returns:
        The wire key
    """
    if policy is None or not policy.namespace:
        return name
    return policy.format_for(kind).format(namespace=policy.namespace, name=name)


class NameChecker:
    """Reports generated identifiers that collide with keywords or each other."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
    ):
        """
        Initialize name checker.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin names that might be shadowed
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()

    def is_reserved(self, name: str) -> bool:
        """Check whether a name is a reserved word or builtin."""
        return name in self.reserved_words or name in self.builtin_types

    def find_conflicts(self, names: Iterable[str], context: str) -> List[str]:
        """
        Collect warnings for reserved and duplicated names.

        Args:
            names: Generated identifiers in declaration order
            context: Label used in the warning messages (e.g. 'command')

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        seen: Dict[str, int] = {}

        for name in names:
            if self.is_reserved(name):
                warnings.append(f"{context.capitalize()} name '{name}' is reserved")
            seen[name] = seen.get(name, 0) + 1

        for name, count in seen.items():
            if count > 1:
                warnings.append(
                    f"Duplicate {context} name '{name}' ({count} occurrences)"
                )

        return warnings
