"""
Core binding representation for code generation.

Converts a JSON binding description into the immutable command, event and
static-value model that generators work with.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, List, Mapping, Optional, Tuple

# Opaque handle into the type map, only ever passed to the type renderer
TypeRef = Hashable


class SchemaError(ValueError):
    """Exception raised for malformed binding descriptions."""

    pass


class ResultKind(Enum):
    """Declared result shape of a command."""

    NONE = "none"
    VALUE = "value"
    FALLIBLE = "fallible"


@dataclass(frozen=True)
class ResultShape:
    """What a command returns: nothing, a value, or a value or an error."""

    kind: ResultKind
    ok: Optional[TypeRef] = None
    err: Optional[TypeRef] = None

    @classmethod
    def none(cls) -> "ResultShape":
        return cls(ResultKind.NONE)

    @classmethod
    def value(cls, type_ref: TypeRef) -> "ResultShape":
        return cls(ResultKind.VALUE, ok=type_ref)

    @classmethod
    def fallible(cls, ok: TypeRef, err: TypeRef) -> "ResultShape":
        return cls(ResultKind.FALLIBLE, ok=ok, err=err)


@dataclass(frozen=True)
class Argument:
    """A single declared command argument."""

    name: str
    type: TypeRef


@dataclass(frozen=True)
class Command:
    """A remotely invocable operation."""

    name: str
    args: Tuple[Argument, ...] = ()
    result: ResultShape = field(default_factory=ResultShape.none)
    docs: str = ""
    deprecated: Optional[str] = None


@dataclass(frozen=True)
class Event:
    """A named, typed notification channel."""

    name: str
    payload_type: TypeRef


@dataclass(frozen=True)
class BindingSet:
    """Everything a single generation run consumes."""

    commands: Tuple[Command, ...] = ()
    events: Tuple[Event, ...] = ()
    statics: Mapping[str, Any] = field(default_factory=dict)
    dependent_types: str = ""
    globals: Optional[str] = None


def _require(data: Mapping[str, Any], key: str, context: str) -> Any:
    if key not in data:
        raise SchemaError(f"Missing '{key}' in {context}")
    return data[key]


def _require_str(data: Mapping[str, Any], key: str, context: str) -> str:
    value = _require(data, key, context)
    if not isinstance(value, str):
        raise SchemaError(f"'{key}' in {context} must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str, context: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise SchemaError(f"'{key}' in {context} must be a string or null")
    return value


def _list_entry(data: Mapping[str, Any], key: str, context: str) -> List[Any]:
    """Return a list-valued entry; a missing key or null means empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaError(f"'{key}' in {context} must be a list")
    return value


def _mapping_entry(data: Mapping[str, Any], key: str, context: str) -> Dict[str, Any]:
    """Return an object-valued entry; a missing key or null means empty."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SchemaError(f"'{key}' in {context} must be an object")
    return dict(value)


def _convert_result(data: Optional[Mapping[str, Any]], context: str) -> ResultShape:
    """Map a description result entry to a ResultShape."""
    if data is None:
        return ResultShape.none()

    if not isinstance(data, Mapping):
        raise SchemaError(f"Result of {context} must be an object or null")

    if "ok" in data or "err" in data:
        return ResultShape.fallible(
            _require(data, "ok", f"result of {context}"),
            _require(data, "err", f"result of {context}"),
        )
    if "value" in data:
        return ResultShape.value(data["value"])

    raise SchemaError(f"Result of {context} needs 'value' or 'ok'/'err'")


def _convert_command(data: Mapping[str, Any], index: int) -> Command:
    context = f"command #{index}"
    if not isinstance(data, Mapping):
        raise SchemaError(f"Expected object for {context}")

    name = _require_str(data, "name", context)
    context = f"command '{name}'"

    args = []
    for arg in _list_entry(data, "args", context):
        if not isinstance(arg, Mapping):
            raise SchemaError(f"Expected object for argument of {context}")
        args.append(
            Argument(
                name=_require_str(arg, "name", f"argument of {context}"),
                type=_require(arg, "type", f"argument of {context}"),
            )
        )

    return Command(
        name=name,
        args=tuple(args),
        result=_convert_result(data.get("result"), context),
        docs=_optional_str(data, "docs", context) or "",
        deprecated=_optional_str(data, "deprecated", context),
    )


def _convert_event(data: Mapping[str, Any], index: int) -> Event:
    context = f"event #{index}"
    if not isinstance(data, Mapping):
        raise SchemaError(f"Expected object for {context}")

    return Event(
        name=_require_str(data, "name", context),
        payload_type=_require(data, "payload", context),
    )


def convert_description(description: Mapping[str, Any]) -> BindingSet:
    """
    Convert a JSON binding description to the internal BindingSet.

    Args:
        description: Parsed description with 'commands', 'events', 'statics',
            'dependent_types' and 'globals' entries (all optional, null
            counts as absent)

    Returns:
        BindingSet: Immutable model preserving declaration order

    Raises:
        SchemaError: If the description is malformed
    """
    if not isinstance(description, Mapping):
        raise SchemaError("Binding description must be a JSON object")

    context = "binding description"
    commands = [
        _convert_command(item, i)
        for i, item in enumerate(_list_entry(description, "commands", context))
    ]
    events = [
        _convert_event(item, i)
        for i, item in enumerate(_list_entry(description, "events", context))
    ]

    return BindingSet(
        commands=tuple(commands),
        events=tuple(events),
        statics=_mapping_entry(description, "statics", context),
        dependent_types=_optional_str(description, "dependent_types", context) or "",
        globals=_optional_str(description, "globals", context),
    )


def extract_type_map(description: Mapping[str, Any]) -> Dict[str, str]:
    """
    Extract the pre-rendered type literals from a binding description.

    Returns:
        Dict mapping type reference to its rendered TypeScript text
    """
    return _mapping_entry(description, "types", "binding description")


def collect_type_refs(bindings: BindingSet) -> List[TypeRef]:
    """List every type reference used by commands and events, in order."""
    refs: List[TypeRef] = []

    def add(ref: Optional[TypeRef]):
        if ref is not None and ref not in refs:
            refs.append(ref)

    for command in bindings.commands:
        for arg in command.args:
            add(arg.type)
        add(command.result.ok)
        add(command.result.err)

    for event in bindings.events:
        add(event.payload_type)

    return refs
