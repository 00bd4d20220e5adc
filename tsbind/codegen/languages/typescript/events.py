"""
Event tables for generated bindings.

Two parallel tables are produced in declared event order: the name table
maps each binding name to its wire channel key, the type table maps the
same binding name to the payload type.
"""

from typing import Iterable, List, NamedTuple, Optional

from ...core.generator import TypeRenderer
from ...core.naming import ItemKind, NamingPolicy, to_call_name, to_wire_name
from ...core.schema import Event


class EventTables(NamedTuple):
    """Type table and name table entries, in matching order."""

    types: List[str]
    names: List[str]


def events_map(events: Iterable[Event], policy: Optional[NamingPolicy] = None) -> List[str]:
    """Name table entries: ``callName: "wire key"``."""
    return [
        f'{to_call_name(event.name)}: "{to_wire_name(event.name, ItemKind.EVENT, policy)}"'
        for event in events
    ]


def events_types(events: Iterable[Event], render: TypeRenderer) -> List[str]:
    """
    Type table entries: ``callName: PayloadType``.

    Raises:
        TypeRenderError: If a payload type cannot be rendered
    """
    return [
        f"{to_call_name(event.name)}: {render(event.payload_type)}" for event in events
    ]


def events_data(
    events: Iterable[Event],
    render: TypeRenderer,
    policy: Optional[NamingPolicy] = None,
) -> EventTables:
    """Build both event tables."""
    events = list(events)
    return EventTables(
        types=events_types(events, render),
        names=events_map(events, policy),
    )
