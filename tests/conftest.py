"""Shared pytest fixtures for tsbind tests."""

from __future__ import annotations

import logging

import pytest

from tsbind.codegen.core.config import GeneratorConfig
from tsbind.codegen.core.schema import (
    Argument,
    BindingSet,
    Command,
    Event,
    ResultShape,
)
from tsbind.codegen.languages.typescript import TypeMapRenderer, TypeScriptGenerator

TYPE_MAP = {
    "string": "string",
    "u32": "number",
    "bool": "boolean",
    "User": "User",
    "DemoEvent": "DemoEvent",
    "Error": "MyError",
}


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore the package logger after tests that configure logging."""
    logger = logging.getLogger("tsbind")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def render() -> TypeMapRenderer:
    return TypeMapRenderer(TYPE_MAP)


@pytest.fixture
def bindings() -> BindingSet:
    return BindingSet(
        commands=(
            Command(
                name="greet",
                args=(Argument("name", "string"),),
                result=ResultShape.fallible("string", "string"),
                docs="Say hello.",
            ),
            Command(
                name="get_user",
                args=(Argument("user_id", "u32"),),
                result=ResultShape.value("User"),
            ),
            Command(name="ping"),
        ),
        events=(
            Event("demo_event", "DemoEvent"),
            Event("empty-event", "bool"),
        ),
        statics={"VERSION": "1.2.3", "NOTHING": None, "LIMITS": {"max": 3}},
        dependent_types="export type User = { id: number };",
    )


@pytest.fixture
def generator() -> TypeScriptGenerator:
    return TypeScriptGenerator(GeneratorConfig())


@pytest.fixture
def description() -> dict:
    return {
        "commands": [
            {
                "name": "greet",
                "docs": "Say hello.",
                "args": [{"name": "name", "type": "string"}],
                "result": {"ok": "string", "err": "string"},
            },
            {"name": "logout"},
        ],
        "events": [{"name": "demo_event", "payload": "DemoEvent"}],
        "statics": {"VERSION": "1.0.0"},
        "types": dict(TYPE_MAP),
        "dependent_types": "export type DemoEvent = string",
    }
