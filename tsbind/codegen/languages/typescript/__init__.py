"""
TypeScript binding generator module.

Generates typed command functions, event tables and constant exports.
"""

from .generator import TypeScriptGenerator, create_typescript_generator
from .types import TypeMapRenderer
from .naming import create_typescript_checker, TS_RESERVED_WORDS
from .calls import INVOKE_PRIMITIVE, wrap_result, invoke_expression
from .functions import js_doc, render_function, render_command, render_commands
from .events import EventTables, events_data, events_map, events_types
from .statics import render_statics

__all__ = [
    # Generator
    "TypeScriptGenerator",
    "create_typescript_generator",
    "TypeMapRenderer",
    # Naming
    "create_typescript_checker",
    "TS_RESERVED_WORDS",
    # Rendering
    "INVOKE_PRIMITIVE",
    "wrap_result",
    "invoke_expression",
    "js_doc",
    "render_function",
    "render_command",
    "render_commands",
    "EventTables",
    "events_data",
    "events_map",
    "events_types",
    "render_statics",
]
