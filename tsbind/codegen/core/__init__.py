"""
Core code generation components.

Provides base classes and utilities used by the language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    TypeRenderError,
    TypeRenderer,
    generate_code,
)
from .schema import (
    Argument,
    BindingSet,
    Command,
    Event,
    ResultKind,
    ResultShape,
    SchemaError,
    TypeRef,
    convert_description,
    extract_type_map,
)
from .naming import (
    ItemKind,
    NameChecker,
    NamingPolicy,
    to_call_name,
    to_wire_name,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "TypeRenderError",
    "TypeRenderer",
    "generate_code",
    # Binding model
    "Argument",
    "BindingSet",
    "Command",
    "Event",
    "ResultKind",
    "ResultShape",
    "SchemaError",
    "TypeRef",
    "convert_description",
    "extract_type_map",
    # Naming utilities
    "ItemKind",
    "NameChecker",
    "NamingPolicy",
    "to_call_name",
    "to_wire_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
