"""
tsbind Code Generation Module

Generates typed TypeScript bindings from a binding description.
"""

from typing import Any, Dict, Mapping, Optional, Union

from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    TypeRenderError,
    generate_code,
)
from .core.schema import (
    Argument,
    BindingSet,
    Command,
    Event,
    ResultShape,
    SchemaError,
    convert_description,
    extract_type_map,
)
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .languages.typescript import (
    TypeMapRenderer,
    TypeScriptGenerator,
    create_typescript_generator,
)


def get_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> TypeScriptGenerator:
    """
    Create a generator instance.

    Args:
        config: Configuration as GeneratorConfig or dict of overrides

    Returns:
        Configured generator instance
    """
    if isinstance(config, GeneratorConfig):
        return TypeScriptGenerator(config)
    if config is None or isinstance(config, dict):
        return TypeScriptGenerator(load_config(custom_config=config))
    raise ConfigError(f"Invalid config type: {type(config)}")


def generate_from_description(
    description: Mapping[str, Any],
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate bindings from a parsed binding description.

    Args:
        description: Parsed JSON description (commands, events, statics,
            types, dependent_types, globals)
        config: Generator configuration or overrides

    Returns:
        GenerationResult with generated code
    """
    try:
        bindings = convert_description(description)
        renderer = TypeMapRenderer(extract_type_map(description))
        generator = get_generator(config)
    except (SchemaError, ConfigError) as e:
        return GenerationResult.error(f"Invalid input: {e}", exception=e)

    return generate_code(generator, bindings, renderer)


def quick_generate(description: Union[str, Mapping[str, Any]], **options) -> str:
    """
    Quick binding generation from a description.

    Args:
        description: Description as dict or JSON string
        **options: Generator options

    Returns:
        Generated code string
    """
    if isinstance(description, str):
        import json

        description = json.loads(description)

    result = generate_from_description(description, options or None)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message) from result.exception


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "TypeRenderError",
    "Argument",
    "BindingSet",
    "Command",
    "Event",
    "ResultShape",
    "SchemaError",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "TypeMapRenderer",
    "TypeScriptGenerator",
    "create_typescript_generator",
    "convert_description",
    "extract_type_map",
    "generate_code",
    "generate_from_description",
    "get_generator",
    "load_config",
    "quick_generate",
]
