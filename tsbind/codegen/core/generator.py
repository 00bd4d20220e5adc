"""
Base generator interface for all binding generation targets.

Defines the contract that language generators implement and the
error-wrapping entry point used by the CLI.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .schema import BindingSet, TypeRef, collect_type_refs
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

# Injected type rendering: type reference in, target-language type text out
TypeRenderer = Callable[[TypeRef], str]


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class TypeRenderError(GeneratorError):
    """Raised when a type reference cannot be rendered to text."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all binding generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, bindings: BindingSet, render: TypeRenderer) -> str:
        """
        Generate the complete output document.

        Args:
            bindings: Commands, events, statics and opaque text blocks
            render: Injected type renderer

        Returns:
            Generated code as a string

        Raises:
            TypeRenderError: If any referenced type cannot be rendered
        """
        pass

    def validate_bindings(self, bindings: BindingSet) -> List[str]:
        """
        Validate bindings for basic structural issues.

        Nothing reported here blocks generation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not bindings.commands and not bindings.events and not bindings.statics:
            warnings.append("Binding set is empty")

        for command in bindings.commands:
            if not command.name:
                warnings.append("Command with empty name")
            arg_names = [arg.name for arg in command.args]
            if len(set(arg_names)) != len(arg_names):
                warnings.append(f"Command '{command.name}' has duplicate arguments")

        for event in bindings.events:
            if not event.name:
                warnings.append("Event with empty name")

        return warnings

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, bindings: BindingSet, render: TypeRenderer
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Any failure yields an error result with no code; partial output is never
    returned.

    Args:
        generator: Code generator instance
        bindings: Bindings to generate code for
        render: Injected type renderer

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_bindings(bindings)

        code = generator.generate(bindings, render)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "command_count": len(bindings.commands),
            "event_count": len(bindings.events),
            "static_count": len(bindings.statics),
            "type_count": len(collect_type_refs(bindings)),
            "namespace": generator.config.namespace,
        }

        logger.info(
            "Generated %s bindings: %d commands, %d events, %d statics",
            generator.language_name,
            metadata["command_count"],
            metadata["event_count"],
            metadata["static_count"],
        )
        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
