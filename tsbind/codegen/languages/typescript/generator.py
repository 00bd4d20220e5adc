"""
TypeScript binding generator implementation.

Renders commands, events and statics independently and stitches them with
the dependent-type declarations and runtime globals into one document.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, TypeRenderer
from ...core.naming import to_call_name
from ...core.schema import BindingSet, Command, Event
from .calls import INVOKE_PRIMITIVE
from .events import events_data
from .functions import render_commands
from .naming import create_typescript_checker
from .statics import render_statics

logger = get_logger(__name__)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for typed TypeScript command and event bindings."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)

        self.checker = create_typescript_checker()
        self.policy = self.config.naming_policy()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def get_template_directory(self) -> Path:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, bindings: BindingSet, render: TypeRenderer) -> str:
        """Generate the complete TypeScript document."""
        globals_block = bindings.globals
        if globals_block is None:
            globals_block = self.render_globals()

        return self.render_all_parts(
            bindings, render, bindings.dependent_types, globals_block
        )

    def render_all_parts(
        self,
        bindings: BindingSet,
        render: TypeRenderer,
        dependent_types: str,
        globals_block: str,
    ) -> str:
        """
        Render every section and assemble the document.

        The first renderer error aborts the run before anything is assembled.
        """
        commands = self.render_commands(bindings.commands, render)
        events = self.render_events(bindings.events, render)
        statics = render_statics(bindings.statics)

        return self.assemble_document(
            commands, events, statics, dependent_types, globals_block
        )

    def assemble_document(
        self,
        commands: str,
        events: str,
        statics: str,
        dependent_types: str,
        globals_block: str,
    ) -> str:
        """
        Concatenate pre-rendered sections under their banners.

        The dependent types and globals blocks are inserted byte-for-byte.
        """
        context = {
            "header": self.config.header,
            "disclaimer": self.config.disclaimer,
            "commands": commands,
            "events": events,
            "statics": statics,
            "dependent_types": dependent_types,
            "globals": globals_block,
        }
        return self.render_template("document.ts.j2", context)

    def render_commands(self, commands: Iterable[Command], render: TypeRenderer) -> str:
        """Render all commands as members of the exported `commands` object."""
        functions = render_commands(
            commands,
            render,
            self.policy,
            as_any=self.config.error_as_any,
            add_comments=self.config.add_comments,
        )
        logger.debug("Rendered %d command functions", len(functions))

        return self.render_template(
            "commands.ts.j2", {"functions": ",\n".join(functions)}
        )

    def render_events(self, events: Iterable[Event], render: TypeRenderer) -> str:
        """Render the exported `events` object, or nothing without events."""
        events = list(events)
        if not events:
            return ""

        tables = events_data(events, render, self.policy)
        return self.render_template(
            "events.ts.j2",
            {"types": ",\n".join(tables.types), "names": ",\n".join(tables.names)},
        )

    def render_globals(self) -> str:
        """Render the default runtime glue."""
        return self.render_template("globals.ts.j2", {"invoke": INVOKE_PRIMITIVE})

    def validate_bindings(self, bindings: BindingSet) -> List[str]:
        """Validate bindings for TypeScript generation."""
        warnings = super().validate_bindings(bindings)

        command_names = [to_call_name(c.name) for c in bindings.commands]
        event_names = [to_call_name(e.name) for e in bindings.events]

        for declared, call_name in zip(
            [c.name for c in bindings.commands] + [e.name for e in bindings.events],
            command_names + event_names,
        ):
            if declared and not call_name:
                warnings.append(f"Name '{declared}' has no identifier characters")

        warnings.extend(self.checker.find_conflicts(command_names, "command"))
        warnings.extend(self.checker.find_conflicts(event_names, "event"))

        for name in bindings.statics:
            if not name.replace("$", "_").isidentifier():
                warnings.append(f"Static name '{name}' is not a valid identifier")
        warnings.extend(self.checker.find_conflicts(bindings.statics, "static"))

        return warnings


def create_typescript_generator(
    config: Optional[GeneratorConfig] = None, **overrides
) -> TypeScriptGenerator:
    """Create a TypeScript generator, applying keyword overrides to the config."""
    if config is None:
        from ...core.config import load_config

        config = load_config(custom_config=overrides or None)
    elif overrides:
        raise ValueError("Pass either a config or keyword overrides, not both")

    return TypeScriptGenerator(config)
