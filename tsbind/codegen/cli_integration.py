"""
CLI integration for binding generation.

Provides the command-line arguments, configuration building and rich output
for the codegen module.
"""

import argparse
from pathlib import Path
from typing import Any, Dict, Mapping

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from . import GeneratorConfig, generate_from_description, load_config
from .core.config import ConfigError, get_config_manager
from ..logging_config import get_logger

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to an existing CLI parser."""
    codegen_group = parser.add_argument_group("code generation")

    codegen_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )

    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )

    codegen_group.add_argument(
        "--namespace",
        metavar="NAME",
        help="Plugin namespace applied to command and event wire names",
    )

    codegen_group.add_argument(
        "--header",
        metavar="TEXT",
        help="Text placed before the do-not-edit disclaimer",
    )

    codegen_group.add_argument(
        "--no-error-any",
        action="store_true",
        help="Don't annotate caught command errors as 'any'",
    )

    codegen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit doc comments on generated functions",
    )

    codegen_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """
    Build configuration from CLI arguments.

    Raises:
        CLIError: If the configuration file cannot be loaded
    """
    config_dict: Dict[str, Any] = {}

    if getattr(args, "namespace", None):
        config_dict["namespace"] = args.namespace

    if getattr(args, "header", None) is not None:
        config_dict["header"] = args.header

    if getattr(args, "no_error_any", False):
        config_dict["error_as_any"] = False

    if getattr(args, "no_comments", False):
        config_dict["add_comments"] = False

    if getattr(args, "output", None):
        config_dict["output_file"] = args.output

    try:
        config = load_config(
            custom_config=config_dict, config_file=getattr(args, "config", None)
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config):
        logger.warning("Config: %s", warning)

    return config


def generate_and_output(
    description: Mapping[str, Any],
    config: GeneratorConfig,
    args: argparse.Namespace,
    console: Console,
) -> int:
    """Generate bindings and handle output with rich formatting."""
    result = generate_from_description(description, config)

    if not result.success:
        console.print(
            f"[red]✗ Code generation failed:[/red] {escape(result.error_message)}",
            emoji=False,
        )
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated bindings saved to [cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        console.print(Syntax(result.code, "typescript", theme="monokai"))
    else:
        # Shortcode-like text such as `plugin:fire:tick` must reach stdout as-is
        console.print(
            result.code, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    if getattr(args, "verbose", False) and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), Text(str(value)))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}", emoji=False)
        console.print()

    return 0
