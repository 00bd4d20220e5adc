from __future__ import annotations

import argparse
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape

from . import __version__
from .codegen.cli_integration import (
    CLIError,
    add_codegen_args,
    build_config,
    generate_and_output,
)
from .logging_config import get_logger, setup_logging
from .loader import (
    DescriptionLoadError,
    fetch_description,
    read_description_file,
    read_description_stream,
)

logger = get_logger(__name__)


class CLIHandler:
    """Handle command-line binding generation."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for user-facing output.
        """
        self.data: Any | None = None
        self.source: str | None = None
        self.console = console or Console()
        logger.debug("CLIHandler initialized")

    def set_data(self, data: Any, source: str) -> None:
        """Set the binding description and where it was loaded from.

        Args:
            data: The parsed binding description.
            source: The source name or identifier.
        """
        self.data = data
        self.source = source
        logger.info("Loaded binding description from %s", source)

    def load(self, args: argparse.Namespace) -> None:
        """Load the binding description selected by the arguments.

        Raises:
            CLIError: If no input is given or loading fails.
        """
        try:
            if args.file:
                loaded = read_description_file(args.file)
            elif args.url:
                loaded = fetch_description(args.url)
            elif args.stdin:
                loaded = read_description_stream(sys.stdin)
            else:
                raise CLIError("Input source required (file, --url, or --stdin)")
        except DescriptionLoadError as e:
            raise CLIError(f"Failed to load input: {e}") from e

        self.set_data(loaded.data, loaded.source)

    def run(self, args: argparse.Namespace) -> int:
        """Run generation for the loaded description.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if self.data is None:
            self.console.print("❌ [red]No data loaded[/red]")
            logger.warning("No data loaded; aborting CLI run")
            return 1

        if self.console.is_terminal:
            self.console.print(
                f"📄 Loaded: {escape(self.source)}", highlight=False, emoji=False
            )
        config = build_config(args)
        return generate_and_output(self.data, config, args, self.console)


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="tsbind",
        description="Generate typed TypeScript bindings from a binding description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tsbind bindings.json
  tsbind bindings.json --namespace auth -o src/bindings.ts
  tsbind --stdin --no-error-any < bindings.json
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Binding description (JSON)")
    input_group.add_argument("--url", help="URL to fetch the description from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the description from standard input"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    add_codegen_args(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``tsbind`` command."""
    args = create_parser().parse_args(argv)
    console = Console()
    setup_logging(args.log_level)

    handler = CLIHandler(console)
    try:
        handler.load(args)
        return handler.run(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}", emoji=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
