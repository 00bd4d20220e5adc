"""
Function rendering for generated commands.

Each command becomes one documented async function whose body calls the
invocation primitive with the command's wire name.
"""

from typing import Iterable, List, Optional

from ....logging_config import get_logger
from ...core.generator import TypeRenderer
from ...core.naming import ItemKind, NamingPolicy, to_call_name, to_wire_name
from ...core.schema import Command
from .calls import (
    arg_names,
    arg_usages,
    invoke_expression,
    render_return_type,
    wrap_result,
)

logger = get_logger(__name__)


def js_doc(docs: str = "", deprecated: Optional[str] = None) -> str:
    """
    Build a JSDoc block.

    Args:
        docs: Documentation text, one JSDoc line per text line
        deprecated: Deprecation note; an empty string marks deprecation
            without a note, None means not deprecated

    Returns:
        The comment followed by a newline, or an empty string
    """
    lines = []

    if deprecated is not None:
        lines.append(f" * @deprecated {deprecated}".rstrip())

    if docs:
        lines.extend(f" * {line}".rstrip() for line in docs.split("\n"))

    if not lines:
        return ""
    return "/**\n" + "\n".join(lines) + "\n */\n"


def render_function(
    docs: str,
    name: str,
    params: Iterable[str],
    return_type: Optional[str],
    body: str,
) -> str:
    """
    Render an async function declaration.

    Args:
        docs: Doc comment inserted verbatim before the signature
        name: Function name
        params: Rendered parameters in declaration order
        return_type: Declared return type, wrapped in Promise<...>; None
            omits the annotation
        body: Body text inserted as-is between the braces

    Returns:
        Function source text
    """
    annotation = f": Promise<{return_type}>" if return_type is not None else ""
    return f"{docs}async {name}({', '.join(params)}){annotation} {{\n{body}\n}}"


def render_command(
    command: Command,
    render: TypeRenderer,
    policy: Optional[NamingPolicy] = None,
    as_any: bool = True,
    add_comments: bool = True,
) -> str:
    """
    Render one command as an async function.

    Raises:
        TypeRenderError: If an argument or result type cannot be rendered
    """
    wire_name = to_wire_name(command.name, ItemKind.COMMAND, policy)
    names = arg_names(command.args)

    params = [
        f"{name}: {render(arg.type)}" for name, arg in zip(names, command.args)
    ]
    return_type = render_return_type(command.result, render)

    body = wrap_result(
        invoke_expression(wire_name, arg_usages(names)), command.result, as_any
    )
    docs = js_doc(command.docs, command.deprecated) if add_comments else ""

    logger.debug("Rendered command %s -> %s", command.name, wire_name)
    return render_function(
        docs, to_call_name(command.name), params, return_type, body
    )


def render_commands(
    commands: Iterable[Command],
    render: TypeRenderer,
    policy: Optional[NamingPolicy] = None,
    as_any: bool = True,
    add_comments: bool = True,
) -> List[str]:
    """Render every command in declaration order."""
    return [
        render_command(command, render, policy, as_any, add_comments)
        for command in commands
    ]
