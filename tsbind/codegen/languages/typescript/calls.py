"""
Invocation expressions and result wrapping for generated commands.

A command body is a single call to the runtime invocation primitive,
wrapped according to the command's declared result shape.
"""

from typing import Iterable, List, Optional

from ...core.generator import TypeRenderer
from ...core.naming import to_call_name
from ...core.schema import Argument, ResultKind, ResultShape

# Global invocation function provided by the runtime globals block
INVOKE_PRIMITIVE = "TAURI_INVOKE"


def arg_names(args: Iterable[Argument]) -> List[str]:
    """Binding names of the arguments, in declaration order."""
    return [to_call_name(arg.name) for arg in args]


def arg_usages(names: List[str]) -> Optional[str]:
    """Object literal bundling the arguments, or None when there are none."""
    if not names:
        return None
    return f"{{ {', '.join(names)} }}"


def invoke_expression(wire_name: str, usages: Optional[str] = None) -> str:
    """Render the awaited call to the invocation primitive."""
    bundle = f", {usages}" if usages else ""
    return f'await {INVOKE_PRIMITIVE}("{wire_name}"{bundle})'


def return_as_result(expr: str, as_any: bool) -> str:
    """
    Wrap an expression in the discriminated-result pattern.

    Native runtime faults (``Error`` instances) are re-thrown unchanged;
    any other thrown value is returned as the error branch.
    """
    cast = " as any" if as_any else ""
    return "\n".join(
        [
            "try {",
            f'    return {{ status: "ok", data: {expr} }};',
            "} catch (e) {",
            "    if(e instanceof Error) throw e;",
            f'    else return {{ status: "error", error: e{cast} }};',
            "}",
        ]
    )


def wrap_result(expr: str, shape: Optional[ResultShape], as_any: bool = True) -> str:
    """
    Build the function body for an invocation expression.

    Args:
        expr: Rendered invocation expression
        shape: Declared result shape (None behaves like ResultKind.NONE)
        as_any: Annotate caught error values as untyped

    Returns:
        Body text: a bare statement, a return, or a try/catch block
    """
    kind = shape.kind if shape is not None else ResultKind.NONE

    if kind == ResultKind.FALLIBLE:
        return return_as_result(expr, as_any)
    elif kind == ResultKind.VALUE:
        return f"return {expr};"
    return f"{expr};"


def render_return_type(shape: Optional[ResultShape], render: TypeRenderer) -> str:
    """
    Render the return annotation for a result shape.

    Raises:
        TypeRenderError: If the renderer cannot render a referenced type
    """
    kind = shape.kind if shape is not None else ResultKind.NONE

    if kind == ResultKind.FALLIBLE:
        return f"Result<{render(shape.ok)}, {render(shape.err)}>"
    elif kind == ResultKind.VALUE:
        return render(shape.ok)
    return "void"
