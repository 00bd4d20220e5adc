import pytest

from tsbind.codegen.core.generator import TypeRenderError
from tsbind.codegen.core.schema import Argument, ResultShape
from tsbind.codegen.languages.typescript.calls import (
    arg_names,
    arg_usages,
    invoke_expression,
    render_return_type,
    wrap_result,
)

EXPR = 'await TAURI_INVOKE("greet", { name })'


def test_arg_names_are_camel_cased_in_order():
    args = [Argument("user_id", "u32"), Argument("display_name", "string")]
    assert arg_names(args) == ["userId", "displayName"]


def test_arg_usages_bundle_and_empty():
    assert arg_usages(["userId", "displayName"]) == "{ userId, displayName }"
    assert arg_usages([]) is None


def test_invoke_expression_omits_bundle_without_args():
    assert invoke_expression("ping") == 'await TAURI_INVOKE("ping")'
    assert invoke_expression("greet", "{ name }") == EXPR


def test_no_result_is_bare_statement():
    assert wrap_result(EXPR, ResultShape.none()) == f"{EXPR};"
    assert wrap_result(EXPR, None) == f"{EXPR};"


def test_value_result_is_single_return():
    body = wrap_result(EXPR, ResultShape.value("string"))

    assert body == f"return {EXPR};"
    assert "status" not in body


def test_fallible_result_uses_discriminated_result():
    body = wrap_result(EXPR, ResultShape.fallible("string", "string"), as_any=True)

    assert body == "\n".join(
        [
            "try {",
            f'    return {{ status: "ok", data: {EXPR} }};',
            "} catch (e) {",
            "    if(e instanceof Error) throw e;",
            '    else return { status: "error", error: e as any };',
            "}",
        ]
    )


def test_fallible_result_without_any_cast():
    body = wrap_result(EXPR, ResultShape.fallible("string", "string"), as_any=False)

    assert 'else return { status: "error", error: e };' in body
    assert "as any" not in body
    assert "if(e instanceof Error) throw e;" in body


def test_render_return_type(render):
    assert render_return_type(ResultShape.none(), render) == "void"
    assert render_return_type(ResultShape.value("u32"), render) == "number"
    assert (
        render_return_type(ResultShape.fallible("User", "Error"), render)
        == "Result<User, MyError>"
    )


def test_render_return_type_propagates_renderer_errors(render):
    with pytest.raises(TypeRenderError, match="Missing"):
        render_return_type(ResultShape.fallible("string", "Missing"), render)
