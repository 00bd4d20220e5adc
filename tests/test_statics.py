import pytest

from tsbind.codegen.languages.typescript.statics import render_statics


def test_null_has_no_const_qualifier():
    assert render_statics({"NOTHING": None}) == "export const NOTHING = null;"


@pytest.mark.parametrize(
    "value, literal",
    [
        ("1.0.0", '"1.0.0"'),
        (42, "42"),
        (1.5, "1.5"),
        (True, "true"),
        ([1, "two", None], '[1,"two",null]'),
        ({"max": 3, "nested": {"ok": False}}, '{"max":3,"nested":{"ok":false}}'),
    ],
)
def test_values_are_qualified_as_const(value, literal):
    assert render_statics({"VALUE": value}) == f"export const VALUE = {literal} as const;"


def test_declared_order_and_newline_join():
    statics = {"B": 1, "A": None, "C": "ü"}

    assert render_statics(statics) == "\n".join(
        [
            "export const B = 1 as const;",
            "export const A = null;",
            'export const C = "ü" as const;',
        ]
    )


def test_empty_statics():
    assert render_statics({}) == ""


def test_cyclic_value_is_not_handled():
    value = []
    value.append(value)

    with pytest.raises(ValueError):
        render_statics({"CYCLE": value})
