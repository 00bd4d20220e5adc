import pytest

from tsbind.codegen.core.schema import (
    Argument,
    BindingSet,
    Command,
    ResultKind,
    ResultShape,
    SchemaError,
    collect_type_refs,
    convert_description,
    extract_type_map,
)


def test_convert_full_description(description):
    bindings = convert_description(description)

    greet, logout = bindings.commands
    assert greet.args == (Argument("name", "string"),)
    assert greet.result == ResultShape.fallible("string", "string")
    assert greet.docs == "Say hello."
    assert logout.result.kind is ResultKind.NONE
    assert [e.name for e in bindings.events] == ["demo_event"]
    assert bindings.statics == {"VERSION": "1.0.0"}
    assert bindings.dependent_types == "export type DemoEvent = string"
    assert bindings.globals is None


def test_declaration_order_is_preserved():
    bindings = convert_description(
        {"commands": [{"name": "z"}, {"name": "a"}], "statics": {"Y": 1, "B": 2}}
    )

    assert [c.name for c in bindings.commands] == ["z", "a"]
    assert list(bindings.statics) == ["Y", "B"]


def test_value_result_and_deprecation():
    bindings = convert_description(
        {"commands": [{"name": "old", "result": {"value": "u32"}, "deprecated": ""}]}
    )

    command = bindings.commands[0]
    assert command.result == ResultShape.value("u32")
    assert command.deprecated == ""


@pytest.mark.parametrize(
    "description, message",
    [
        ([], "must be a JSON object"),
        ({"commands": [{}]}, "Missing 'name' in command #0"),
        ({"commands": ["greet"]}, "Expected object for command #0"),
        ({"commands": [{"name": "f", "args": [{"name": "a"}]}]}, "Missing 'type'"),
        ({"commands": [{"name": "f", "result": {"ok": "u32"}}]}, "Missing 'err'"),
        ({"commands": [{"name": "f", "result": {}}]}, "needs 'value' or 'ok'/'err'"),
        ({"commands": [{"name": "f", "result": "u32"}]}, "must be an object or null"),
        ({"events": [{"name": "e"}]}, "Missing 'payload' in event #0"),
        ({"statics": []}, "'statics' in binding description must be an object"),
        ({"commands": {"name": "f"}}, "'commands' in binding description must be a list"),
        ({"commands": [{"name": "f", "args": "a"}]}, "'args' in command 'f' must be a list"),
        ({"commands": [{"name": 3}]}, "'name' in command #0 must be a string"),
        ({"commands": [{"name": "f", "docs": ["x"]}]}, "'docs' in command 'f'"),
        ({"dependent_types": 1}, "'dependent_types' in binding description"),
    ],
)
def test_malformed_descriptions(description, message):
    with pytest.raises(SchemaError, match=message):
        convert_description(description)


def test_extract_type_map():
    assert extract_type_map({"types": {"u32": "number"}}) == {"u32": "number"}
    assert extract_type_map({}) == {}

    with pytest.raises(SchemaError):
        extract_type_map({"types": ["u32"]})


def test_collect_type_refs(bindings):
    assert collect_type_refs(bindings) == ["string", "u32", "User", "DemoEvent", "bool"]


def test_bindings_are_immutable():
    bindings = BindingSet(commands=(Command("ping"),))

    with pytest.raises(AttributeError):
        bindings.commands = ()


def test_null_sections_count_as_absent():
    bindings = convert_description(
        {
            "commands": [{"name": "ping", "args": None, "docs": None}],
            "events": None,
            "statics": None,
            "dependent_types": None,
            "globals": None,
        }
    )

    assert bindings.commands == (Command("ping"),)
    assert bindings.events == ()
    assert bindings.statics == {}
    assert bindings.dependent_types == ""
    assert bindings.globals is None
    assert convert_description({"commands": None}).commands == ()
    assert extract_type_map({"types": None}) == {}
