import json

import pytest

from tsbind.codegen.core.config import (
    DEFAULT_HEADER,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


@pytest.fixture
def manager():
    return ConfigManager()


def test_defaults(manager):
    config = manager.get_config()

    assert config.header == DEFAULT_HEADER
    assert config.namespace is None
    assert config.error_as_any is True
    assert config.add_comments is True


def test_overrides_win_over_file(manager, tmp_path):
    path = tmp_path / "tsbind.json"
    path.write_text(json.dumps({"namespace": "file", "add_comments": False}))

    config = manager.get_config({"namespace": "cli"}, path)

    assert config.namespace == "cli"
    assert config.add_comments is False


def test_file_settings_reach_naming_policy(tmp_path):
    path = tmp_path / "tsbind.json"
    path.write_text(json.dumps({"namespace": "db", "event_format": "{namespace}/{name}"}))

    policy = load_config(config_file=path).naming_policy()

    assert policy.namespace == "db"
    assert policy.event_format == "{namespace}/{name}"


def test_unknown_keys_are_rejected(manager):
    with pytest.raises(ConfigError, match="Unknown configuration keys: indent, tabs"):
        manager.get_config({"tabs": True, "indent": 4})


@pytest.mark.parametrize(
    "filename, content, message",
    [
        ("missing.json", None, "not found"),
        ("config.yaml", "namespace: x", "must be JSON"),
        ("broken.json", "{", "Invalid JSON"),
        ("list.json", "[]", "JSON object"),
        ("unknown.json", '{"line_ending": "\\r\\n"}', "line_ending"),
    ],
)
def test_bad_config_files(manager, tmp_path, filename, content, message):
    path = tmp_path / filename
    if content is not None:
        path.write_text(content)

    with pytest.raises(ConfigError, match=message):
        manager.get_config(config_file=path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"command_format": "plugin:{ns}|{name}"},
        {"event_format": "plugin:{namespace}:{name"},
        {"command_format": "{}|{name}"},
    ],
)
def test_malformed_wire_formats_are_config_errors(manager, overrides):
    with pytest.raises(ConfigError, match="Invalid"):
        manager.get_config(overrides)


def test_malformed_format_rejected_on_direct_construction():
    with pytest.raises(ConfigError, match="command_format"):
        GeneratorConfig(namespace="auth", command_format="{namespace}|{cmd}")


def test_validation_warnings(manager):
    config = GeneratorConfig(namespace="my auth", command_format="plugin:{namespace}")

    warnings = manager.validate_config(config)

    assert warnings == [
        "command_format does not contain '{name}': plugin:{namespace}",
        "namespace contains whitespace: 'my auth'",
    ]


def test_empty_namespace_warns(manager):
    warnings = manager.validate_config(GeneratorConfig(namespace=""))

    assert warnings == ["namespace is empty; wire names are not prefixed"]


def test_default_config_is_valid(manager):
    assert manager.validate_config(GeneratorConfig()) == []
