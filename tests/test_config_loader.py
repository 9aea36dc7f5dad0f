"""Tests for the hooky config loader."""

import logging

import pytest

from hooky.core.config_loader import (
    ConfigLoader,
    ConfigLoadError,
    EntryValidationError,
    load_config,
)
from hooky.core.models import EntryKind, Settings


def test_load_scripts_and_commands(tmp_path, write_config):
    """Test mixed script and command entries keep their order."""
    path = write_config(tmp_path, """
        hooks:
          pre-commit:
            - name: "script-test"
              script: "test.sh"
              description: "Script test"
            - name: "command-test"
              command: "go test ./..."
              description: "Command test"
        settings:
          verbose: true
    """)

    config = load_config(path)
    entries = config.hooks["pre-commit"]

    assert [e.name for e in entries] == ["script-test", "command-test"]
    assert entries[0].kind == EntryKind.SCRIPT
    assert entries[0].script == "test.sh"
    assert entries[1].kind == EntryKind.COMMAND
    assert entries[1].command == "go test ./..."
    assert config.settings.verbose is True
    assert config.source_file == str(path)


def test_defaults_applied(tmp_path, write_config):
    """Test settings omitted from the file keep their defaults."""
    path = write_config(tmp_path, """
        hooks:
          pre-commit:
            - name: "test"
              command: "echo hi"
        settings:
          backup_existing: false
    """)

    settings = load_config(path).settings

    assert settings.auto_executable is True
    assert settings.backup_existing is False
    assert settings.backup_directory == ".hooky-backup"
    assert settings.verbose is False


def test_missing_settings_block(make_config):
    """Test config without settings uses all defaults."""
    config = make_config({"hooks": {"pre-push": [{"name": "t", "command": "ls"}]}})
    assert config.settings == Settings()


def test_both_script_and_command_rejected(make_config):
    """Test entry with both script and command is rejected."""
    with pytest.raises(EntryValidationError) as exc_info:
        make_config({
            "hooks": {
                "pre-commit": [
                    {"name": "ok", "command": "ls"},
                    {"name": "bad", "script": "test.sh", "command": "go test ./..."},
                ]
            }
        })

    message = str(exc_info.value)
    assert "cannot specify both 'script' and 'command'" in message
    assert "pre-commit[1]" in message
    assert "(bad)" in message
    assert exc_info.value.index == 1


def test_neither_script_nor_command_rejected(make_config):
    """Test entry with neither script nor command is rejected."""
    with pytest.raises(EntryValidationError) as exc_info:
        make_config({"hooks": {"pre-push": [{"name": "empty", "description": "Invalid"}]}})

    message = str(exc_info.value)
    assert "must specify either 'script' or 'command'" in message
    assert "pre-push[0] (empty)" in message


def test_invalid_yaml(tmp_path, write_config):
    """Test malformed YAML raises a parse error."""
    path = write_config(tmp_path, """
        hooks:
          pre-commit:
            - name: "test"
              command: [unclosed
    """)

    with pytest.raises(ConfigLoadError, match="failed to parse config file"):
        load_config(path)


def test_missing_file(tmp_path):
    """Test missing config file raises a read error."""
    with pytest.raises(ConfigLoadError, match="failed to read config file"):
        load_config(tmp_path / "nope.yaml")


def test_empty_file(tmp_path, write_config):
    """Test empty file is an empty config."""
    config = load_config(write_config(tmp_path, ""))
    assert config.hooks == {}
    assert config.total_entries == 0


def test_structural_errors(make_config):
    """Test wrong shapes are rejected with ConfigLoadError."""
    with pytest.raises(ConfigLoadError):
        make_config(["not", "a", "mapping"])

    with pytest.raises(ConfigLoadError, match="'hooks' must be a mapping"):
        make_config({"hooks": ["pre-commit"]})

    with pytest.raises(ConfigLoadError, match="entries must be a list"):
        make_config({"hooks": {"pre-commit": {"name": "x"}}})

    with pytest.raises(EntryValidationError, match="must be a string"):
        make_config({"hooks": {"pre-commit": [{"name": "x", "command": 42}]}})

    with pytest.raises(ConfigLoadError, match="settings.auto_executable"):
        make_config({"settings": {"auto_executable": "yes please"}})


def test_unknown_hook_tolerated(make_config, caplog):
    """Test unknown hook names load with a warning instead of failing."""
    with caplog.at_level(logging.WARNING):
        config = make_config({"hooks": {"pre-coffee": [{"name": "t", "command": "ls"}]}})

    assert config.unknown_hooks() == ["pre-coffee"]
    assert "pre-coffee" in caplog.text


def test_config_is_immutable(make_config):
    """Test loaded entries cannot be modified."""
    config = make_config({"hooks": {"pre-commit": [{"name": "t", "command": "ls"}]}})

    with pytest.raises(Exception):
        config.hooks["pre-commit"][0].name = "changed"

    with pytest.raises(Exception):
        config.settings.verbose = True


def test_loader_reusable():
    """Test one loader can build several configs."""
    loader = ConfigLoader()
    first = loader.load_from_dict({"hooks": {"pre-commit": [{"name": "a", "command": "ls"}]}})
    second = loader.load_from_dict({"hooks": {"pre-push": [{"name": "b", "command": "ls"}]}})

    assert first.hook_names == ["pre-commit"]
    assert second.hook_names == ["pre-push"]


@pytest.mark.parametrize("hook_name", ["../config", "nested/pre-commit", "..\\hooks", "..", "."])
def test_hook_name_must_be_plain_file_name(make_config, hook_name):
    """Test hook names cannot point outside the hooks directory."""
    with pytest.raises(ConfigLoadError, match="invalid hook name"):
        make_config({"hooks": {hook_name: [{"name": "x", "command": "echo hi"}]}})
