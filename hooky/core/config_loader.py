"""
HOOKY - Config Loader
Loads hooky.yaml and converts it into typed, validated configuration.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from .models import (
    DEFAULT_BACKUP_DIRECTORY,
    HookEntry,
    HookyConfig,
    Settings,
    SUPPORTED_HOOKS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class ConfigLoadError(Exception):
    """Configuration file is unreadable or structurally invalid."""
    pass


class EntryValidationError(ConfigLoadError):
    """A single hook entry is invalid."""

    def __init__(self, hook_name: str, index: int, entry_name: str, message: str):
        self.hook_name = hook_name
        self.index = index
        self.entry_name = entry_name
        super().__init__(f"hook {hook_name}[{index}] ({entry_name}): {message}")


# =============================================================================
# Loader
# =============================================================================

SETTINGS_FIELDS = {
    "auto_executable": bool,
    "backup_existing": bool,
    "backup_directory": str,
    "verbose": bool,
}

ENTRY_FIELDS = ("name", "script", "command", "description")

HOOK_NAME_SEPARATORS = {"/", "\\", os.sep}


class ConfigLoader:
    """
    Reads the YAML config and builds a HookyConfig.

    Responsibilities:
    - Parse the YAML file
    - Validate structure (hooks mapping, entry fields, settings types)
    - Enforce that every entry has exactly one of script/command
    - Apply defaults for omitted settings
    """

    def load_from_file(self, filepath: Union[str, Path]) -> HookyConfig:
        """
        Load configuration from a YAML file.

        Raises:
            ConfigLoadError: file missing, unreadable or invalid
        """
        filepath = Path(filepath)

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"failed to parse config file: {e}")
        except OSError as e:
            raise ConfigLoadError(f"failed to read config file: {e}")

        logger.debug("Loaded config from %s", filepath)
        return self.load_from_dict(data, source_file=str(filepath))

    def load_from_dict(self, data: Any, source_file: str = "unknown") -> HookyConfig:
        """Build a HookyConfig from already-parsed YAML data."""
        # Empty file is a valid, empty config
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigLoadError("config must contain a mapping at the top level")

        hooks = self._load_hooks(data.get("hooks"))
        settings = self._load_settings(data.get("settings"))

        config = HookyConfig(hooks=hooks, settings=settings, source_file=source_file)

        for hook_name in config.unknown_hooks():
            logger.warning("Unknown git hook '%s' (it will be installed but git may never run it)", hook_name)

        return config

    def _load_hooks(self, data: Any) -> Dict[str, Tuple[HookEntry, ...]]:
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigLoadError("'hooks' must be a mapping of hook name to entry list")

        hooks: Dict[str, Tuple[HookEntry, ...]] = {}

        for hook_name, entries_data in data.items():
            hook_name = str(hook_name)

            # the name becomes a file name inside the hooks directory
            if hook_name in ("", ".", "..") or any(sep in hook_name for sep in HOOK_NAME_SEPARATORS):
                raise ConfigLoadError(f"invalid hook name '{hook_name}': must be a plain file name")

            if entries_data is None:
                entries_data = []

            if not isinstance(entries_data, list):
                raise ConfigLoadError(f"hook {hook_name}: entries must be a list")

            entries: List[HookEntry] = []
            for idx, entry_data in enumerate(entries_data):
                entries.append(self._load_entry(hook_name, idx, entry_data))

            hooks[hook_name] = tuple(entries)

        return hooks

    def _load_entry(self, hook_name: str, index: int, data: Any) -> HookEntry:
        if not isinstance(data, dict):
            raise EntryValidationError(hook_name, index, "", "entry must be a mapping")

        entry_name = data.get("name") or ""

        values: Dict[str, str] = {}
        for key in ENTRY_FIELDS:
            value = data.get(key)
            if value is None:
                values[key] = ""
            elif isinstance(value, str):
                values[key] = value
            else:
                raise EntryValidationError(
                    hook_name, index, str(entry_name), f"'{key}' must be a string"
                )

        has_script = values["script"] != ""
        has_command = values["command"] != ""

        if not has_script and not has_command:
            raise EntryValidationError(
                hook_name, index, values["name"],
                "must specify either 'script' or 'command'"
            )

        if has_script and has_command:
            raise EntryValidationError(
                hook_name, index, values["name"],
                "cannot specify both 'script' and 'command', use only one"
            )

        return HookEntry(
            name=values["name"],
            description=values["description"],
            script=values["script"],
            command=values["command"],
        )

    def _load_settings(self, data: Any) -> Settings:
        if data is None:
            return Settings()

        if not isinstance(data, dict):
            raise ConfigLoadError("'settings' must be a mapping")

        values: Dict[str, Any] = {}
        for key, expected in SETTINGS_FIELDS.items():
            if key not in data or data[key] is None:
                continue

            value = data[key]
            if not isinstance(value, expected):
                raise ConfigLoadError(
                    f"settings.{key} must be a {expected.__name__}, found: {value!r}"
                )
            values[key] = value

        unknown = sorted(str(key) for key in data if key not in SETTINGS_FIELDS)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))

        if values.get("backup_directory") == "":
            values["backup_directory"] = DEFAULT_BACKUP_DIRECTORY

        return Settings(**values)


# =============================================================================
# Helper Functions
# =============================================================================

def load_config(filepath: Union[str, Path]) -> HookyConfig:
    """Load and validate a hooky config file."""
    return ConfigLoader().load_from_file(filepath)


__all__ = [
    "ConfigLoader",
    "ConfigLoadError",
    "EntryValidationError",
    "SUPPORTED_HOOKS",
    "load_config",
]
