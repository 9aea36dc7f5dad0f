"""Core models and configuration loading for hooky."""

from .config_loader import ConfigLoader, ConfigLoadError, EntryValidationError, load_config
from .models import (
    DEFAULT_BACKUP_DIRECTORY,
    DEFAULT_CONFIG_FILE,
    SUPPORTED_HOOKS,
    EntryKind,
    HookContext,
    HookEntry,
    HookReport,
    HookyConfig,
    InstallAction,
    InstallResult,
    IssueKind,
    ScriptIssue,
    Settings,
)

__all__ = [
    # Loader
    "ConfigLoader",
    "ConfigLoadError",
    "EntryValidationError",
    "load_config",
    # Models
    "DEFAULT_BACKUP_DIRECTORY",
    "DEFAULT_CONFIG_FILE",
    "SUPPORTED_HOOKS",
    "EntryKind",
    "HookContext",
    "HookEntry",
    "HookReport",
    "HookyConfig",
    "InstallAction",
    "InstallResult",
    "IssueKind",
    "ScriptIssue",
    "Settings",
]
