"""Git hooks generation, installation and management."""

from .generator import SIGNATURE, generate_hook_script, is_managed_hook
from .install import (
    HookInstaller,
    HookInstallerError,
    install_hooks,
    list_hooks,
    uninstall_hooks,
)
from .locator import NotGitRepositoryError, find_git_directory
from .manager import HookManager
from .validator import ScriptValidationError, check_entry, validate_scripts

__all__ = [
    "SIGNATURE",
    "HookInstaller",
    "HookInstallerError",
    "HookManager",
    "NotGitRepositoryError",
    "ScriptValidationError",
    "check_entry",
    "find_git_directory",
    "generate_hook_script",
    "install_hooks",
    "is_managed_hook",
    "list_hooks",
    "uninstall_hooks",
    "validate_scripts",
]
