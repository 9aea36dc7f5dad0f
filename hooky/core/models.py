"""
HOOKY - Core Data Models
Typed configuration and reporting structures shared by every component.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple


# =============================================================================
# Constants
# =============================================================================

DEFAULT_CONFIG_FILE = "hooky.yaml"
DEFAULT_BACKUP_DIRECTORY = ".hooky-backup"

# Git hooks hooky knows how to manage
SUPPORTED_HOOKS: Tuple[str, ...] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-receive",
    "update",
    "post-receive",
    "post-update",
    "pre-auto-gc",
    "post-rewrite",
    "pre-push",
    "push-to-checkout",
)


# =============================================================================
# Enums
# =============================================================================

class EntryKind(str, Enum):
    """What a hook entry invokes."""
    SCRIPT = "script"
    COMMAND = "command"


class IssueKind(str, Enum):
    """Problems the validator can report."""
    MISSING_SCRIPT = "missing_script"
    MISSING_COMMAND = "missing_command"


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class HookEntry:
    """
    One script or command run by a hook.

    Exactly one of ``script`` / ``command`` is non-empty. The loader enforces
    this; nothing downstream checks it again.
    """
    name: str
    description: str = ""
    script: str = ""
    command: str = ""

    @property
    def kind(self) -> EntryKind:
        return EntryKind.SCRIPT if self.script else EntryKind.COMMAND

    @property
    def is_script(self) -> bool:
        return self.kind == EntryKind.SCRIPT

    @property
    def invocation(self) -> str:
        """Raw configured string (script path plus args, or the command)."""
        return self.script if self.is_script else self.command

    @property
    def tokens(self) -> List[str]:
        # Plain whitespace split: quoted arguments containing spaces are
        # split apart. Existing configs rely on this, keep it.
        return self.invocation.split()

    @property
    def target(self) -> str:
        """First token: the script file or the executable name."""
        tokens = self.tokens
        return tokens[0] if tokens else ""


@dataclass(frozen=True)
class Settings:
    """Behavioral settings from the ``settings`` block."""
    auto_executable: bool = True
    backup_existing: bool = True
    backup_directory: str = DEFAULT_BACKUP_DIRECTORY
    verbose: bool = False


@dataclass(frozen=True)
class HookyConfig:
    """Loaded configuration. Never mutated after load."""
    hooks: Dict[str, Tuple[HookEntry, ...]] = field(default_factory=dict)
    settings: Settings = field(default_factory=Settings)
    source_file: Optional[str] = None

    @property
    def hook_names(self) -> List[str]:
        return list(self.hooks.keys())

    @property
    def total_entries(self) -> int:
        return sum(len(entries) for entries in self.hooks.values())

    def unknown_hooks(self) -> List[str]:
        """Configured hook names git will never call."""
        return [name for name in self.hooks if name not in SUPPORTED_HOOKS]


@dataclass(frozen=True)
class HookContext:
    """Everything an operation needs: config plus resolved git directory."""
    config: HookyConfig
    git_dir: Path
    verbose: bool = False

    @property
    def hooks_dir(self) -> Path:
        return self.git_dir / "hooks"

    def hook_path(self, hook_name: str) -> Path:
        return self.hooks_dir / hook_name


# =============================================================================
# Reporting
# =============================================================================

@dataclass(frozen=True)
class ScriptIssue:
    """A script file or command that could not be found."""
    hook_name: str
    index: int
    entry_name: str
    kind: IssueKind
    target: str

    @property
    def message(self) -> str:
        if self.kind == IssueKind.MISSING_SCRIPT:
            problem = f"script file '{self.target}' not found"
        else:
            problem = f"command '{self.target}' not found in PATH"
        return f"hook {self.hook_name}[{self.index}] ({self.entry_name}): {problem}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class EntryStatus:
    """Validity of a single entry, as shown by ``hooky list``."""
    entry: HookEntry
    issue: Optional[ScriptIssue] = None

    @property
    def valid(self) -> bool:
        return self.issue is None


@dataclass
class HookReport:
    """Per-hook listing: entries plus what is currently on disk."""
    hook_name: str
    entries: List[EntryStatus] = field(default_factory=list)
    installed: bool = False
    managed: bool = False
    supported: bool = True

    @property
    def valid(self) -> bool:
        return all(status.valid for status in self.entries)

    @property
    def invalid_count(self) -> int:
        return sum(1 for status in self.entries if not status.valid)


class InstallAction(str, Enum):
    """What happened to a hook file during install/uninstall."""
    INSTALLED = "installed"
    REMOVED = "removed"
    SKIPPED_EMPTY = "skipped_empty"
    NOT_FOUND = "not_found"
    NOT_MANAGED = "not_managed"


@dataclass
class InstallResult:
    """Outcome for one hook file."""
    hook_name: str
    action: InstallAction
    path: Path
    backup: Optional[Path] = None
    message: str = ""

    @property
    def changed(self) -> bool:
        return self.action in (InstallAction.INSTALLED, InstallAction.REMOVED)
