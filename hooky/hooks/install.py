"""
HOOKY - Git Hooks Installer
Installs, removes and reports the wrapper scripts hooky manages.
"""

import logging
import shutil
import stat
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.models import (
    DEFAULT_BACKUP_DIRECTORY,
    EntryStatus,
    HookContext,
    HookEntry,
    HookReport,
    InstallAction,
    InstallResult,
    SUPPORTED_HOOKS,
)
from .generator import generate_hook_script, is_managed_hook
from .validator import check_entry, validate_scripts

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class HookInstallerError(Exception):
    """Reading, writing or deleting a hook file failed."""
    pass


# =============================================================================
# Hook Installer Class
# =============================================================================

class HookInstaller:
    """Writes and removes hook files for one repository."""

    def __init__(self, context: HookContext):
        """
        Args:
            context: loaded config plus resolved git directory
        """
        self.context = context
        self.settings = context.config.settings
        self.hooks_dir = context.hooks_dir

    @property
    def backup_dir(self) -> Path:
        # Relative paths are relative to the working directory
        return Path.cwd() / (self.settings.backup_directory or DEFAULT_BACKUP_DIRECTORY)

    def install_hook(self, hook_name: str, entries: Sequence[HookEntry]) -> InstallResult:
        """
        Install the wrapper for one hook.

        An existing file that hooky did not generate is backed up first when
        ``backup_existing`` is on; otherwise it is overwritten.
        """
        hook_path = self.context.hook_path(hook_name)

        if not entries:
            logger.debug("Skipping %s: no entries configured", hook_name)
            return InstallResult(
                hook_name=hook_name,
                action=InstallAction.SKIPPED_EMPTY,
                path=hook_path,
                message="No entries configured",
            )

        backup: Optional[Path] = None

        try:
            self.hooks_dir.mkdir(parents=True, exist_ok=True)

            if hook_path.exists() and self.settings.backup_existing:
                existing = hook_path.read_text(errors="replace")
                if not is_managed_hook(existing):
                    backup = self._create_backup(hook_path, hook_name)

            content = generate_hook_script(hook_name, entries)
            hook_path.write_text(content)
            logger.debug("Wrote %s (%d entries)", hook_path, len(entries))

            if self.settings.auto_executable:
                self._make_executable(hook_path)

        except OSError as e:
            raise HookInstallerError(f"failed to install hook {hook_name}: {e}") from e

        message = "Hook installed"
        if backup is not None:
            message += f" (backup: {backup})"

        return InstallResult(
            hook_name=hook_name,
            action=InstallAction.INSTALLED,
            path=hook_path,
            backup=backup,
            message=message,
        )

    def _create_backup(self, hook_path: Path, hook_name: str) -> Path:
        """Copy an existing hook into the backup directory."""
        self.backup_dir.mkdir(parents=True, exist_ok=True)

        backup_num = 1
        while True:
            backup_path = self.backup_dir / f"{hook_name}.backup.{backup_num}"
            if not backup_path.exists():
                shutil.copy2(hook_path, backup_path)
                logger.debug("Backed up %s to %s", hook_path, backup_path)
                return backup_path
            backup_num += 1

    @staticmethod
    def _make_executable(path: Path) -> None:
        mode = path.stat().st_mode
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def uninstall_hook(self, hook_name: str) -> InstallResult:
        """Remove a hook file, but only if hooky generated it."""
        hook_path = self.context.hook_path(hook_name)

        if not hook_path.is_file():
            return InstallResult(
                hook_name=hook_name,
                action=InstallAction.NOT_FOUND,
                path=hook_path,
                message="Hook not installed",
            )

        try:
            content = hook_path.read_text(errors="replace")
            if not is_managed_hook(content):
                logger.debug("Leaving %s alone: not generated by hooky", hook_path)
                return InstallResult(
                    hook_name=hook_name,
                    action=InstallAction.NOT_MANAGED,
                    path=hook_path,
                    message="Not a hooky hook (left untouched)",
                )

            hook_path.unlink()
            logger.debug("Removed %s", hook_path)

        except OSError as e:
            raise HookInstallerError(f"failed to uninstall hook {hook_name}: {e}") from e

        return InstallResult(
            hook_name=hook_name,
            action=InstallAction.REMOVED,
            path=hook_path,
            message="Hook removed",
        )

    def install_all(self) -> List[InstallResult]:
        """Install every configured hook. The first failure aborts the rest."""
        results = []
        for hook_name, entries in self.context.config.hooks.items():
            results.append(self.install_hook(hook_name, entries))
        return results

    def uninstall_candidates(self) -> List[str]:
        """Configured hooks plus every file already in the hooks directory."""
        names = list(self.context.config.hooks.keys())

        if self.hooks_dir.is_dir():
            on_disk = sorted(p.name for p in self.hooks_dir.iterdir() if p.is_file())
            names.extend(name for name in on_disk if name not in names)

        return names

    def uninstall_all(self) -> List[InstallResult]:
        """Remove every hooky-generated hook. The first failure aborts the rest."""
        return [self.uninstall_hook(name) for name in self.uninstall_candidates()]

    def report(self) -> List[HookReport]:
        """Validity of every configured entry, plus what is on disk."""
        reports = []

        for hook_name, entries in self.context.config.hooks.items():
            report = HookReport(
                hook_name=hook_name,
                supported=hook_name in SUPPORTED_HOOKS,
            )

            for idx, entry in enumerate(entries):
                report.entries.append(
                    EntryStatus(entry=entry, issue=check_entry(hook_name, idx, entry))
                )

            hook_path = self.context.hook_path(hook_name)
            if hook_path.is_file():
                report.installed = True
                try:
                    report.managed = is_managed_hook(hook_path.read_text(errors="replace"))
                except OSError as e:
                    logger.warning("Could not read %s: %s", hook_path, e)

            reports.append(report)

        return reports


# =============================================================================
# Helper Functions
# =============================================================================

def install_hooks(context: HookContext, validate: bool = True) -> List[InstallResult]:
    """
    Install every configured hook.

    Args:
        context: loaded config plus git directory
        validate: run script validation first; nothing is written if it fails

    Raises:
        ScriptValidationError: validation enabled and entries are missing
        HookInstallerError: a file operation failed (remaining hooks skipped)
    """
    if validate:
        validate_scripts(context.config)

    return HookInstaller(context).install_all()


def uninstall_hooks(context: HookContext) -> List[InstallResult]:
    """Remove hooky-generated hooks, leaving every other hook untouched."""
    return HookInstaller(context).uninstall_all()


def list_hooks(context: HookContext) -> List[HookReport]:
    """Read-only report of every configured hook and entry."""
    return HookInstaller(context).report()


def print_install_summary(results: List[InstallResult], title: str = "Hook Installation"):
    """Print install/uninstall results (helper for the CLI)."""
    from rich.console import Console
    from rich.table import Table

    console = Console()
    table = Table(title=title)

    table.add_column("Hook", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Message")

    for result in results:
        status = "✅" if result.changed else "➖"
        table.add_row(result.hook_name, status, result.message)

    console.print(table)


def print_hook_list(reports: List[HookReport], hooks_dir: Optional[Path] = None):
    """Print the ``hooky list`` report (helper for the CLI)."""
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    console = Console()

    if hooks_dir is not None:
        console.print(f"\n📂 Hooks dir: {hooks_dir}\n")

    if not reports:
        console.print("No hooks configured", style="yellow")
        return

    for report in reports:
        if report.managed:
            state = "[green]installed[/green]"
        elif report.installed:
            state = "[yellow]foreign hook present[/yellow]"
        else:
            state = "[dim]not installed[/dim]"

        header = f"🪝 {escape(report.hook_name)} ({state})"
        if not report.supported:
            header += " [yellow]⚠️  unknown git hook[/yellow]"
        console.print(header, style="bold cyan")

        table = Table(show_header=True)
        table.add_column("#", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Run")
        table.add_column("Status")

        for idx, status in enumerate(report.entries):
            entry = status.entry
            if status.valid:
                validity = "[green]✅ valid[/green]"
            else:
                validity = f"[red]❌ missing[/red] {escape(status.issue.target)}"
            table.add_row(
                str(idx), escape(entry.name), entry.kind.value, escape(entry.invocation), validity
            )

        console.print(table)


__all__ = [
    "HookInstaller",
    "HookInstallerError",
    "install_hooks",
    "list_hooks",
    "print_hook_list",
    "print_install_summary",
    "uninstall_hooks",
]
