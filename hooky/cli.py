"""
HOOKY - Command Line Interface
Entry point for every hooky command.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from hooky.__version__ import __version__
from hooky.config import EXAMPLE_CONFIG_FILE
from hooky.core.config_loader import ConfigLoadError
from hooky.core.models import DEFAULT_CONFIG_FILE
from hooky.hooks.install import (
    HookInstallerError,
    print_hook_list,
    print_install_summary,
)
from hooky.hooks.locator import NotGitRepositoryError
from hooky.hooks.manager import HookManager
from hooky.hooks.validator import ScriptValidationError


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="hooky",
    help="🪝 HOOKY - Declarative Git Hooks",
    add_completion=True,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def load_manager(config: Path, verbose: bool) -> HookManager:
    """Build the manager and initialize it (config + git directory)."""
    setup_logging(verbose)
    manager = HookManager(config_path=config, verbose=verbose)
    context = manager.init()

    # settings.verbose can switch on debug output after the config is read
    if context.verbose and not verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return manager


def fail(message: str) -> None:
    err_console.print(f"❌ {message}", style="red", markup=False, soft_wrap=True)
    raise typer.Exit(1)


def handle_error(error: Exception) -> None:
    """Map every hooky error to one message and exit code 1."""
    if isinstance(error, ConfigLoadError):
        fail(f"Error loading config: {error}")
    elif isinstance(error, NotGitRepositoryError):
        fail(f"Not a git repository: {error}")
    elif isinstance(error, ScriptValidationError):
        err_console.print(f"❌ {len(error.issues)} problem(s) found:", style="red")
        for issue in error.issues:
            err_console.print(f"  • {issue.message}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)
    elif isinstance(error, HookInstallerError):
        fail(str(error))
    else:
        fail(f"Internal error: {error}")


# Shared options
ConfigOption = typer.Option(
    Path(DEFAULT_CONFIG_FILE),
    "--config",
    "-c",
    help="Path to the configuration file",
)
VerboseOption = typer.Option(
    False,
    "--verbose",
    help="Verbose output (shows every file action)",
)


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback for --version."""
    if value:
        console.print(f"hooky version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show hooky version"
    )
):
    """
    🪝 HOOKY - Declarative Git Hooks

    Generates git hooks from hooky.yaml.
    """
    pass


# =============================================================================
# Command: install
# =============================================================================

@app.command()
def install(
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
    skip_validation: bool = typer.Option(
        False,
        "--skip-validation",
        help="Install even if scripts or commands are missing"
    ),
):
    """
    🪝 Install the configured git hooks

    Examples:

    \b
    # Install using hooky.yaml
    hooky install

    \b
    # Use another config file
    hooky install --config ci/hooky.yaml
    """

    try:
        manager = load_manager(config, verbose)
        results = manager.install(validate=not skip_validation)
    except Exception as e:
        handle_error(e)
        return

    print_install_summary(results)
    console.print("✅ Hooks installed successfully", style="green")


# =============================================================================
# Command: uninstall
# =============================================================================

@app.command()
def uninstall(
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    🗑️ Remove the git hooks generated by hooky

    Hooks without the hooky signature are never touched.
    """

    try:
        manager = load_manager(config, verbose)
        results = manager.uninstall()
    except Exception as e:
        handle_error(e)
        return

    for result in results:
        if result.changed:
            console.print(f"✅ {result.hook_name}: removed", style="green")
        elif verbose:
            console.print(f"➖ {result.hook_name}: {result.message}", style="yellow")

    console.print("✅ Hooks uninstalled successfully", style="green")


# =============================================================================
# Command: list
# =============================================================================

@app.command("list")
def list_command(
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    📋 List configured hooks and the validity of every entry
    """

    try:
        manager = load_manager(config, verbose)
        reports = manager.list()
        hooks_dir = manager.init().hooks_dir
    except Exception as e:
        handle_error(e)
        return

    print_hook_list(reports, hooks_dir=hooks_dir)


# =============================================================================
# Command: validate
# =============================================================================

@app.command()
def validate(
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
):
    """
    ✅ Check that every script file and command exists
    """

    try:
        manager = load_manager(config, verbose)
        manager.validate()
    except Exception as e:
        handle_error(e)
        return

    console.print(f"✅ {config}: all scripts and commands found", style="green")


# =============================================================================
# Command: init
# =============================================================================

@app.command()
def init(
    config: Path = ConfigOption,
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing config file"
    ),
):
    """
    📝 Write an example hooky.yaml
    """

    if config.exists() and not force:
        fail(f"{config} already exists (use --force to overwrite)")

    try:
        shutil.copyfile(EXAMPLE_CONFIG_FILE, config)
    except OSError as e:
        fail(f"Could not write {config}: {e}")

    console.print(f"✅ Example config written to {config}", style="green")


# =============================================================================
# Command: version
# =============================================================================

@app.command()
def version():
    """Show hooky version"""
    console.print(f"hooky version {__version__}", style="bold cyan")


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
