"""
HOOKY - Hook Manager
Per-invocation orchestrator: loads config, finds the git directory and
hands both, as one immutable HookContext, to each operation.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..core.config_loader import load_config
from ..core.models import DEFAULT_CONFIG_FILE, HookContext, HookReport, InstallResult
from .install import install_hooks, list_hooks, uninstall_hooks
from .locator import find_git_directory
from .validator import validate_scripts

logger = logging.getLogger(__name__)


class HookManager:
    """
    Entry point used by the CLI.

    Nothing is read until ``init()`` runs; every operation calls it first,
    so errors surface as ConfigLoadError or NotGitRepositoryError.
    """

    def __init__(self, config_path: Union[str, Path] = DEFAULT_CONFIG_FILE, verbose: bool = False):
        self.config_path = Path(config_path)
        self.verbose = verbose
        self._context: Optional[HookContext] = None

    def init(self) -> HookContext:
        if self._context is None:
            config = load_config(self.config_path)
            git_dir = find_git_directory()
            self._context = HookContext(
                config=config,
                git_dir=git_dir,
                verbose=self.verbose or config.settings.verbose,
            )
            logger.debug(
                "Initialized: %d hook(s), %d entries, git dir %s",
                len(config.hooks), config.total_entries, git_dir,
            )
        return self._context

    def install(self, validate: bool = True) -> List[InstallResult]:
        return install_hooks(self.init(), validate=validate)

    def uninstall(self) -> List[InstallResult]:
        return uninstall_hooks(self.init())

    def validate(self) -> None:
        validate_scripts(self.init().config)

    def list(self) -> List[HookReport]:
        return list_hooks(self.init())


__all__ = ["HookManager"]
