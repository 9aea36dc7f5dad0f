"""
HOOKY - Git Directory Locator
Finds the .git metadata directory by walking up from the working directory.
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class NotGitRepositoryError(Exception):
    """No git metadata directory found."""
    pass


def _resolve_gitdir_file(git_file: Path) -> Optional[Path]:
    """Follow a ``.git`` file (worktrees, submodules) to the real git dir."""
    try:
        content = git_file.read_text().strip()
    except OSError:
        return None

    if not content.startswith("gitdir:"):
        return None

    real_git_dir = Path(content.split(":", 1)[1].strip())
    if not real_git_dir.is_absolute():
        real_git_dir = git_file.parent / real_git_dir

    return real_git_dir


def find_git_directory(start: Optional[Path] = None) -> Path:
    """
    Locate the git metadata directory.

    Walks from ``start`` (default: working directory) up to the filesystem
    root and returns the first ``.git`` found.

    Raises:
        NotGitRepositoryError: nothing found, or the ``.git`` file points
            to a directory that does not exist
    """
    start = Path(start or Path.cwd()).resolve()

    for directory in (start, *start.parents):
        candidate = directory / ".git"

        if candidate.is_dir():
            logger.debug("Found git directory: %s", candidate)
            return candidate

        if candidate.is_file():
            real_git_dir = _resolve_gitdir_file(candidate)
            if real_git_dir is None or not real_git_dir.is_dir():
                raise NotGitRepositoryError(
                    f"invalid .git file at {candidate} (gitdir not found)"
                )
            logger.debug("Found git directory via %s: %s", candidate, real_git_dir)
            return real_git_dir

    raise NotGitRepositoryError(
        f"not a git repository (or any of the parent directories): {start}"
    )


__all__ = ["NotGitRepositoryError", "find_git_directory"]
