"""
HOOKY - Script Validator
Pre-flight check that every configured script file and command exists.

Only presence is checked: nothing is executed, and tokenization is a plain
whitespace split (quoted arguments with spaces are not understood).
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional

from ..core.models import HookEntry, HookyConfig, IssueKind, ScriptIssue

logger = logging.getLogger(__name__)


class ScriptValidationError(Exception):
    """One or more entries reference missing scripts or commands."""

    def __init__(self, issues: List[ScriptIssue]):
        self.issues = list(issues)
        lines = [issue.message for issue in self.issues]
        super().__init__(
            f"validation failed ({len(lines)} problem(s)):\n  " + "\n  ".join(lines)
        )


def check_entry(hook_name: str, index: int, entry: HookEntry) -> Optional[ScriptIssue]:
    """
    Check a single entry.

    Returns:
        ScriptIssue if the script file / command cannot be found, else None
    """
    target = entry.target

    if entry.is_script:
        if target and Path(target).exists():
            return None
        kind = IssueKind.MISSING_SCRIPT
    else:
        if target and shutil.which(target) is not None:
            return None
        kind = IssueKind.MISSING_COMMAND

    return ScriptIssue(
        hook_name=hook_name,
        index=index,
        entry_name=entry.name,
        kind=kind,
        target=target,
    )


def collect_issues(config: HookyConfig) -> List[ScriptIssue]:
    """Check every entry of every hook and return all problems found."""
    issues: List[ScriptIssue] = []

    for hook_name, entries in config.hooks.items():
        for idx, entry in enumerate(entries):
            issue = check_entry(hook_name, idx, entry)
            if issue is not None:
                logger.debug("Validation issue: %s", issue.message)
                issues.append(issue)

    return issues


def validate_scripts(config: HookyConfig) -> None:
    """
    Validate the whole configuration.

    Raises:
        ScriptValidationError: carrying every issue, not just the first
    """
    issues = collect_issues(config)
    if issues:
        raise ScriptValidationError(issues)


__all__ = [
    "ScriptValidationError",
    "check_entry",
    "collect_issues",
    "validate_scripts",
]
