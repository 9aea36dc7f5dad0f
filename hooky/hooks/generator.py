"""
HOOKY - Hook Script Generator
Renders the shell wrapper installed as a git hook.
"""

from typing import List, Sequence

from ..core.models import HookEntry


# Marker identifying files hooky wrote. Uninstall deletes a hook only if it
# contains this exact text, so never change it.
SIGNATURE = "Generated by hooky - Do not edit manually"

SHEBANG = "#!/bin/sh"


def is_managed_hook(content: str) -> bool:
    """True if ``content`` is a hook file generated by hooky."""
    return SIGNATURE in content


def _script_invocation(entry: HookEntry) -> str:
    """Script path plus its arguments, verbatim."""
    invocation = entry.script.strip()
    target = entry.target

    # A bare file name would be looked up in PATH by the shell
    if "/" not in target:
        invocation = f"./{invocation}"

    return invocation


def _quote(text: str) -> str:
    """Single-quote for the shell: nothing inside is expanded."""
    return "'" + text.replace("'", "'\\''") + "'"


def generate_hook_script(hook_name: str, entries: Sequence[HookEntry]) -> str:
    """
    Build the wrapper script for ``hook_name``.

    Entries run in order; the first failing entry makes the hook exit
    with its status, which is what git expects to abort the operation.

    Args:
        hook_name: git hook name (pre-commit, pre-push, ...)
        entries: configured entries, in run order

    Returns:
        Shell script content
    """
    if not hook_name:
        raise ValueError("hook name must not be empty")

    lines: List[str] = [
        SHEBANG,
        f"# {SIGNATURE}",
        f"# Hook: {hook_name}",
        "",
        "set -e",
        "",
    ]

    for entry in entries:
        lines.append(f"printf '%s\\n' {_quote(f'Running: {entry.name}')}")

        # set -e is ignored inside && and || lists, so check each status
        lines.append("{")
        if entry.is_script:
            lines.append(_script_invocation(entry))
        else:
            lines.append(entry.command)
        lines.append("} || exit $?")

        if entry.description:
            lines.append("# " + " ".join(entry.description.splitlines()))

        lines.append("")

    lines.append("exit 0")
    return "\n".join(lines) + "\n"


__all__ = ["SIGNATURE", "generate_hook_script", "is_managed_hook"]
