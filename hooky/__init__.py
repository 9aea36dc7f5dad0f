"""
🪝 HOOKY - Declarative Git Hooks

Installs git hook wrappers generated from hooky.yaml, removes only the
hooks it generated, and validates every configured script and command.
"""

from .__version__ import __version__

__all__ = ["__version__"]
