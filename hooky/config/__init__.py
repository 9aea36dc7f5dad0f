"""Bundled configuration files for hooky."""

from pathlib import Path

CONFIG_DIR = Path(__file__).parent
EXAMPLE_CONFIG_FILE = CONFIG_DIR / "example.yaml"

__all__ = ["CONFIG_DIR", "EXAMPLE_CONFIG_FILE"]
