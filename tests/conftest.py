"""Pytest configuration and fixtures."""

import textwrap

import pytest
from pathlib import Path

from hooky.core.config_loader import ConfigLoader


@pytest.fixture
def temp_git_repo(tmp_path, monkeypatch):
    """Real git repository (git init), used as working directory."""
    import subprocess

    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        check=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        check=True
    )

    monkeypatch.chdir(repo_dir)
    return repo_dir


@pytest.fixture
def fake_repo(tmp_path, monkeypatch):
    """Directory with a bare .git/hooks layout, used as working directory."""
    repo_dir = tmp_path / "repo"
    (repo_dir / ".git" / "hooks").mkdir(parents=True)
    monkeypatch.chdir(repo_dir)
    return repo_dir


@pytest.fixture
def write_config():
    """Write a hooky.yaml in the given directory and return its path."""

    def _write(directory: Path, content: str, name: str = "hooky.yaml") -> Path:
        path = directory / name
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def make_config():
    """Build a HookyConfig from a plain dict, as if read from YAML."""

    def _make(data):
        return ConfigLoader().load_from_dict(data, source_file="test")

    return _make


@pytest.fixture
def make_script():
    """Create an executable shell script."""

    def _make(path: Path, body: str = "echo test") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return path

    return _make
