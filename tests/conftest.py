"""Pytest configuration and shared fixtures."""

import os
import stat
import sys

import pytest

from procspec.modules.process.command_builder import CommandBuilder


@pytest.fixture(autouse=True)
def clean_procspec_env(monkeypatch):
    """Keep PROCSPEC_* settings from the developer's shell out of the tests."""
    for name in ("PROCSPEC_DEFAULT_TIMEOUT", "PROCSPEC_LOG_LEVEL", "PROCSPEC_BINARY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def builder():
    """Provide an empty builder."""
    return CommandBuilder()


@pytest.fixture
def python_builder():
    """Builder whose prefix runs the current interpreter with an inline script."""
    def make(script, *args):
        return CommandBuilder.create(list(args)).set_prefix([sys.executable, "-c", script])
    return make


@pytest.fixture
def fake_binary(tmp_path):
    """Create an executable shell script and return its path."""
    path = tmp_path / "fake-tool"
    path.write_text("#!/bin/sh\necho fake\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture
def plain_file(tmp_path):
    """Create a regular, non-executable file."""
    path = tmp_path / "not-a-tool.txt"
    path.write_text("data\n")
    os.chmod(path, 0o644)
    return str(path)
