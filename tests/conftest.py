"""Shared pytest configuration and fixtures for all tests."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Expected Output
# =============================================================================

SCENARIO_A_UNIT = """[Unit]
Description=This service has been generated with metsysd
After=network.target
[Service]
ExecStart=echo hi
Type=simple
Restart=no
[Install]
WantedBy=multi-user.target
"""


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def user_home(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at an empty temporary directory.

    Returns:
        Path to the fake home directory (nothing under it exists yet)
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def popen_calls(monkeypatch) -> list[tuple[list[str], dict]]:
    """Replace subprocess.Popen with a recorder so no real systemctl is spawned.

    Returns:
        List of (args, kwargs) for every spawn, in call order
    """
    calls: list[tuple[list[str], dict]] = []
    popen_class = subprocess.Popen

    def fake_popen(args, **kwargs):
        calls.append((list(args), kwargs))
        return MagicMock(spec=popen_class)

    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    return calls


@pytest.fixture
def run_calls(monkeypatch) -> list[list[str]]:
    """Replace subprocess.run with a recorder returning exit status 0."""
    calls: list[list[str]] = []

    def fake_run(args, **kwargs):  # noqa: ARG001
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
