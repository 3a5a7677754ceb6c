"""Shared test fixtures for specslice.

Provides reusable fixtures for loading fixture documents, isolating the
config environment, managing output state, and running CLI commands.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from specslice.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches sys.stdout/sys.stderr at creation time; once
    CliRunner restores the real streams those references are stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Raw document fixtures (plain dicts loaded from JSON files)
# ---------------------------------------------------------------------------


@pytest.fixture
def swagger_raw() -> dict[str, Any]:
    """Raw Swagger 2.0 petstore document."""
    with open(FIXTURES_DIR / "petstore_swagger_2.0.json") as f:
        return json.load(f)


@pytest.fixture
def openapi_raw() -> dict[str, Any]:
    """Raw OpenAPI 3.0 petstore document."""
    with open(FIXTURES_DIR / "petstore_openapi_3.0.json") as f:
        return json.load(f)


@pytest.fixture
def swagger_file() -> Path:
    return FIXTURES_DIR / "petstore_swagger_2.0.json"


@pytest.fixture
def openapi_file() -> Path:
    return FIXTURES_DIR / "petstore_openapi_3.0.json"


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME into tmp_path, clears the
    SPECSLICE_* environment variables, and changes the working directory
    to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("specslice.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["SPECSLICE_OUTPUT_DIR", "SPECSLICE_INDENT"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager for the duration of a test."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
