"""Shared pytest fixtures for margin-simulator tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_batch(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a batch file (any JSON-serializable payload) and return its path."""

    def _write(payload: Any) -> Path:
        path = tmp_path / "batch.json"
        path.write_text(json.dumps(payload))
        return path

    return _write
