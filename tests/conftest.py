"""Pytest configuration for test isolation.

Logging is process-global and the CLI reads ``.env`` from the current working
directory. To keep tests hermetic, an autouse fixture pins the log level
variable, runs each test in its own working directory and detaches logging
handlers afterwards.

Sample exports are written Windows-1252 encoded, as DKB serves them, so the
umlauts in the column titles exercise the decoding fallback.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from samples import CREDIT_EXPORT, DEBIT_EXPORT

from dkb_ynab.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("DKB_YNAB_LOG_LEVEL", "WARNING")
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def debit_export(tmp_path: Path) -> Path:
    path = tmp_path / "girokonto.csv"
    path.write_bytes(DEBIT_EXPORT.encode("cp1252"))
    return path


@pytest.fixture
def credit_export(tmp_path: Path) -> Path:
    path = tmp_path / "kreditkarte.csv"
    path.write_bytes(CREDIT_EXPORT.encode("cp1252"))
    return path
