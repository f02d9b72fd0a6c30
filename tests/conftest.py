"""Shared pytest fixtures for the full casekit test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear casekit environment settings so tests start from defaults."""

    monkeypatch.delenv("CASEKIT_CASE_FORMAT", raising=False)
    monkeypatch.delenv("CASEKIT_VERBOSE", raising=False)
