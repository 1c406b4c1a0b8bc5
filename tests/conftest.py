"""Shared pytest fixtures for PEMDAS tests."""

from __future__ import annotations

import pytest

from pemdas.core.settings import MAX_DEPTH_ENV_VAR


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PEMDAS_MAX_DEPTH from leaking into tests."""
    monkeypatch.delenv(MAX_DEPTH_ENV_VAR, raising=False)
