"""Integration-test fixtures for deterministic CLI environment."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clear_voicematch_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove `VOICEMATCH_*` variables so CLI defaults do not leak from the host."""

    for key in list(os.environ):
        if key.startswith("VOICEMATCH_"):
            monkeypatch.delenv(key, raising=False)
