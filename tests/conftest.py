"""Shared pytest fixtures for the full voicematch test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from voicematch.models.datatypes import VoiceRecord


@pytest.fixture
def sample_voices() -> list[VoiceRecord]:
    """Provide a small multi-language voice list in platform enumeration order."""

    return [
        VoiceRecord(language="en-US", name="Zoe"),
        VoiceRecord(language="en-GB", name="Amy"),
        VoiceRecord(language="en-US", name="Alice"),
        VoiceRecord(language="de-DE", name="Anna", local_service=False),
        VoiceRecord(language="en", name="Bob", default=True),
    ]


@pytest.fixture
def write_voice_listing(tmp_path: Path) -> Callable[..., Path]:
    """Provide a helper writing YAML voice listing text into a temporary file."""

    def _write(content: str, filename: str = "voices.yaml") -> Path:
        """Write listing content and return its path."""

        path = tmp_path / filename
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_voice_listing(write_voice_listing: Callable[..., Path]) -> Path:
    """Provide a YAML listing mirroring `sample_voices`."""

    return write_voice_listing(
        """
voices:
  - {lang: en-US, name: Zoe}
  - {lang: en-GB, name: Amy}
  - {lang: en-US, name: Alice}
  - {lang: de-DE, name: Anna, local_service: false}
  - {lang: en, name: Bob, default: true}
"""
    )
