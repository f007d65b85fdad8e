"""Readiness wait for platform voice enumeration.

Responsibilities:
- Poll a voice source until it reports voices or the retry budget runs out.
- Keep the polling policy injectable so callers and tests control timing.
"""

from __future__ import annotations

from time import sleep
from typing import Callable, Protocol, Sequence

from loguru import logger

from .models.datatypes import RawVoice

DEFAULT_READY_RETRIES = 10
DEFAULT_READY_INTERVAL_SECONDS = 0.5


class VoiceSource(Protocol):
    """Pollable platform voice enumeration."""

    def get_voices(self) -> Sequence[RawVoice]:
        """Return the voices the platform currently reports."""


def wait_for_voices(
    source: VoiceSource,
    retries: int = DEFAULT_READY_RETRIES,
    interval_seconds: float = DEFAULT_READY_INTERVAL_SECONDS,
    sleeper: Callable[[float], None] = sleep,
) -> Sequence[RawVoice]:
    """Poll `source` until it reports voices.

    Some platforms load their voice list lazily, so the first polls may come
    back empty. The wait never fails: once `retries` polls produced nothing,
    the last (empty) listing is returned and callers proceed without voices.
    """

    if retries <= 0:
        raise ValueError("`retries` must be a positive integer.")

    voices: Sequence[RawVoice] = ()
    for attempt in range(1, retries + 1):
        voices = source.get_voices()
        if voices:
            return voices
        if attempt < retries:
            sleeper(interval_seconds)

    logger.debug("No voices reported after {} poll(s)", retries)
    return voices
