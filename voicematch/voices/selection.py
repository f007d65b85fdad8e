"""Validation of persisted voice choices against a grouping."""

from __future__ import annotations

from loguru import logger

from ..errors import ValidationError
from .grouping import VoicesByLanguage, voice_for_language_ok
from .identity import VoiceID, voice_id_from_key


def resolve_voice_selection(
    stored_key: str | None,
    language: str,
    voices_by_language: VoicesByLanguage,
) -> VoiceID | None:
    """Return the voice to use for `language` given a persisted choice.

    The stored voice wins when it is still acceptable for the language.
    Otherwise the first voice of the language's group is used, or `None` when
    the group is empty or the language was never grouped. A malformed stored
    key counts as no stored choice.
    """

    if stored_key is not None:
        try:
            stored = voice_id_from_key(stored_key)
        except ValidationError as exc:
            logger.debug("Ignoring malformed stored voice key: {}", exc)
        else:
            if voice_for_language_ok(stored, language, voices_by_language):
                return stored

    candidates = voices_by_language.get(language)
    if not candidates:
        return None
    return candidates[0]
