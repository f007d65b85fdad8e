"""Voice identity, catalog, and language grouping.

This package resolves which available voices are acceptable for each
requested application language.
"""

from .catalog import VoiceCatalog
from .grouping import (
    VoicesByLanguage,
    group_voices_by_language,
    voice_for_language_ok,
    voice_sort_key,
)
from .identity import KEY_SEPARATOR, VoiceID, voice_id_from_key
from .selection import resolve_voice_selection

__all__ = [
    "KEY_SEPARATOR",
    "VoiceCatalog",
    "VoiceID",
    "VoicesByLanguage",
    "group_voices_by_language",
    "resolve_voice_selection",
    "voice_for_language_ok",
    "voice_id_from_key",
    "voice_sort_key",
]
