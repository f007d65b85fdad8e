"""Per-language voice grouping with exact-then-primary fallback.

Responsibilities:
- Resolve acceptable voices for each requested application language.
- Order each group deterministically by voice name, then language tag.
- Answer whether a voice is acceptable for a language in a grouping.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..bcp47 import primary_language
from .catalog import VoiceCatalog
from .identity import VoiceID

VoicesByLanguage = dict[str, list[VoiceID]]


def voice_sort_key(voice_id: VoiceID) -> tuple[str, str]:
    """Return the total ordering key: name first, language tag as tie-break."""

    return voice_id.name, voice_id.language


def group_voices_by_language(
    catalog: VoiceCatalog, languages: Iterable[str]
) -> VoicesByLanguage:
    """Group catalog voices under every requested language.

    An exact tag match wins outright; only when it is empty are voices sharing
    the primary subtag accepted. A language without any match maps to an empty
    list. Repeated languages overwrite their earlier entry.
    """

    grouped: VoicesByLanguage = {}
    for language in languages:
        candidates = catalog.filter_by_exact_language(language)
        if not candidates:
            candidates = catalog.filter_by_primary_language(primary_language(language))
        grouped[language] = sorted(candidates, key=voice_sort_key)
    return grouped


def voice_for_language_ok(
    voice: VoiceID, language: str, voices_by_language: VoicesByLanguage
) -> bool:
    """Return whether `voice` is listed for `language`; absent languages yield `False`."""

    candidates = voices_by_language.get(language)
    if candidates is None:
        return False

    key = voice.to_key()
    for candidate in candidates:
        if candidate.to_key() == key:
            return True
    return False
