"""Indexed catalog of available voices.

Responsibilities:
- Index raw voice records by language tag, then by voice name.
- Answer existence, lookup, exact-language, and primary-language queries.
- Stay read-only after construction; `rebuild` produces a fresh catalog.

Key types:
- `VoiceCatalog`: immutable two-level index `language -> name -> record`.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Mapping

from loguru import logger

from ..bcp47 import Tag, primary_language
from ..errors import InvariantError, VoiceNotFoundError
from ..models.datatypes import RawVoice
from .identity import VoiceID


class VoiceCatalog:
    """Voices available for synthesis, keyed by `(language, name)`.

    Later records overwrite earlier ones with the same language and name.
    Iteration follows first-seen order of languages and of names within
    each language.
    """

    __slots__ = ("_by_language",)

    def __init__(self, raw_voices: Iterable[RawVoice]) -> None:
        """Index raw voices and verify every entry is keyed by its own name.

        Raises:
            InvariantError: If a stored record reports a name other than its key.
        """

        by_language: dict[Tag, dict[str, RawVoice]] = {}
        for voice in raw_voices:
            by_name = by_language.setdefault(voice.language, {})
            name = voice.name
            if name in by_name:
                logger.debug(
                    "Overwriting duplicate voice record language={} name={}",
                    voice.language,
                    name,
                )
            by_name[name] = voice

        for by_name in by_language.values():
            for name, voice in by_name.items():
                reported_name = voice.name
                if reported_name != name:
                    raise InvariantError(
                        f"Unexpected voice keyed on {name} with .name: {reported_name}"
                    )

        self._by_language: Mapping[Tag, Mapping[str, RawVoice]] = MappingProxyType(
            {language: MappingProxyType(by_name) for language, by_name in by_language.items()}
        )

    @classmethod
    def rebuild(cls, raw_voices: Iterable[RawVoice]) -> VoiceCatalog:
        """Snapshot a changed platform voice list into a new catalog."""

        return cls(raw_voices)

    def __len__(self) -> int:
        return sum(len(by_name) for by_name in self._by_language.values())

    def languages(self) -> list[Tag]:
        """Return indexed language tags in first-seen order."""

        return list(self._by_language)

    def ids(self) -> list[VoiceID]:
        """Return every indexed identity grouped by language, then by name."""

        return [
            VoiceID(language, name)
            for language, by_name in self._by_language.items()
            for name in by_name
        ]

    def has(self, voice_id: VoiceID) -> bool:
        """Return whether both the language and the name are indexed."""

        by_name = self._by_language.get(voice_id.language)
        return by_name is not None and voice_id.name in by_name

    def get(self, voice_id: VoiceID) -> RawVoice:
        """Return the raw record for an identity.

        Raises:
            VoiceNotFoundError: If the language or the name is not indexed.
        """

        by_name = self._by_language.get(voice_id.language)
        if by_name is None or voice_id.name not in by_name:
            raise VoiceNotFoundError(
                f"The ID is missing in the voice catalog: {voice_id.to_key()}"
            )
        return by_name[voice_id.name]

    def filter_by_exact_language(self, language: Tag) -> list[VoiceID]:
        """Return identities registered under exactly `language`, possibly none."""

        by_name = self._by_language.get(language)
        if by_name is None:
            return []
        return [VoiceID(language, name) for name in by_name]

    def filter_by_primary_language(self, primary: str) -> list[VoiceID]:
        """Return identities of every language tag whose primary subtag is `primary`."""

        return [
            VoiceID(language, name)
            for language, by_name in self._by_language.items()
            if primary_language(language) == primary
            for name in by_name
        ]
