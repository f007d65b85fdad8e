"""Raw voice record types.

Responsibilities:
- Describe the minimal shape the catalog needs from platform voice records.
- Provide a concrete immutable record for file-based voice listings.

Key types:
- `RawVoice`: structural protocol with `language` and `name`.
- `VoiceRecord`: frozen dataclass implementing `RawVoice`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class RawVoice(Protocol):
    """Structural shape of a platform voice record."""

    @property
    def language(self) -> str:
        """BCP-47 tag the voice speaks."""

    @property
    def name(self) -> str:
        """Engine-assigned voice name."""


@dataclass(frozen=True, slots=True)
class VoiceRecord:
    """One voice reported by a speech-synthesis platform.

    Attributes:
        language: BCP-47 tag of the voice, kept verbatim.
        name: Display/engine voice name, kept verbatim.
        voice_uri: Optional platform URI of the voice.
        local_service: Whether synthesis runs locally rather than remotely.
        default: Whether the platform marks this voice as its default.
    """

    language: str
    name: str
    voice_uri: str | None = None
    local_service: bool = True
    default: bool = False
