"""Voice identity value type and its canonical key encoding.

Responsibilities:
- Represent one voice as an immutable `(language, name)` pair.
- Encode identities as `language/name` keys for persistence and comparison.
- Decode keys back into validated identities.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ValidationError

KEY_SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class VoiceID:
    """Identity of a voice within a catalog.

    Equality is exact and case-sensitive on both fields.

    Attributes:
        language: BCP-47 tag of the voice.
        name: Voice name as reported by the platform.
    """

    language: str
    name: str

    def __post_init__(self) -> None:
        """Reject fields that would make the canonical key ambiguous."""

        if KEY_SEPARATOR in self.language:
            raise ValidationError(
                f"Unexpected {KEY_SEPARATOR!r} in the language of the voice: {self.language}"
            )
        if KEY_SEPARATOR in self.name:
            raise ValidationError(
                f"Unexpected {KEY_SEPARATOR!r} in the name of the voice: {self.name}"
            )

    def to_key(self) -> str:
        """Return the canonical `language/name` key."""

        return f"{self.language}{KEY_SEPARATOR}{self.name}"

    @classmethod
    def from_key(cls, key: str) -> VoiceID:
        """Decode a canonical key; see `voice_id_from_key`."""

        return voice_id_from_key(key)


def voice_id_from_key(key: str) -> VoiceID:
    """Decode a canonical key into a voice identity.

    Raises:
        ValidationError: If the key does not split into exactly two parts.
    """

    parts = key.split(KEY_SEPARATOR)
    if len(parts) != 2:
        raise ValidationError(f"Invalid voice ID given as key: {key}")
    language, name = parts
    return VoiceID(language, name)
