"""Unit tests for resolving a persisted voice choice against a grouping."""

from __future__ import annotations

from voicematch.voices import VoiceID, resolve_voice_selection

_GROUPED = {
    "en-US": [VoiceID("en-US", "Alice"), VoiceID("en-US", "Zoe")],
    "fr-CA": [],
}


def test_stored_voice_is_kept_when_still_acceptable() -> None:
    """A persisted voice listed for the language should be returned as-is."""

    assert resolve_voice_selection("en-US/Zoe", "en-US", _GROUPED) == VoiceID("en-US", "Zoe")


def test_first_voice_is_used_when_stored_voice_is_not_acceptable() -> None:
    """A persisted voice missing from the group should fall back to the first candidate."""

    assert resolve_voice_selection("en-GB/Amy", "en-US", _GROUPED) == VoiceID("en-US", "Alice")


def test_first_voice_is_used_without_stored_choice() -> None:
    """No persisted choice should select the first candidate."""

    assert resolve_voice_selection(None, "en-US", _GROUPED) == VoiceID("en-US", "Alice")


def test_malformed_stored_key_counts_as_no_choice() -> None:
    """A malformed persisted key should not raise and should fall back."""

    assert resolve_voice_selection("garbage", "en-US", _GROUPED) == VoiceID("en-US", "Alice")


def test_no_selection_for_empty_or_ungrouped_language() -> None:
    """Empty and absent groups should both produce no selection."""

    assert resolve_voice_selection("fr-CA/Amelie", "fr-CA", _GROUPED) is None
    assert resolve_voice_selection(None, "de-DE", _GROUPED) is None
