"""Unit tests for YAML/JSON voice listing parsing."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from voicematch.io import FileVoiceSource, load_voice_list
from voicematch.models.datatypes import VoiceRecord


def test_load_voice_list_reads_mapping_document(sample_voice_listing: Path) -> None:
    """A `voices:` mapping should load records in file order with optional flags."""

    voices = load_voice_list(sample_voice_listing)

    assert [(voice.language, voice.name) for voice in voices] == [
        ("en-US", "Zoe"),
        ("en-GB", "Amy"),
        ("en-US", "Alice"),
        ("de-DE", "Anna"),
        ("en", "Bob"),
    ]
    assert voices[3].local_service is False
    assert voices[4].default is True
    assert voices[0] == VoiceRecord(language="en-US", name="Zoe")


def test_load_voice_list_reads_json_list_with_language_alias(
    write_voice_listing: Callable[..., Path],
) -> None:
    """A top-level JSON list should load, accepting `language` as an alias of `lang`."""

    path = write_voice_listing(
        '[{"language": "fr-CA", "name": "Amelie", "voice_uri": "urn:amelie"}]',
        filename="voices.json",
    )

    assert load_voice_list(path) == [
        VoiceRecord(language="fr-CA", name="Amelie", voice_uri="urn:amelie")
    ]


def test_load_voice_list_treats_empty_document_as_no_voices(
    write_voice_listing: Callable[..., Path],
) -> None:
    """Empty documents and empty `voices` lists should produce no records."""

    assert load_voice_list(write_voice_listing("# nothing yet")) == []
    assert load_voice_list(write_voice_listing("voices: []", filename="empty.yaml")) == []


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- {name: Alice}", r"entry 1 requires non-empty `lang`"),
        ("- {lang: en-US, name: '  '}", r"entry 1 requires non-empty `name`"),
        ("- {lang: en-US, name: Alice, pitch: 2}", r"unsupported key\(s\): pitch"),
        ("- {lang: en-US, name: Alice, default: maybe}", r"field `default` must be a boolean"),
        ("- just-a-string", r"entry 1 must be a mapping"),
        ("voices: {lang: en}", r"must contain a list of voices"),
        ("speakers: []", r"unsupported key\(s\): speakers"),
        ("voices: [unclosed", r"not valid YAML/JSON"),
        ("- {lang: no, name: Alice}", r"field `lang` must be a string, got bool `False`; quote"),
        ("- {language: 123, name: Alice}", r"field `language` must be a string, got int `123`"),
        ("- {lang: en-US, name: on}", r"field `name` must be a string, got bool `True`"),
        ("- {lang: en-US, name: 42}", r"field `name` must be a string, got int `42`"),
        ("- {lang: en-US, name: Alice/Premium}", r"field `name` must not contain '/': Alice/Premium"),
        ("- {lang: en/US, name: Alice}", r"field `lang` must not contain '/': en/US"),
    ],
)
def test_load_voice_list_rejects_malformed_documents(
    write_voice_listing: Callable[..., Path], content: str, message: str
) -> None:
    """Malformed listings should fail with location-bearing value errors."""

    with pytest.raises(ValueError, match=message):
        load_voice_list(write_voice_listing(content))


def test_load_voice_list_keeps_quoted_names_and_tags_verbatim(
    write_voice_listing: Callable[..., Path],
) -> None:
    """Quoted scalars should load as written, surrounding whitespace included."""

    path = write_voice_listing(
        "voices:\n"
        "  - {lang: \"no\", name: \" Alice \"}\n"
        "  - {lang: \"en-US\", name: \"123\"}\n"
    )

    assert load_voice_list(path) == [
        VoiceRecord(language="no", name=" Alice "),
        VoiceRecord(language="en-US", name="123"),
    ]


def test_file_voice_source_rereads_file_on_every_poll(
    write_voice_listing: Callable[..., Path],
) -> None:
    """The file source should reflect listing changes between polls."""

    path = write_voice_listing("voices: []")
    source = FileVoiceSource(path)
    assert source.get_voices() == []

    path.write_text("voices:\n  - {lang: en, name: Bob}\n", encoding="utf-8")

    assert source.get_voices() == [VoiceRecord(language="en", name="Bob")]
    assert source.path == path


def test_load_voice_list_raises_for_missing_file(tmp_path: Path) -> None:
    """A missing listing should surface as `FileNotFoundError`."""

    with pytest.raises(FileNotFoundError):
        load_voice_list(tmp_path / "missing.yaml")
