"""File-backed voice listings.

Responsibilities:
- Parse YAML/JSON voice listings into `VoiceRecord` values.
- Expose a file as a pollable voice source for the readiness wait.

Accepted documents are either a top-level list of voice mappings or a mapping
with a `voices` list. Each voice needs `name` and `lang` (or `language`).
Names and tags are kept exactly as written and must be YAML strings, so
scalars YAML would resolve to booleans or numbers (`no`, `on`, `123`) need
quoting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from ..models.datatypes import VoiceRecord
from ..parsing import normalize_optional_string, parse_permissive_boolean
from ..voices.identity import KEY_SEPARATOR

_SUPPORTED_VOICE_KEYS = frozenset(
    {"name", "lang", "language", "voice_uri", "local_service", "default"}
)


def load_voice_list(path: Path) -> list[VoiceRecord]:
    """Load voice records from a YAML or JSON listing, preserving file order.

    Raises:
        FileNotFoundError: If the listing does not exist.
        ValueError: If the document or one of its entries is malformed.
    """

    raw_text = path.read_text(encoding="utf-8")
    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Voice listing `{path}` is not valid YAML/JSON: {exc}") from exc

    entries = _voice_entries(payload, path)
    return [
        _voice_record_from_mapping(entry, f"Voice listing `{path}` entry {index}")
        for index, entry in enumerate(entries, start=1)
    ]


class FileVoiceSource:
    """Voice source re-reading a listing file on every poll."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get_voices(self) -> list[VoiceRecord]:
        """Return the voices currently listed in the file."""

        return load_voice_list(self._path)


def _voice_entries(payload: Any, path: Path) -> list[Any]:
    """Return the raw voice entries of a parsed listing document."""

    if payload is None:
        return []
    if isinstance(payload, Mapping):
        unknown = sorted(str(key) for key in payload if key != "voices")
        if unknown:
            raise ValueError(
                f"Voice listing `{path}` includes unsupported key(s): {', '.join(unknown)}."
            )
        payload = payload.get("voices") or []
    if not isinstance(payload, list):
        raise ValueError(f"Voice listing `{path}` must contain a list of voices.")
    return payload


def _voice_record_from_mapping(entry: Any, source_label: str) -> VoiceRecord:
    """Build one voice record from a raw listing entry."""

    if not isinstance(entry, Mapping):
        raise ValueError(f"{source_label} must be a mapping/object.")

    unknown = sorted(str(key) for key in set(entry).difference(_SUPPORTED_VOICE_KEYS))
    if unknown:
        raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

    name = _required_verbatim_text("name", entry.get("name"), source_label)
    language_key = "language" if "language" in entry and "lang" not in entry else "lang"
    language = _required_verbatim_text(language_key, entry.get(language_key), source_label)

    return VoiceRecord(
        language=language,
        name=name,
        voice_uri=normalize_optional_string(entry.get("voice_uri")),
        local_service=_optional_boolean(entry, "local_service", source_label, default=True),
        default=_optional_boolean(entry, "default", source_label, default=False),
    )


def _optional_boolean(
    entry: Mapping[str, Any], key: str, source_label: str, default: bool
) -> bool:
    """Read an optional boolean field of a voice entry."""

    if key not in entry:
        return default
    parsed = parse_permissive_boolean(entry[key])
    if parsed is None:
        raise ValueError(
            f"{source_label} field `{key}` must be a boolean value "
            "(`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return parsed


def _required_verbatim_text(field_name: str, value: Any, source_label: str) -> str:
    """Return a non-blank string field exactly as written.

    YAML resolves unquoted scalars such as `no`, `on` or `123` to booleans and
    numbers; those are rejected rather than stringified, since tags and names
    are matched verbatim.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{source_label} requires non-empty `{field_name}`.")
    if not isinstance(value, str):
        raise ValueError(
            f"{source_label} field `{field_name}` must be a string, got "
            f"{type(value).__name__} `{value}`; quote the value in YAML."
        )
    if KEY_SEPARATOR in value:
        raise ValueError(
            f"{source_label} field `{field_name}` must not contain {KEY_SEPARATOR!r}: {value}"
        )
    return value
