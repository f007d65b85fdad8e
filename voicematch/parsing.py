"""Shared parsing helpers for configuration and CLI value normalization."""

from __future__ import annotations

from typing import Iterable


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_language_list(value: object) -> tuple[str, ...]:
    """Parse requested language identifiers from a comma string or a sequence.

    Blank items are dropped; order and duplicates are preserved since every
    requested language produces its own grouping entry.

    Raises:
        ValueError: If the value is neither a string nor a list of strings.
            Non-string items are rejected instead of stringified, so a YAML
            `no` (parsed as `False`) never becomes the language `"False"`.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        items: Iterable[object] = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        raise ValueError(
            f"Language list must be a comma-separated string or a list, got "
            f"{type(value).__name__} `{value}`; quote language tags in YAML."
        )

    languages: list[str] = []
    for item in items:
        if item is None:
            continue
        if not isinstance(item, str):
            raise ValueError(
                f"Language list items must be strings, got {type(item).__name__} "
                f"`{item}`; quote the tag in YAML."
            )
        normalized = normalize_optional_string(item)
        if normalized is not None:
            languages.append(normalized)
    return tuple(languages)
