"""Minimal BCP-47 helpers used by voice matching.

Only primary-subtag extraction is provided; script, region and variant
negotiation is intentionally absent.
"""

from __future__ import annotations

Tag = str

_SUBTAG_SEPARATOR = "-"


def primary_language(tag: Tag) -> str:
    """Return the primary language subtag of a tag (`en` for `en-US`).

    Tags are treated as opaque case-sensitive strings, so no case folding is
    applied. A tag without subtags is its own primary language.
    """

    return tag.split(_SUBTAG_SEPARATOR, 1)[0]
