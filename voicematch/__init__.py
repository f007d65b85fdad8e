"""Top-level package for voicematch.

This package resolves which speech-synthesis voices are acceptable for each
requested application language, using exact BCP-47 tag matches with a
primary-language fallback. The main orchestration entry point is
`VoiceResolver`; the matching primitives live in `voicematch.voices`.
"""

from .resolution import VoiceResolver
from .voices import VoiceCatalog, VoiceID, group_voices_by_language, voice_for_language_ok

__all__ = [
    "VoiceCatalog",
    "VoiceID",
    "VoiceResolver",
    "group_voices_by_language",
    "voice_for_language_ok",
    "__version__",
]

__version__ = "0.1.0"
