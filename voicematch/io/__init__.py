"""Input adapters for platform voice listings."""

from .voice_list import FileVoiceSource, load_voice_list

__all__ = ["FileVoiceSource", "load_voice_list"]
