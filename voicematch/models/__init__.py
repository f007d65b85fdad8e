"""Shared typed data models for voicematch.

This package contains raw voice record types exchanged between the voice
enumeration layer and the catalog.
"""

from .datatypes import RawVoice, VoiceRecord

__all__ = ["RawVoice", "VoiceRecord"]
