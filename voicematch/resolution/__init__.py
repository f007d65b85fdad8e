"""Voice resolution orchestration package."""

from .orchestrator import VoiceResolver

__all__ = ["VoiceResolver"]
