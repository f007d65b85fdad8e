"""Domain exceptions for voice matching and CLI diagnostics."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a voice identity or its key encoding is malformed."""


class InvariantError(RuntimeError):
    """Raised when raw voice records violate catalog post-conditions."""


class VoiceNotFoundError(LookupError):
    """Raised when a voice identity is absent from a catalog."""


class CommandStageError(RuntimeError):
    """Raised when a specific resolution stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
