"""Structured run logging utilities.

Responsibilities:
- Emit deterministic `[phase]` stage events for one CLI command through `loguru`.
- Route the library's own debug diagnostics to the same sink, unformatted.

Stage events carry their rendered tokens in the loguru record `extra`
mapping, so the handler format decides between the `[phase]` line and a
plain message without re-parsing text.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from loguru import logger as _loguru_logger

_PHASE_LINE_KEY = "phase_line"
_TOKEN_SAFE_PUNCTUATION = frozenset("-_.:/")


def _token_value(value: object) -> str:
    """Render one context value as a single whitespace-free token."""

    text = str(value).strip()
    if not text:
        return "none"
    return "".join(
        character if character.isalnum() or character in _TOKEN_SAFE_PUNCTUATION else "_"
        for character in text
    )


def _record_format(record: dict[str, Any]) -> str:
    """Pick the handler template for a loguru record."""

    if _PHASE_LINE_KEY in record["extra"]:
        return "{extra[" + _PHASE_LINE_KEY + "]}\n"
    return "{message}\n"


class RunLogger:
    """Emit deterministic stage logs for CLI-observable resolution activity.

    Lines look like `[phase] level=INFO command=group stage=load event=complete
    voices=5`. The `command` token is present only when a command name is given;
    summary counters follow in key order.
    """

    def __init__(
        self,
        sink: TextIO | None = None,
        level: str = "INFO",
        command: str | None = None,
    ) -> None:
        """Route loguru output to `sink` at `level`, replacing earlier handlers."""

        self._sink = sink or sys.stdout
        self._command = command
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format=_record_format, level=level, colorize=False)

    @property
    def command(self) -> str | None:
        return self._command

    def _phase_line(self, level: str, stage: str, event: str, context: dict[str, object]) -> str:
        tokens = [f"level={level}"]
        if self._command is not None:
            tokens.append(f"command={_token_value(self._command)}")
        tokens.append(f"stage={stage}")
        tokens.append(f"event={event}")
        tokens.extend(f"{key}={_token_value(context[key])}" for key in sorted(context))
        return "[phase] " + " ".join(tokens)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        line = self._phase_line(level, stage, event, context)
        _loguru_logger.bind(**{_PHASE_LINE_KEY: line}).log(level, "{} {}", stage, event)

    def log_stage_start(self, stage: str) -> None:
        self._emit("INFO", "start", stage)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event with optional summary counters."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event naming only the exception type."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
