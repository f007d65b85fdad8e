"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
voice listings, and per-language groupings.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import CommandStageError
from .voices.grouping import VoicesByLanguage
from .voices.identity import VoiceID


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_voice_keys(voice_ids: list[VoiceID]) -> None:
    """Print one canonical voice key per line."""

    for voice_id in voice_ids:
        typer.echo(voice_id.to_key())


def echo_grouping(grouped: VoicesByLanguage) -> None:
    """Print each requested language followed by its ordered voice keys."""

    for language, voice_ids in grouped.items():
        typer.echo(f"Language: {language}")
        if not voice_ids:
            typer.echo("  (no voices)")
            continue
        for voice_id in voice_ids:
            typer.echo(f"  - {voice_id.to_key()}")


def echo_grouping_json(grouped: VoicesByLanguage) -> None:
    """Print the grouping as a JSON object of language to voice keys."""

    payload = {
        language: [voice_id.to_key() for voice_id in voice_ids]
        for language, voice_ids in grouped.items()
    }
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
