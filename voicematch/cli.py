"""Command-line interface for voicematch.

Responsibilities:
- Expose user-facing commands for listing, grouping, and validating voices.
- Convert CLI arguments into `VoicematchConfig` and run the resolver.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_grouping,
    echo_grouping_json,
    echo_voice_keys,
    exit_with_command_error,
)
from .config import ConfigLoader, VoicematchConfig
from .errors import CommandStageError
from .parsing import normalize_optional_string, parse_language_list
from .resolution import VoiceResolver
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="voicematch",
    no_args_is_help=True,
    help="Match speech-synthesis voices to application languages.",
)

VoicesFileArgument = Annotated[
    Path | None,
    typer.Argument(help="YAML/JSON voice listing (overrides config file value)."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file."),
]


class StageProgressIndicator:
    """Render deterministic per-stage progress lines for a command."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}"
        )


def _load_base_config(config_path: Path | None) -> VoicematchConfig:
    """Load YAML config when requested, else environment, mapping failures to stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env(os.environ)
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `VOICEMATCH_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to read config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    voices_file: Path | None,
    languages: list[str] | None = None,
    selected_voice: str | None = None,
) -> VoicematchConfig:
    """Resolve effective command config from file/env defaults and explicit CLI overrides."""

    config = _load_base_config(config_file)
    if voices_file is not None:
        config.voices_file = voices_file
    if languages:
        resolved_languages = parse_language_list(",".join(languages))
        if resolved_languages:
            config.languages = resolved_languages
    normalized_voice = normalize_optional_string(selected_voice)
    if normalized_voice is not None:
        config.selected_voice = normalized_voice
    return config


@app.command("list-voices")
def list_voices_command(
    voices_file: VoicesFileArgument = None,
    config_file: ConfigOption = None,
) -> None:
    """List every available voice as a canonical `language/name` key."""

    try:
        config = _resolve_command_config(config_file, voices_file)
        resolver = VoiceResolver(run_logger=RunLogger(command="list-voices"))
        catalog = resolver.load_catalog(config)
        voice_ids = catalog.ids()
    except Exception as exc:
        exit_with_command_error("list-voices", exc)

    echo_voice_keys(voice_ids)
    typer.echo(f"Voices: {len(voice_ids)}")


@app.command("group")
def group_command(
    voices_file: VoicesFileArgument = None,
    languages: Annotated[
        list[str] | None,
        typer.Option(
            "--language",
            "-l",
            help="Requested language; repeat or comma-separate (overrides config).",
        ),
    ] = None,
    config_file: ConfigOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the grouping as a JSON object."),
    ] = False,
) -> None:
    """Group available voices under each requested language."""

    try:
        config = _resolve_command_config(config_file, voices_file, languages)
        if as_json:
            resolver = VoiceResolver(run_logger=RunLogger(level="WARNING", command="group"))
        else:
            progress = StageProgressIndicator(command_name="group")
            resolver = VoiceResolver(
                run_logger=RunLogger(command="group"),
                stage_progress_callback=progress.on_stage_start,
            )
        grouped = resolver.group(config)
    except Exception as exc:
        exit_with_command_error("group", exc)

    if as_json:
        echo_grouping_json(grouped)
        return
    echo_grouping(grouped)


@app.command("check")
def check_command(
    voice_key: Annotated[str, typer.Argument(help="Voice key `<language>/<name>`.")],
    language: Annotated[
        str, typer.Option("--language", "-l", help="Requested application language.")
    ],
    voices_file: VoicesFileArgument = None,
    config_file: ConfigOption = None,
) -> None:
    """Check whether a voice is acceptable for a language; exit code 1 when not."""

    try:
        config = _resolve_command_config(config_file, voices_file)
        resolver = VoiceResolver(run_logger=RunLogger(command="check"))
        acceptable = resolver.check(config, voice_key, language)
    except Exception as exc:
        exit_with_command_error("check", exc)

    typer.echo(f"Acceptable: {'yes' if acceptable else 'no'}")
    if not acceptable:
        raise typer.Exit(code=1)


@app.command("select")
def select_command(
    language: Annotated[
        str, typer.Option("--language", "-l", help="Requested application language.")
    ],
    voices_file: VoicesFileArgument = None,
    voice: Annotated[
        str | None,
        typer.Option("--voice", help="Persisted voice key (overrides config `selected_voice`)."),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Resolve the voice to use for a language, honouring a persisted choice."""

    try:
        config = _resolve_command_config(config_file, voices_file, selected_voice=voice)
        resolver = VoiceResolver(run_logger=RunLogger(command="select"))
        selected = resolver.select(config, language)
    except Exception as exc:
        exit_with_command_error("select", exc)

    typer.echo(f"Selected voice: {selected.to_key() if selected is not None else '(none)'}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
