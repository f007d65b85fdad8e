"""Voice resolution orchestrator.

Responsibilities:
- Turn a `VoicematchConfig` into a catalog, a per-language grouping, and
  selection/acceptability answers.
- Map stage failures to `CommandStageError` with actionable hints.

Stages run in order `config -> load -> catalog -> group -> select`.
"""

from __future__ import annotations

from collections.abc import Callable
from time import sleep
from typing import Sequence

from ..config import VoicematchConfig
from ..errors import CommandStageError, InvariantError, ValidationError
from ..io.voice_list import FileVoiceSource
from ..models.datatypes import RawVoice
from ..readiness import VoiceSource, wait_for_voices
from ..telemetry.logger import RunLogger
from ..voices.catalog import VoiceCatalog
from ..voices.grouping import (
    VoicesByLanguage,
    group_voices_by_language,
    voice_for_language_ok,
)
from ..voices.identity import VoiceID, voice_id_from_key
from ..voices.selection import resolve_voice_selection
from .telemetry import ResolverTelemetryMixin


class VoiceResolver(ResolverTelemetryMixin):
    """Resolve acceptable voices for requested languages."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
        voice_source_factory: Callable[[VoicematchConfig], VoiceSource] | None = None,
        sleeper: Callable[[float], None] = sleep,
    ) -> None:
        """Initialize resolver hooks.

        Args:
            run_logger: Optional structured stage logger.
            stage_progress_callback: Optional `(stage, index, total)` progress hook.
            voice_source_factory: Builds the voice source for a config; defaults
                to reading `config.voices_file`.
            sleeper: Pause function used between readiness polls.
        """

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback
        self._voice_source_factory = voice_source_factory or self._file_voice_source
        self._sleeper = sleeper

    def load_catalog(self, config: VoicematchConfig) -> VoiceCatalog:
        """Wait for voices and index them into a catalog."""

        self._run_stage("config", lambda: self._validate_config(config))
        raw_voices = self._run_stage(
            "load",
            lambda: self._load_voices(config),
            lambda voices: {"voices": len(voices)},
        )
        return self._run_stage(
            "catalog",
            lambda: self._build_catalog(raw_voices),
            lambda catalog: {"languages": len(catalog.languages()), "voices": len(catalog)},
        )

    def group(self, config: VoicematchConfig) -> VoicesByLanguage:
        """Return acceptable voices per requested language."""

        catalog = self.load_catalog(config)
        return self._group(catalog, config.languages)

    def check(self, config: VoicematchConfig, voice_key: str, language: str) -> bool:
        """Return whether the voice encoded by `voice_key` is acceptable for `language`."""

        voice = self._decode_voice_key(voice_key, stage="config")
        catalog = self.load_catalog(config)
        grouped = self._group(catalog, [language])
        return voice_for_language_ok(voice, language, grouped)

    def select(self, config: VoicematchConfig, language: str) -> VoiceID | None:
        """Return the persisted voice if still acceptable, else the first candidate."""

        catalog = self.load_catalog(config)
        grouped = self._group(catalog, [language])
        return self._run_stage(
            "select",
            lambda: resolve_voice_selection(config.selected_voice, language, grouped),
        )

    def _group(self, catalog: VoiceCatalog, languages: Sequence[str]) -> VoicesByLanguage:
        """Run the grouping stage for the requested languages."""

        return self._run_stage(
            "group",
            lambda: group_voices_by_language(catalog, languages),
            lambda grouped: {
                "languages": len(grouped),
                "empty": sum(1 for voices in grouped.values() if not voices),
            },
        )

    def _validate_config(self, config: VoicematchConfig) -> None:
        """Validate configuration and map failures to stage-aware error."""

        try:
            config.validate()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=str(exc),
                hint="Fix the languages, selected voice, or readiness options and rerun.",
            ) from exc

    def _load_voices(self, config: VoicematchConfig) -> Sequence[RawVoice]:
        """Read platform voices once the source reports readiness."""

        try:
            source = self._voice_source_factory(config)
            return wait_for_voices(
                source,
                retries=config.ready_retries,
                interval_seconds=config.ready_interval_seconds,
                sleeper=self._sleeper,
            )
        except FileNotFoundError as exc:
            raise CommandStageError(
                stage="load",
                detail=f"Voice listing not found: `{config.voices_file}`.",
                hint="Pass an existing `<voices.yaml>` or set `voices_file` in the config.",
            ) from exc
        except ValueError as exc:
            raise CommandStageError(
                stage="load",
                detail=str(exc),
                hint=(
                    "Each voice needs non-empty string `name` and `lang` fields; "
                    "quote YAML values such as `no` or `123`."
                ),
            ) from exc

    @staticmethod
    def _build_catalog(raw_voices: Sequence[RawVoice]) -> VoiceCatalog:
        """Index raw voices and map malformed records to stage-aware error."""

        try:
            catalog = VoiceCatalog(raw_voices)
            catalog.ids()
        except InvariantError as exc:
            raise CommandStageError(
                stage="catalog",
                detail=str(exc),
                hint="The voice enumeration reported inconsistent records.",
            ) from exc
        except ValidationError as exc:
            raise CommandStageError(
                stage="catalog",
                detail=f"Voice record cannot form a voice key: {exc}",
                hint="Voice names and language tags must be non-empty and free of `/`.",
            ) from exc
        return catalog

    @staticmethod
    def _decode_voice_key(voice_key: str, stage: str) -> VoiceID:
        """Decode a canonical voice key, mapping malformed keys to stage errors."""

        try:
            return voice_id_from_key(voice_key)
        except ValidationError as exc:
            raise CommandStageError(
                stage=stage,
                detail=str(exc),
                hint="Voice keys look like `<language>/<name>`, e.g. `en-US/Alice`.",
            ) from exc

    @staticmethod
    def _file_voice_source(config: VoicematchConfig) -> VoiceSource:
        """Build the default file-backed voice source for a config."""

        if config.voices_file is None:
            raise CommandStageError(
                stage="load",
                detail="Voice listing path is required.",
                hint="Pass `<voices.yaml>` or set `voices_file` in `--config <path.yaml>`.",
            )
        return FileVoiceSource(config.voices_file)
