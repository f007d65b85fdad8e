"""Configuration model and loaders for voicematch.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `VoicematchConfig`: normalized settings for one resolution run.
- `ConfigLoader`: static construction helpers for `VoicematchConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_language_list,
)
from .readiness import DEFAULT_READY_INTERVAL_SECONDS, DEFAULT_READY_RETRIES
from .voices.identity import voice_id_from_key


_DEFAULT_LANGUAGES = ("en",)


@dataclass(slots=True)
class VoicematchConfig:
    """Runtime configuration for one resolution run.

    Attributes:
        voices_file: YAML/JSON listing of available voices.
        languages: Requested application languages, in request order.
        selected_voice: Persisted voice choice as a canonical `language/name` key.
        ready_retries: Number of polls while waiting for voices to appear.
        ready_interval_seconds: Pause between readiness polls.
    """

    voices_file: Path | None = None
    languages: tuple[str, ...] = _DEFAULT_LANGUAGES
    selected_voice: str | None = None
    ready_retries: int = DEFAULT_READY_RETRIES
    ready_interval_seconds: float = DEFAULT_READY_INTERVAL_SECONDS

    def validate(self) -> None:
        """Validate configuration values before resolution."""

        if not self.languages:
            raise ValueError("`languages` must list at least one language.")
        for language in self.languages:
            if not isinstance(language, str) or not language.strip():
                raise ValueError("`languages` must contain non-empty strings.")
        if self.ready_retries <= 0:
            raise ValueError("`ready_retries` must be a positive integer.")
        if self.ready_interval_seconds < 0:
            raise ValueError("`ready_interval_seconds` must not be negative.")
        if self.selected_voice is not None:
            voice_id_from_key(self.selected_voice)


class ConfigLoader:
    """Factory methods for creating `VoicematchConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "voices_file",
            "languages",
            "selected_voice",
            "ready_retries",
            "ready_interval_seconds",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> VoicematchConfig:
        """Create a validated config from a YAML file.

        A relative `voices_file` is resolved against the config file directory.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        config = ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")
        if config.voices_file is not None and not config.voices_file.is_absolute():
            config.voices_file = path.parent / config.voices_file
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> VoicematchConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        voices_file = ConfigLoader._optional_env_string(env_map, "VOICEMATCH_VOICES_FILE")
        raw_languages = ConfigLoader._optional_env_string(env_map, "VOICEMATCH_LANGUAGES")
        languages = parse_language_list(raw_languages) if raw_languages else ()
        selected_voice = ConfigLoader._optional_env_string(env_map, "VOICEMATCH_SELECTED_VOICE")
        ready_retries = ConfigLoader._optional_env_positive_int(
            env_map, "VOICEMATCH_READY_RETRIES"
        )
        ready_interval = ConfigLoader._optional_env_non_negative_float(
            env_map, "VOICEMATCH_READY_INTERVAL_SECONDS"
        )

        config = VoicematchConfig(
            voices_file=Path(voices_file) if voices_file is not None else None,
            languages=languages or _DEFAULT_LANGUAGES,
            selected_voice=selected_voice,
            ready_retries=ready_retries or DEFAULT_READY_RETRIES,
            ready_interval_seconds=(
                ready_interval if ready_interval is not None else DEFAULT_READY_INTERVAL_SECONDS
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> VoicematchConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        voices_file = ConfigLoader._optional_non_empty_string(payload, "voices_file")
        languages = ConfigLoader._optional_languages(payload, "languages", source_label)
        selected_voice = ConfigLoader._optional_non_empty_string(payload, "selected_voice")
        ready_retries = ConfigLoader._optional_positive_int(
            payload,
            "ready_retries",
            source_label,
            default=DEFAULT_READY_RETRIES,
        )
        ready_interval = ConfigLoader._optional_non_negative_float(
            payload,
            "ready_interval_seconds",
            source_label,
            default=DEFAULT_READY_INTERVAL_SECONDS,
        )

        config = VoicematchConfig(
            voices_file=Path(voices_file) if voices_file is not None else None,
            languages=languages or _DEFAULT_LANGUAGES,
            selected_voice=selected_voice,
            ready_retries=ready_retries,
            ready_interval_seconds=ready_interval,
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject unsupported YAML keys."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_languages(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...]:
        """Read requested languages from a YAML list or comma-separated string."""

        if key not in payload:
            return ()
        try:
            return parse_language_list(payload[key])
        except ValueError as exc:
            raise ValueError(f"{source_label} field `{key}`: {exc}") from exc

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_non_negative_float(
        payload: Mapping[str, Any], key: str, source_label: str, default: float
    ) -> float:
        """Read and validate a non-negative number payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a non-negative number.")
        normalized = normalize_optional_string(raw_value)
        if normalized is None:
            return default
        try:
            parsed = float(normalized)
        except ValueError as exc:
            raise ValueError(
                f"{source_label} field `{key}` must be a non-negative number."
            ) from exc
        if parsed < 0:
            raise ValueError(f"{source_label} field `{key}` must be a non-negative number.")
        return parsed

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc
        if parsed <= 0:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_env_non_negative_float(env: Mapping[str, str], key: str) -> float | None:
        """Read an optional non-negative number from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = float(raw_value)
        except ValueError as exc:
            raise ValueError(
                f"Environment variable `{key}` must be a non-negative number."
            ) from exc
        if parsed < 0:
            raise ValueError(f"Environment variable `{key}` must be a non-negative number.")
        return parsed
