"""Integration tests for the `check` and `select` CLI commands."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from voicematch.cli import app


def test_check_command_accepts_listed_voice(sample_voice_listing: Path) -> None:
    """Check should exit 0 for a voice grouped under the language."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["check", "en-GB/Amy", str(sample_voice_listing), "--language", "en-IE"]
    )

    assert result.exit_code == 0, result.output
    assert "Acceptable: yes" in result.output


def test_check_command_rejects_voice_excluded_by_exact_match(
    sample_voice_listing: Path,
) -> None:
    """Check should exit 1 when an exact match excludes the fallback voice."""

    runner = CliRunner()

    result = runner.invoke(app, ["check", "en/Bob", str(sample_voice_listing), "-l", "en-US"])

    assert result.exit_code == 1
    assert "Acceptable: no" in result.output


def test_select_command_honours_persisted_voice(sample_voice_listing: Path) -> None:
    """Select should keep an acceptable persisted voice."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["select", str(sample_voice_listing), "-l", "en-US", "--voice", "en-US/Zoe"],
    )

    assert result.exit_code == 0, result.output
    assert "Selected voice: en-US/Zoe" in result.output


def test_select_command_falls_back_and_reports_none(sample_voice_listing: Path) -> None:
    """Select should fall back to the first voice, or report none for unmatched languages."""

    runner = CliRunner()

    fallback = runner.invoke(
        app,
        ["select", str(sample_voice_listing), "-l", "de-CH", "--voice", "en-US/Zoe"],
    )
    missing = runner.invoke(app, ["select", str(sample_voice_listing), "-l", "ja-JP"])

    assert fallback.exit_code == 0, fallback.output
    assert "Selected voice: de-DE/Anna" in fallback.output
    assert missing.exit_code == 0, missing.output
    assert "Selected voice: (none)" in missing.output
