"""End-to-end tests for the ssvv command using click's CliRunner."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from ssvv_cli.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SSVV_COLOR", raising=False)
    monkeypatch.delenv("SSVV_FORMAT", raising=False)


class TestTextOutput:
    """Tests for the default human-readable output."""

    @pytest.mark.integration
    def test_no_file_prints_usage(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "USAGE:" in result.output

    @pytest.mark.integration
    def test_valid_file_exits_zero(self, runner: CliRunner, valid_basic_yaml: Path) -> None:
        result = runner.invoke(cli, [str(valid_basic_yaml)])

        assert result.exit_code == 0
        assert "Name: m" in result.output
        assert "* Validation successful!" in result.output

    @pytest.mark.integration
    def test_invalid_file_exits_one(self, runner: CliRunner, fixtures_dir: Path) -> None:
        result = runner.invoke(cli, [str(fixtures_dir / "invalid_no_tables.yaml")])

        assert result.exit_code == 1
        assert "VALIDATION ERROR" in result.output
        assert "* Semantic model must have at least one table" in result.output

    @pytest.mark.integration
    def test_missing_file_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, [str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "Failed to read file:" in result.output

    @pytest.mark.integration
    def test_legacy_warning_then_summary(
        self, runner: CliRunner, valid_legacy_instructions_yaml: Path
    ) -> None:
        result = runner.invoke(cli, [str(valid_legacy_instructions_yaml)])

        assert result.exit_code == 0
        assert result.output.index("WARNINGS") < result.output.index("Validation successful!")

    @pytest.mark.integration
    def test_color_never_has_no_ansi(self, runner: CliRunner, valid_basic_yaml: Path) -> None:
        result = runner.invoke(cli, ["--color", "never", str(valid_basic_yaml)])

        assert "\x1b[" not in result.output

    @pytest.mark.integration
    def test_color_always_has_ansi(self, runner: CliRunner, valid_basic_yaml: Path) -> None:
        result = runner.invoke(cli, ["--color", "always", str(valid_basic_yaml)], color=True)

        assert "\x1b[" in result.output

    @pytest.mark.integration
    def test_bad_env_setting_is_usage_error(
        self, runner: CliRunner, valid_basic_yaml: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SSVV_COLOR", "rainbow")

        result = runner.invoke(cli, [str(valid_basic_yaml)])

        assert result.exit_code == 2
        assert "rainbow" in result.output


class TestVerbose:
    """Tests for --verbose logging."""

    @pytest.mark.integration
    def test_resolved_settings_are_logged(
        self,
        runner: CliRunner,
        valid_basic_yaml: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setenv("SSVV_FORMAT", "json")

        with caplog.at_level(logging.DEBUG, logger="ssvv_cli"):
            result = runner.invoke(cli, ["-v", "--color", "never", str(valid_basic_yaml)])

        assert result.exit_code == 0
        assert "Setting format=json (from env)" in caplog.text
        assert "Setting color=never (from cli)" in caplog.text


class TestJsonOutput:
    """Tests for --format json."""

    @pytest.mark.integration
    def test_success_envelope(self, runner: CliRunner, valid_basic_yaml: Path) -> None:
        result = runner.invoke(cli, ["--format", "json", str(valid_basic_yaml)])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["success"] is True
        assert payload["command"] == "validate"
        assert payload["data"]["model"]["name"] == "m"
        assert payload["data"]["coverage"]["described_pct"] == 100.0

    @pytest.mark.integration
    def test_parse_error_envelope(self, runner: CliRunner, invalid_yaml_syntax_yaml: Path) -> None:
        result = runner.invoke(cli, ["--format", "json", str(invalid_yaml_syntax_yaml)])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["success"] is False
        assert payload["errors"][0]["type"] == "ParseFailureError"
        assert payload["errors"][0]["is_parse_error"] is True

    @pytest.mark.integration
    def test_format_from_env(
        self, runner: CliRunner, valid_basic_yaml: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SSVV_FORMAT", "json")

        result = runner.invoke(cli, [str(valid_basic_yaml)])

        assert json.loads(result.output)["success"] is True
