"""
Tests for CLI functionality.

Tests the report commands, tool checks and settings handling. The style
program is replaced by the fixtures in conftest.py.
"""

import subprocess
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from src.cli.main import cli
from src.report.reference import REFERENCE_TEXT


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    """Run every command from an empty directory with a clean environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STYLE_REPORT_CONFIG", raising=False)
    monkeypatch.delenv("STYLE_REPORT_COMMAND", raising=False)
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()


class TestFileCommand:
    """Test whole-document reports."""

    def test_saved_file(self, runner, fake_style, saved_document, style_output, workspace):
        result = runner.invoke(cli, ["file", str(saved_document.path)])

        assert result.exit_code == 0
        assert f"Readability statistics for {saved_document.path}" in result.output
        assert style_output in result.output
        assert "💾 Report saved to:" in result.output
        assert "📁 Logs saved to:" in result.output

        reports = list((workspace / "output").glob("report_*/report.txt"))
        assert len(reports) == 1
        assert reports[0].read_text(encoding="utf-8").endswith(REFERENCE_TEXT)

    def test_session_logs_written(self, runner, fake_style, saved_document, workspace):
        runner.invoke(cli, ["file", str(saved_document.path), "--no-save"])

        latest = workspace / "logs" / "latest"
        assert (latest / "session_info.json").exists()
        assert "[TOOL_START] style" in (latest / "tools" / "style.log").read_text()

    def test_buffer_with_unsaved_changes(self, runner, fake_style, saved_document):
        result = runner.invoke(
            cli,
            ["file", str(saved_document.path), "--buffer", "-", "--no-save"],
            input="Hello world. This text was edited.",
        )

        assert result.exit_code == 0
        assert f"Warning: {saved_document.path} has unsaved changes" in result.output
        assert "Readability statistics for" not in result.output

    def test_buffer_matching_saved_file(self, runner, fake_style, saved_document, sample_text):
        result = runner.invoke(
            cli,
            ["file", str(saved_document.path), "--buffer", "-", "--no-save"],
            input=sample_text,
        )

        assert "Readability statistics for" in result.output
        assert "unsaved changes" not in result.output

    def test_empty_buffer_over_saved_file(self, runner, fake_style, saved_document, style_output):
        result = runner.invoke(
            cli,
            ["file", str(saved_document.path), "--buffer", "-", "--no-save"],
            input="",
        )

        assert result.exit_code == 0
        assert f"Warning: {saved_document.path} has unsaved changes" in result.output
        assert style_output in result.output

    def test_declared_modified(self, runner, fake_style, saved_document):
        result = runner.invoke(cli, ["file", str(saved_document.path), "--modified", "--no-save"])

        assert "Warning:" in result.output

    def test_file_never_saved(self, runner, fake_style, workspace):
        result = runner.invoke(cli, ["file", str(workspace / "draft.txt")])

        assert result.exit_code == 1
        assert "Document file not found" in result.output
        assert fake_style.analysis_calls == []

    def test_tool_flags(self, runner, fake_style, saved_document):
        runner.invoke(
            cli, ["file", str(saved_document.path), "-L", "de", "-l", "20", "--no-save"]
        )

        assert fake_style.analysis_calls[0]["args"].startswith("style -L en -L de -l 20 ")

    def test_output_file_and_format(self, runner, fake_style, saved_document, workspace):
        output = workspace / "out" / "essay.html"

        result = runner.invoke(
            cli, ["file", str(saved_document.path), "--format", "html", "-o", str(output)]
        )

        assert result.exit_code == 0
        page = output.read_text(encoding="utf-8")
        assert 'id="kincaid"' in page
        assert "<strong>Mode:</strong> file" in page

    def test_plain_markdown(self, runner, fake_style, saved_document):
        result = runner.invoke(
            cli, ["file", str(saved_document.path), "--format", "markdown", "--plain", "--no-save"]
        )

        assert result.output.count("```") >= 2
        assert "See also" not in result.output

    def test_timeout(self, runner, saved_document, workspace):
        (workspace / "style-report.yaml").write_text("timeout: 5\n")

        def run(args, **kwargs):
            if isinstance(args, list):
                return subprocess.CompletedProcess(args, 0, stdout="")
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])

        with patch("src.tools.locator.shutil.which", return_value="/usr/bin/style"), patch(
            "subprocess.run", side_effect=run
        ):
            result = runner.invoke(cli, ["file", str(saved_document.path)])

        assert result.exit_code == 1
        assert "did not finish within 5 seconds" in result.output


class TestRegionCommand:
    """Test in-memory reports."""

    def test_selection_from_file(self, runner, fake_style, saved_document):
        result = runner.invoke(
            cli,
            ["region", str(saved_document.path), "--start", "13", "--end", "35", "--no-save"],
        )

        assert result.exit_code == 0
        assert "Readability statistics for the selected region" in result.output
        assert fake_style.analysis_calls[0]["input"] == "This is a simple test."

    def test_whole_text_from_stdin(self, runner, fake_style, sample_text):
        result = runner.invoke(cli, ["region", "--no-save"], input=sample_text)

        assert result.exit_code == 0
        assert "Readability statistics for the whole document" in result.output
        assert fake_style.analysis_calls[0]["input"] == sample_text

    def test_start_without_end(self, runner, fake_style, saved_document):
        result = runner.invoke(cli, ["region", str(saved_document.path), "--start", "3"])

        assert result.exit_code == 2
        assert "--start and --end must be given together" in result.output

    def test_empty_stdin(self, runner, fake_style):
        result = runner.invoke(cli, ["region", "--no-save"], input="")

        assert result.exit_code == 1
        assert "Nothing to analyze" in result.output

    def test_selection_past_end(self, runner, fake_style, saved_document):
        result = runner.invoke(
            cli, ["region", str(saved_document.path), "--start", "0", "--end", "500"]
        )

        assert result.exit_code == 1
        assert "outside the document" in result.output


class TestToolUnavailable:
    """Test behavior without a working style program."""

    def test_report_not_produced(self, runner, missing_style, saved_document, workspace):
        result = runner.invoke(cli, ["file", str(saved_document.path)])

        assert result.exit_code == 1
        assert "'style' was not found on PATH" in result.output
        assert "diction" in result.output
        assert "Reference" not in result.output
        assert not (workspace / "output").exists()

    def test_check_missing(self, runner, missing_style):
        result = runner.invoke(cli, ["check"])

        assert result.exit_code == 1
        assert "was not found" in result.output

    def test_check_self_test_failure(self, runner, broken_style):
        result = runner.invoke(cli, ["check"])

        assert result.exit_code == 1
        assert "failed its self-test" in result.output

    def test_check_available(self, runner, fake_style):
        result = runner.invoke(cli, ["check"])

        assert result.exit_code == 0
        assert "✅ 'style' is available" in result.output


class TestSettingsCommands:
    """Test commands that report on settings."""

    def test_reference(self, runner):
        result = runner.invoke(cli, ["reference"])

        assert result.exit_code == 0
        assert result.output == REFERENCE_TEXT

    def test_custom_reference(self, runner, workspace):
        (workspace / "notes.txt").write_text("House style\n")
        (workspace / "style-report.yaml").write_text("reference_file: notes.txt\n")

        result = runner.invoke(cli, ["reference"])

        assert result.output == "House style\n"

    def test_status(self, runner, fake_style):
        result = runner.invoke(cli, ["status"])

        assert result.exit_code == 0
        assert "Command: style -L en" in result.output
        assert "Analysis tool 'style' is available" in result.output

    def test_status_env_command(self, runner, missing_style, monkeypatch):
        monkeypatch.setenv("STYLE_REPORT_COMMAND", "diction-style -L en")

        result = runner.invoke(cli, ["status"])

        assert "STYLE_REPORT_COMMAND: diction-style -L en" in result.output
        assert "'diction-style': missing" in result.output

    def test_invalid_config(self, runner, workspace):
        config_file = workspace / "broken.yaml"
        config_file.write_text("timeout: -1\n")

        result = runner.invoke(cli, ["--config", str(config_file), "check"])

        assert result.exit_code == 1
        assert "Error loading settings" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert "0.1.0" in result.output
