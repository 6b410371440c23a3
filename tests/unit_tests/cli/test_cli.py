"""Unit tests for CLI command behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rlcp.application.decisions import Disposition
from rlcp.application.results import CandidateOutcome, RewriteReport, RunSummary
from rlcp.cli import cli as cli_module
from rlcp.errors import ConfigError

runner = CliRunner()


def _write_config(root: Path, **fields: object) -> None:
    payload: dict[str, object] = {"input": "public", "output": "backup"}
    payload.update(fields)
    (root / "rlcp.config.json").write_text(json.dumps(payload), encoding="utf-8")


def _fake_api(monkeypatch: pytest.MonkeyPatch, summary: RunSummary | None = None) -> dict[str, object]:
    called: dict[str, object] = {}

    def fake_convert(root: Path, **kwargs: object) -> RunSummary:
        called["root"] = root
        called.update(kwargs)
        return summary or RunSummary(outcomes=[], rules=[])

    import rlcp.api as api_module

    monkeypatch.setattr(api_module, "convert_assets", fake_convert)
    return called


def test_help_shows_commands() -> None:
    """Ensure top-level help lists the subcommands."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "run" in result.output
    assert "status" in result.output
    assert "doctor" in result.output


def test_run_without_config_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Exit non-zero with a setup error when no config exists."""
    monkeypatch.chdir(tmp_path)
    called = _fake_api(monkeypatch)

    result = runner.invoke(cli_module.app, ["run", "--no-input"])

    assert result.exit_code == 1
    assert "ConfigError" in result.output
    assert called == {}


def test_run_resolves_flags_config_and_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Prefer flags over config values and fall back to defaults."""
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path, preferred_type="jpg", file_size="small")
    summary = RunSummary(
        outcomes=[
            CandidateOutcome("public/a.png", Disposition.CONVERT_NOW, target="public/a.jpg"),
            CandidateOutcome("public/b.png", Disposition.SKIP_ALREADY_CONVERTED, target="public/b.jpg"),
        ],
        rules=[],
        rewrite=RewriteReport(updated_files=[tmp_path / "index.html"]),
    )
    called = _fake_api(monkeypatch, summary)

    result = runner.invoke(cli_module.app, ["run", "--quality", "smallest", "--no-input"])

    assert result.exit_code == 0, result.output
    assert Path(str(called["root"])).resolve() == tmp_path.resolve()
    assert called["target_format"] == "jpg"
    assert called["quality_tier"] == "smallest"
    assert called["working_directory"] == "./"
    assert "Successfully processed 1 images. Skipped: 1. Failed: 0." in result.output
    assert "Updated references in 1 files." in result.output


def test_run_prompts_for_missing_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Prompt for settings neither flags nor config provide."""
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path)
    called = _fake_api(monkeypatch)

    result = runner.invoke(cli_module.app, ["run"], input="jpeg\nsmallest\nsrc\n")

    assert result.exit_code == 0, result.output
    assert called["target_format"] == "jpeg"
    assert called["quality_tier"] == "smallest"
    assert called["working_directory"] == "src"


def test_run_cancelled_prompt(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop without converting when the prompt is aborted."""
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path)
    called = _fake_api(monkeypatch)

    result = runner.invoke(cli_module.app, ["run"])

    assert result.exit_code == 0
    assert "Operation cancelled." in result.output
    assert called == {}


@pytest.mark.parametrize(
    ("flag", "value"),
    [("--format", "gif"), ("--quality", "tiny")],
)
def test_run_rejects_values_outside_choices(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, flag: str, value: str
) -> None:
    """Reject unsupported format and quality values while parsing options."""
    monkeypatch.chdir(tmp_path)
    called = _fake_api(monkeypatch)

    result = runner.invoke(cli_module.app, ["run", flag, value, "--no-input"])

    assert result.exit_code == 2
    assert value in result.output
    assert "ConfigError" not in result.output
    assert called == {}


def test_run_reports_setup_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Exit non-zero when the API reports a setup error."""
    monkeypatch.chdir(tmp_path)
    _write_config(tmp_path)

    def fake_convert(root: Path, **_: object) -> RunSummary:
        raise ConfigError('Input directory "public" does not exist.')

    import rlcp.api as api_module

    monkeypatch.setattr(api_module, "convert_assets", fake_convert)

    result = runner.invoke(cli_module.app, ["run", "--no-input"])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_status_lists_entries(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Show each lock entry and flag missing targets."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "a.webp").write_bytes(b"x")
    (tmp_path / "rlcp.lock").write_text(
        json.dumps(
            {"conversions": {"public/a.png": "public/a.webp", "public/b.png": "public/b.webp"}}
        ),
        encoding="utf-8",
    )

    result = runner.invoke(cli_module.app, ["status"])

    assert result.exit_code == 0
    assert "✓ public/a.png -> public/a.webp" in result.output
    assert "✗ public/b.png -> public/b.webp (missing)" in result.output
    assert "2 conversions recorded, 1 missing." in result.output


def test_status_without_lock(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Report an empty lock."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(cli_module.app, ["status"])
    assert result.exit_code == 0
    assert "No conversions recorded." in result.output


def test_doctor_prints_versions() -> None:
    """Print interpreter and library information."""
    result = runner.invoke(cli_module.app, ["doctor"])
    assert result.exit_code == 0
    assert "Python:" in result.output
    assert "formats:" in result.output
