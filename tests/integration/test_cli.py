from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from bbgen.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_project(monkeypatch, tmp_path: Path):
    """Point bbgen at an empty project so a local bbgen.yaml never leaks in."""
    monkeypatch.delenv("BBGEN_PLATFORM", raising=False)
    monkeypatch.delenv("BBGEN_LOG_LEVEL", raising=False)
    monkeypatch.setenv("BBGEN_PROJECT_ROOT", str(tmp_path))
    return tmp_path


def test_cli_has_apply_command():
    result = runner.invoke(app, ["apply", "--help"])
    assert result.exit_code == 0
    assert "Render one formatting operation" in result.output


def test_platforms_json():
    result = runner.invoke(app, ["platforms", "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [p["name"] for p in payload][:2] == ["phpBB", "vBulletin"]
    assert payload[-1] == {
        "name": "Slack",
        "id": "slack",
        "category": "chat",
        "format": "slack_markdown",
        "description": "Workplace messaging",
    }


def test_platforms_table():
    result = runner.invoke(app, ["platforms"])
    assert result.exit_code == 0
    assert "XenForo" in result.output


def test_operations_lists_extras():
    result = runner.invoke(app, ["operations", "-p", "xenforo", "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["platform"] == "xenforo"
    assert "bold" in payload["operations"]
    assert "inline-spoiler" in payload["operations"]

    result = runner.invoke(app, ["operations", "-p", "slack"])
    assert "*Slack operations*" in result.output
    assert "  • mention-here" in result.output


def test_apply_uses_default_platform():
    result = runner.invoke(app, ["apply", "bold", "Hello"])
    assert result.exit_code == 0
    assert result.output == "[b]Hello[/b]\n"


def test_apply_with_options():
    result = runner.invoke(app, ["apply", "quote", "Nice post", "-p", "discord", "-o", "author=Ann"])
    assert result.exit_code == 0
    assert result.output == "**Ann:**\n> Nice post\n"


def test_apply_reads_stdin():
    result = runner.invoke(app, ["apply", "list", "-p", "slack", "-o", "type=numbered"], input="one\ntwo\n")
    assert result.exit_code == 0
    assert result.output == "1. one\n2. two\n"


def test_apply_list_type_option_beats_configured_default(_isolated_project: Path):
    (_isolated_project / "bbgen.yaml").write_text(
        yaml.safe_dump({"defaults": {"list_type": "bullet"}}), encoding="utf-8"
    )

    result = runner.invoke(
        app, ["apply", "list", "-p", "discord", "-o", "list_type=numbered"], input="a\nb\n"
    )
    assert result.exit_code == 0
    assert result.output == "1. a\n2. b\n"

    result = runner.invoke(app, ["apply", "list", "-p", "discord"], input="a\nb\n")
    assert result.output == "- a\n- b\n"


def test_apply_json():
    result = runner.invoke(app, ["apply", "spoiler", "secret", "-p", "Discord", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "platform": "discord",
        "operation": "spoiler",
        "output": "||secret||",
    }


def test_apply_errors_exit_nonzero():
    result = runner.invoke(app, ["apply", "sparkle", "x"])
    assert result.exit_code == 1
    assert "Unknown operation 'sparkle'" in result.output

    result = runner.invoke(app, ["apply", "color", "x"])
    assert result.exit_code == 1
    assert "color" in result.output

    result = runner.invoke(app, ["apply", "bold", "x", "-o", "novalue"])
    assert result.exit_code == 1
    assert "key=value" in result.output


def test_apply_uses_configured_defaults(_isolated_project: Path):
    (_isolated_project / "bbgen.yaml").write_text(
        yaml.safe_dump({"defaults": {"platform": "Slack", "color": "red", "table_separator": ","}}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["apply", "bold", "hi"])
    assert result.output == "*hi*\n"

    result = runner.invoke(app, ["apply", "color", "hi", "-p", "phpbb"])
    assert result.output == "[color=red]hi[/color]\n"

    result = runner.invoke(app, ["apply", "table", "A,B", "-p", "phpbb", "-o", "header=no"])
    assert "[td]A[/td]\n[td]B[/td]" in result.output


def test_check_command():
    result = runner.invoke(app, ["check", "youtube", "https://youtu.be/dQw4w9WgXcQ"])
    assert result.exit_code == 0
    assert "id: dQw4w9WgXcQ" in result.output
    assert "✓ valid youtube" in result.output

    result = runner.invoke(app, ["check", "size", "9"])
    assert result.exit_code == 1

    result = runner.invoke(app, ["check", "zipcode", "12345"])
    assert result.exit_code == 2


def test_config_command(_isolated_project: Path):
    (_isolated_project / "bbgen.yaml").write_text(
        yaml.safe_dump({"defaults": {"platform": "ipb", "list_type": "lettered"}}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["config", "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["platform"] == "IPB/Invision"
    assert payload["list_type"] == "lettered"
    assert payload["config_path"].endswith("bbgen.yaml")

    result = runner.invoke(app, ["config"])
    assert "*bbgen Configuration*" in result.output
    assert "List type: lettered" in result.output


def test_bad_config_file_is_reported(_isolated_project: Path):
    (_isolated_project / "bbgen.yaml").write_text("defaults: [oops\n", encoding="utf-8")

    result = runner.invoke(app, ["platforms"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output
