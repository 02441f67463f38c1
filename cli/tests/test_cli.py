from __future__ import annotations

import json

from typer.testing import CliRunner

from signalfx_cli import main


def _args(tmp_path, *extra: str) -> list[str]:
    return [
        *extra,
        "--system-config",
        str(tmp_path / "etc.conf"),
        "--home-config",
        str(tmp_path / "home.conf"),
    ]


def test_config_show_masks_token_and_reports_sources(tmp_path) -> None:
    (tmp_path / "etc.conf").write_text(json.dumps({"api_url": "https://x"}), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(main.app, ["config", "show", *_args(tmp_path, "--auth-token", "abc")])

    assert result.exit_code == 0, result.output
    assert "auth_token=(set)" in result.output
    assert "abc" not in result.output
    assert "api_url=https://x" in result.output
    assert "from system" in result.output


def test_config_show_json(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SFX_AUTH_TOKEN", "env-token")
    runner = CliRunner()

    result = runner.invoke(main.app, ["config", "show", "--json", *_args(tmp_path)])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["config"]["auth_token"] == "(set)"
    assert data["sources"]["auth_token"] == "options"
    assert data["sources"]["api_url"] == "default"


def test_config_show_missing_token(tmp_path) -> None:
    runner = CliRunner()

    result = runner.invoke(main.app, ["config", "show", *_args(tmp_path)])

    assert result.exit_code == 2
    assert "auth_token: required field is not set" in result.output


def test_config_sources_lists_paths(tmp_path) -> None:
    (tmp_path / "home.conf").write_text("{}", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(main.app, ["config", "sources", *_args(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "system:" in result.output
    assert "home:" in result.output
    assert "(present)" in result.output
    assert "netrc:" in result.output


def test_check_builds_client(tmp_path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        main.app,
        ["check", *_args(tmp_path, "--auth-token", "abc", "--timeout-seconds", "30")],
    )

    assert result.exit_code == 0, result.output
    assert "Client ready" in result.output
    assert "signalfx-client/" in result.output


def test_check_reports_bad_timeout(tmp_path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        main.app,
        ["check", *_args(tmp_path, "--auth-token", "abc", "--timeout-seconds", "0")],
    )

    assert result.exit_code == 2
    assert "timeout_seconds" in result.output
