from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from bardo.cli import app
from bardo.config import GameConfig


def _write_script(path: Path) -> Path:
    path.write_text(json.dumps([{"tick": 0, "direction": "down", "pressed": True}]), encoding="utf-8")
    return path


def test_simulate_prints_one_line_per_tick(tmp_path: Path) -> None:
    script = _write_script(tmp_path / "script.json")

    result = CliRunner().invoke(app, ["simulate", str(script), "--ticks", "3"])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 3
    assert "facing=down" in lines[0]
    assert "frame=0" in lines[2]


def test_simulate_json_output(tmp_path: Path) -> None:
    script = _write_script(tmp_path / "script.json")

    result = CliRunner().invoke(app, ["simulate", str(script), "--ticks", "2", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [entry["position"] for entry in payload] == [{"x": 0.0, "y": 1.0}, {"x": 0.0, "y": 3.0}]


def test_simulate_reports_bad_scripts(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text('[{"tick": "soon"}]', encoding="utf-8")

    missing = CliRunner().invoke(app, ["simulate", str(tmp_path / "nope.json")])
    invalid = CliRunner().invoke(app, ["simulate", str(bad)])

    assert missing.exit_code == 1
    assert invalid.exit_code == 1


def test_sheet_writes_png(tmp_path: Path) -> None:
    out = tmp_path / "sheet.png"

    result = CliRunner().invoke(app, ["sheet", str(out)])

    assert result.exit_code == 0, result.output
    assert out.is_file()


def test_config_prints_defaults_and_writes(tmp_path: Path) -> None:
    path = tmp_path / "bardo.json"

    result = CliRunner().invoke(app, ["config", str(path), "--write"])

    assert result.exit_code == 0, result.output
    assert "tick_rate: 20" in result.output
    assert path.is_file()


def test_config_rejects_invalid_file(tmp_path: Path) -> None:
    path = tmp_path / "bardo.json"
    path.write_text('{"fps": 0}', encoding="utf-8")

    result = CliRunner().invoke(app, ["config", str(path)])

    assert result.exit_code == 1


def test_run_applies_cli_overrides(monkeypatch, tmp_path: Path) -> None:
    captured: dict[str, Any] = {}

    def _fake_run_game(config: GameConfig, *, base_dir: Path | None = None) -> int:
        captured["config"] = config
        captured["base_dir"] = base_dir
        return 0

    monkeypatch.setattr("bardo.raylib_app.run_game", _fake_run_game)
    config_path = tmp_path / "bardo.json"
    config_path.write_text(json.dumps({"title": "walk"}), encoding="utf-8")

    result = CliRunner().invoke(
        app,
        ["run", "--config", str(config_path), "--width", "640", "--tick-rate", "30", "--base-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    config = captured["config"]
    assert (config.width, config.height) == (640, 600)
    assert config.tick_rate == 30
    assert config.title == "walk"
    assert captured["base_dir"] == tmp_path


def test_run_reports_missing_sprite(monkeypatch, tmp_path: Path) -> None:
    def _fake_run_game(config: GameConfig, *, base_dir: Path | None = None) -> int:
        raise FileNotFoundError(f"Missing assets: {config.sprite_path}")

    monkeypatch.setattr("bardo.raylib_app.run_game", _fake_run_game)

    result = CliRunner().invoke(app, ["run", "--config", str(tmp_path / "bardo.json"), "--base-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "Missing assets" in result.output
