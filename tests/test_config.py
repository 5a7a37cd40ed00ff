from __future__ import annotations

import json
from pathlib import Path

import pytest

from bardo.config import CONFIG_NAME, ConfigError, GameConfig, format_config, load_config, save_config
from bardo.direction import Direction


def test_missing_config_file_yields_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / CONFIG_NAME)

    assert config == GameConfig()
    assert (config.width, config.height) == (800, 600)
    assert config.tick_rate == 20
    assert (config.frame_width, config.frame_height) == (26, 36)


def test_config_partial_file_overrides_fields(tmp_path: Path) -> None:
    path = tmp_path / CONFIG_NAME
    path.write_text(json.dumps({"width": 1024, "keybinds": {"up": "UP"}}), encoding="utf-8")

    config = load_config(path)

    assert config.width == 1024
    assert config.height == 600
    assert config.key_bindings().key_for(Direction.UP) == "UP"


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        json.dumps({"width": "wide"}),
        json.dumps({"colour": "red"}),
        json.dumps({"tick_rate": 0}),
        json.dumps({"keybinds": {"jump": "SPACE"}}),
    ],
)
def test_invalid_config_raises_config_error(tmp_path: Path, payload: str) -> None:
    path = tmp_path / CONFIG_NAME
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_game_config_validates_on_construction() -> None:
    with pytest.raises(ValueError, match="height"):
        GameConfig(height=-1)


def test_save_then_load_config(tmp_path: Path) -> None:
    path = tmp_path / "nested" / CONFIG_NAME
    config = GameConfig(title="walk", fps=30, keybinds={"right": "L"})

    save_config(config, path)

    assert load_config(path) == config


def test_format_config_lists_bindings() -> None:
    text = format_config(GameConfig(keybinds={"down": "K"}))

    assert "window: 800x600 'game tutorial'" in text
    assert "  down: K" in text
    assert "  quit: ESCAPE" in text
