from __future__ import annotations

from pathlib import Path

import msgspec

from .input import KeyBindings
from .sim import DEFAULT_TICK_RATE
from .sprite import FRAME_HEIGHT, FRAME_WIDTH

CONFIG_NAME = "bardo.json"
DEFAULT_SPRITE_PATH = Path("assets") / "bardo.png"


class ConfigError(Exception):
    pass


class GameConfig(msgspec.Struct, forbid_unknown_fields=True):
    width: int = 800
    height: int = 600
    title: str = "game tutorial"
    fps: int = 60
    tick_rate: int = DEFAULT_TICK_RATE
    sprite_path: str = str(DEFAULT_SPRITE_PATH)
    frame_width: int = FRAME_WIDTH
    frame_height: int = FRAME_HEIGHT
    keybinds: dict[str, str] = msgspec.field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("width", "height", "fps", "tick_rate", "frame_width", "frame_height"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def key_bindings(self) -> KeyBindings:
        return KeyBindings.from_mapping(self.keybinds)


def load_config(path: Path) -> GameConfig:
    """Read `path`, falling back to defaults when the file does not exist."""
    if not path.is_file():
        return GameConfig()
    try:
        config = msgspec.json.decode(path.read_bytes(), type=GameConfig)
        config.key_bindings()
    except (msgspec.DecodeError, ValueError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    return config


def save_config(config: GameConfig, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(msgspec.json.format(msgspec.json.encode(config), indent=2) + b"\n")


def format_config(config: GameConfig) -> str:
    bindings = config.key_bindings()
    lines = [
        f"window: {config.width}x{config.height} {config.title!r}",
        f"fps: {config.fps}",
        f"tick_rate: {config.tick_rate}",
        f"sprite: {config.sprite_path} ({config.frame_width}x{config.frame_height})",
        "keybinds:",
    ]
    for direction, key in bindings.direction_keys():
        lines.append(f"  {direction.value}: {key}")
    lines.append(f"  quit: {bindings.quit}")
    return "\n".join(lines)
