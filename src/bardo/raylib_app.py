from __future__ import annotations

from pathlib import Path

import pyray as rl

from easel.color import RGBA
from easel.geom import Rect, Vec2

from .assets import resolve_sprite_path
from .config import GameConfig
from .debug_log import debug_log
from .game import GameSession
from .input import KeyBindings, KeyEvent
from .player import Player
from .render import Renderer
from .sim import FixedStepClock
from .sprite import SpriteSheet


class RaylibTarget:
    """Render target for the current raylib window. Call inside `begin_drawing`."""

    def size(self) -> tuple[int, int]:
        return int(rl.get_screen_width()), int(rl.get_screen_height())

    def clear(self, color: RGBA) -> None:
        rl.clear_background(color.to_rl())

    def blit(self, texture: object, src: Rect, dst: Rect) -> None:
        rl.draw_texture_pro(texture, src.to_rl(), dst.to_rl(), Vec2().to_rl(), 0.0, rl.WHITE)

    def present(self) -> None:
        rl.end_drawing()


def key_code(name: str) -> int:
    code = getattr(rl.KeyboardKey, f"KEY_{str(name).strip().upper()}", None)
    if code is None:
        raise ValueError(f"unknown raylib key name: {name!r}")
    return int(code)


def poll_key_events(bindings: KeyBindings) -> list[KeyEvent]:
    """Key transitions since the last frame. raylib reports edges only, so nothing here repeats."""
    events: list[KeyEvent] = []
    for direction, key in bindings.direction_keys():
        code = key_code(key)
        if rl.is_key_pressed(code):
            events.append(KeyEvent(direction=direction, pressed=True))
        if rl.is_key_released(code):
            events.append(KeyEvent(direction=direction, pressed=False))
    return events


def _sprite_sheet(config: GameConfig) -> SpriteSheet:
    return SpriteSheet(frame_width=float(config.frame_width), frame_height=float(config.frame_height))


def run_game(config: GameConfig, *, base_dir: Path | None = None) -> int:
    """Open the window and run until quit. Returns the number of simulated ticks."""
    bindings = config.key_bindings()
    quit_code = key_code(bindings.quit)
    for _direction, key in bindings.direction_keys():
        key_code(key)

    sprite_path = resolve_sprite_path(Path(config.sprite_path), base_dir=base_dir)
    if sprite_path is None:
        raise FileNotFoundError(f"Missing assets: {config.sprite_path}")

    rl.init_window(config.width, config.height, config.title)
    try:
        rl.set_target_fps(config.fps)
        rl.set_exit_key(quit_code)
        texture = rl.load_texture(str(sprite_path))
        if int(texture.id) == 0:
            raise RuntimeError(f"failed to load texture: {sprite_path}")
        debug_log("texture_loaded", path=sprite_path, width=texture.width, height=texture.height)
        try:
            session = GameSession(
                player=Player(sprite=_sprite_sheet(config), texture=texture),
                clock=FixedStepClock(tick_rate=config.tick_rate),
            )
            renderer = Renderer()
            target = RaylibTarget()
            while not rl.window_should_close():
                events = poll_key_events(bindings)
                for event in events:
                    debug_log("key", direction=event.direction, pressed=event.pressed)
                session.handle_events(events)
                session.advance(rl.get_frame_time())

                rl.begin_drawing()
                renderer.render(target, session.renderables())
            debug_log("quit", ticks=session.ticks, position=session.player.position, facing=session.player.facing)
            return session.ticks
        finally:
            rl.unload_texture(texture)
    finally:
        rl.close_window()
