from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .direction import Direction, direction_from_name
from .player import Player


@dataclass(frozen=True, slots=True)
class KeyBindings:
    """Key names per action. Names match raylib `KEY_<NAME>` constants."""

    up: str = "W"
    down: str = "S"
    left: str = "A"
    right: str = "D"
    quit: str = "ESCAPE"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> KeyBindings:
        values: dict[str, str] = {}
        for action, key in mapping.items():
            name = str(action).strip().lower()
            if name != "quit" and direction_from_name(name) is None:
                raise ValueError(f"unknown key binding action: {action!r}")
            key_name = str(key).strip().upper()
            if not key_name:
                raise ValueError(f"empty key name for action {action!r}")
            values[name] = key_name
        return cls(**values)

    def key_for(self, direction: Direction) -> str:
        return str(getattr(self, direction.value))

    def direction_keys(self) -> tuple[tuple[Direction, str], ...]:
        return tuple((direction, self.key_for(direction)) for direction in Direction)


@dataclass(frozen=True, slots=True)
class KeyEvent:
    direction: Direction
    pressed: bool
    repeat: bool = False


def dispatch_key_event(player: Player, event: KeyEvent) -> bool:
    """Apply a key transition to the player; auto-repeat events are dropped."""
    if event.repeat:
        return False
    if event.pressed:
        player.set_accelerating(event.direction)
    else:
        player.stop_accelerating(event.direction)
    return True


def dispatch_key_events(player: Player, events: Iterable[KeyEvent]) -> int:
    applied = 0
    for event in events:
        if dispatch_key_event(player, event):
            applied += 1
    return applied
