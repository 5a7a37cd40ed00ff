from __future__ import annotations

from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def direction_from_name(value: str) -> Direction | None:
    try:
        return Direction(str(value).strip().lower())
    except ValueError:
        return None
