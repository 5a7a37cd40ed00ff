from __future__ import annotations

from dataclasses import dataclass, field

from easel.geom import Rect, Vec2

from .direction import Direction

FRAME_WIDTH = 26
FRAME_HEIGHT = 36
SHEET_COLUMNS = 3
SHEET_ROWS = 4

_SHEET_ROW_BY_FACING: dict[Direction, int] = {
    Direction.DOWN: 0,
    Direction.LEFT: 1,
    Direction.RIGHT: 2,
    Direction.UP: 3,
}


def spritesheet_row(facing: Direction) -> int:
    return _SHEET_ROW_BY_FACING[facing]


@dataclass(frozen=True, slots=True)
class SpriteSheet:
    """Walk-cycle layout: one row per facing, one column per animation frame."""

    origin: Vec2 = field(default_factory=Vec2)
    frame_width: float = float(FRAME_WIDTH)
    frame_height: float = float(FRAME_HEIGHT)

    @property
    def frame_size(self) -> Vec2:
        return Vec2(self.frame_width, self.frame_height)

    @property
    def sheet_size(self) -> Vec2:
        return Vec2(self.frame_width * SHEET_COLUMNS, self.frame_height * SHEET_ROWS)

    def frame_src(self, facing: Direction, frame: int) -> Rect:
        return Rect(
            x=self.origin.x + self.frame_width * int(frame),
            y=self.origin.y + self.frame_height * spritesheet_row(facing),
            w=self.frame_width,
            h=self.frame_height,
        )

    def frame_dst(self, screen_center: Vec2, position: Vec2) -> Rect:
        return Rect.from_center(screen_center + position, self.frame_width, self.frame_height)
