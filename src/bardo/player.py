from __future__ import annotations

from dataclasses import dataclass, field

from easel.geom import Vec2

from .direction import Direction
from .render import RenderTarget
from .sprite import SpriteSheet

MAX_SPEED = 7.0
# Every row of the sheet has the same number of frames.
WALK_FRAME_COUNT = 3


def velocity_to_facing(velocity: Vec2) -> Direction | None:
    """Dominant axis of motion, or `None` to keep the current facing.

    Ties between the axes resolve to the vertical direction.
    """
    if velocity.near_zero():
        return None
    if abs(velocity.x) > abs(velocity.y):
        return Direction.RIGHT if velocity.x > 0.0 else Direction.LEFT
    return Direction.DOWN if velocity.y > 0.0 else Direction.UP


@dataclass(slots=True)
class Player:
    """The walking sprite: movement state plus what the renderer needs to draw it.

    `position` is an offset from the screen center. `acceleration` holds one
    value per axis in {-1, 0, 1}; opposing keys share the axis, so the last
    press wins and any release on that axis zeroes it.
    """

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)
    facing: Direction = Direction.DOWN
    current_frame: int = 0
    sprite: SpriteSheet = field(default_factory=SpriteSheet)
    texture: object | None = None

    def set_accelerating(self, direction: Direction) -> None:
        accel = self.acceleration
        if direction is Direction.UP:
            self.acceleration = Vec2(accel.x, -1.0)
        elif direction is Direction.DOWN:
            self.acceleration = Vec2(accel.x, 1.0)
        elif direction is Direction.LEFT:
            self.acceleration = Vec2(-1.0, accel.y)
        elif direction is Direction.RIGHT:
            self.acceleration = Vec2(1.0, accel.y)

    def stop_accelerating(self, direction: Direction) -> None:
        accel = self.acceleration
        if direction in (Direction.UP, Direction.DOWN):
            self.acceleration = Vec2(accel.x, 0.0)
        else:
            self.acceleration = Vec2(0.0, accel.y)

    def update(self) -> None:
        """Advance one simulation tick."""
        self.velocity = self.velocity + self.acceleration
        if self.velocity.length() > MAX_SPEED:
            self.velocity = self.velocity.normalized() * MAX_SPEED

        moving = not self.velocity.near_zero()
        if moving:
            self.position = self.position + self.velocity

        facing = velocity_to_facing(self.velocity)
        if facing is not None:
            self.facing = facing

        # Idle keeps the last frame instead of snapping back to 0.
        if moving:
            self.current_frame = (self.current_frame + 1) % WALK_FRAME_COUNT

    def draw(self, target: RenderTarget) -> None:
        if self.texture is None:
            return
        width, height = target.size()
        screen_center = Vec2(float(width // 2), float(height // 2))
        src = self.sprite.frame_src(self.facing, self.current_frame)
        dst = self.sprite.frame_dst(screen_center, self.position)
        target.blit(self.texture, src, dst)
