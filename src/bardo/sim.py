from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import msgspec

from easel.geom import Vec2

from .direction import Direction
from .input import KeyEvent, dispatch_key_event
from .player import Player

DEFAULT_TICK_RATE = 20
MAX_FRAME_DT = 0.25


@dataclass(slots=True)
class FixedStepClock:
    """Turns variable render-frame times into whole simulation ticks.

    `elapsed` counts every tick handed out since the clock was created, so the
    frame loop never keeps a second counter. A frame longer than
    `max_frame_dt` is cut short, capping catch-up at
    `tick_rate * max_frame_dt` ticks.
    """

    tick_rate: int = DEFAULT_TICK_RATE
    max_frame_dt: float = MAX_FRAME_DT
    elapsed: int = 0
    banked: float = 0.0

    def __post_init__(self) -> None:
        if int(self.tick_rate) <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if float(self.max_frame_dt) <= 0.0:
            raise ValueError(f"max_frame_dt must be positive, got {self.max_frame_dt}")
        self.tick_rate = int(self.tick_rate)

    @property
    def period(self) -> float:
        return 1.0 / float(self.tick_rate)

    def advance(self, frame_dt: float) -> range:
        """Bank one frame's time; return the indices of the ticks now due."""
        start = self.elapsed
        if frame_dt <= 0.0:
            return range(start, start)
        self.banked += min(float(frame_dt), float(self.max_frame_dt))
        # Frame times are summed in binary floats; 0.05 * 20 can land a hair under 1.
        due = int(self.banked * self.tick_rate + 1e-9)
        self.banked = max(self.banked - due * self.period, 0.0)
        self.elapsed += due
        return range(start, self.elapsed)


class ScriptEvent(msgspec.Struct, forbid_unknown_fields=True):
    """Key transition applied just before the update of `tick`."""

    tick: int
    direction: Direction
    pressed: bool
    repeat: bool = False

    def to_key_event(self) -> KeyEvent:
        return KeyEvent(direction=self.direction, pressed=self.pressed, repeat=self.repeat)


class PlayerSnapshot(msgspec.Struct):
    tick: int
    position: Vec2
    velocity: Vec2
    facing: Direction
    frame: int

    @classmethod
    def capture(cls, tick: int, player: Player) -> PlayerSnapshot:
        return cls(
            tick=int(tick),
            position=player.position,
            velocity=player.velocity,
            facing=player.facing,
            frame=int(player.current_frame),
        )


def load_script(path: Path) -> list[ScriptEvent]:
    """Load a JSON array of `{"tick", "direction", "pressed"}` objects."""
    return msgspec.json.decode(path.read_bytes(), type=list[ScriptEvent])


def encode_snapshots(snapshots: Iterable[PlayerSnapshot]) -> bytes:
    return msgspec.json.encode(list(snapshots))


def simulate(
    script: Iterable[ScriptEvent],
    ticks: int,
    *,
    player: Player | None = None,
) -> list[PlayerSnapshot]:
    """Run `ticks` updates headlessly, replaying scripted key transitions."""
    if ticks < 0:
        raise ValueError(f"ticks must be non-negative, got {ticks}")
    if player is None:
        player = Player()

    by_tick: dict[int, list[ScriptEvent]] = defaultdict(list)
    for event in script:
        by_tick[int(event.tick)].append(event)

    snapshots: list[PlayerSnapshot] = []
    for tick in range(int(ticks)):
        for event in by_tick.get(tick, ()):
            dispatch_key_event(player, event.to_key_event())
        player.update()
        snapshots.append(PlayerSnapshot.capture(tick, player))
    return snapshots
