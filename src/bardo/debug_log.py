"""Opt-in event trace for `bardo run --debug-log`.

One line per event, `<utc timestamp> <event> key=value ...`, keys sorted.
Game values get a compact encoding: directions by name, vectors as `x,y`,
and strings that would break the line are JSON-quoted.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
import os
from pathlib import Path
from threading import Lock

import msgspec

from easel.geom import Vec2


def encode_field(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Vec2):
        return f"{value.x:.3f},{value.y:.3f}"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.6g}"
    if isinstance(value, Path):
        value = value.as_posix()
    text = str(value)
    if not text or any(ch.isspace() or ch in '="' for ch in text):
        return msgspec.json.encode(text).decode("utf-8")
    return text


@dataclass(slots=True)
class DebugTrace:
    path: Path
    lock: Lock = field(default_factory=Lock, repr=False)

    def write(self, event: str, fields: dict[str, object]) -> None:
        stamp = dt.datetime.now(dt.timezone.utc).isoformat(timespec="milliseconds")
        parts = [stamp, str(event).strip()]
        parts.extend(f"{key}={encode_field(fields[key])}" for key in sorted(fields))
        line = " ".join(parts) + "\n"
        with self.lock, self.path.open("a", encoding="utf-8") as handle:
            handle.write(line)


_trace: DebugTrace | None = None


def debug_log_path() -> Path | None:
    trace = _trace
    return None if trace is None else trace.path


def init_debug_log(
    *,
    base_dir: Path,
    width: int,
    height: int,
    tick_rate: int,
    sprite_path: str | Path | None = None,
) -> Path:
    """Start a fresh trace under `base_dir/logs` and record the session setup."""
    global _trace
    stamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%S.%fZ")
    path = base_dir / "logs" / f"bardo-pid{os.getpid()}-{stamp}.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    _trace = DebugTrace(path)

    fields: dict[str, object] = {
        "pid": os.getpid(),
        "window": f"{int(width)}x{int(height)}",
        "tick_rate": int(tick_rate),
    }
    if sprite_path is not None:
        fields["sprite"] = Path(sprite_path)
    debug_log("init", **fields)
    return path


def debug_log(event: str, **fields: object) -> None:
    trace = _trace
    if trace is None:
        return
    trace.write(event, fields)


def close_debug_log() -> None:
    global _trace
    _trace = None
