from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .math import clamp01

if TYPE_CHECKING:
    import pyray as rl

_INV_255 = 1.0 / 255.0


@dataclass(slots=True, frozen=True)
class RGBA:
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> RGBA:
        return cls(
            float(r) * _INV_255,
            float(g) * _INV_255,
            float(b) * _INV_255,
            float(a) * _INV_255,
        )

    def to_bytes(self) -> tuple[int, int, int, int]:
        c = self.clamped()
        return (
            int(c.r * 255.0 + 0.5),
            int(c.g * 255.0 + 0.5),
            int(c.b * 255.0 + 0.5),
            int(c.a * 255.0 + 0.5),
        )

    def clamped(self) -> RGBA:
        return RGBA(
            r=clamp01(self.r),
            g=clamp01(self.g),
            b=clamp01(self.b),
            a=clamp01(self.a),
        )

    def to_rl(self) -> rl.Color:
        import pyray as rl

        return rl.Color(*self.to_bytes())
