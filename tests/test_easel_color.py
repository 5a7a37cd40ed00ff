from __future__ import annotations

import math

from easel.color import RGBA


def test_rgba_from_bytes_and_back() -> None:
    color = RGBA.from_bytes(10, 64, 245)

    assert math.isclose(color.r, 10.0 / 255.0, abs_tol=1e-9)
    assert math.isclose(color.a, 1.0, abs_tol=1e-9)
    assert color.to_bytes() == (10, 64, 245, 255)


def test_rgba_clamped() -> None:
    assert RGBA(1.2, -0.1, 0.5, 0.25).clamped() == RGBA(1.0, 0.0, 0.5, 0.25)


def test_rgba_to_rl() -> None:
    rl_color = RGBA(0.6, 0.4, 0.2, 0.8).to_rl()

    assert (int(rl_color.r), int(rl_color.g), int(rl_color.b), int(rl_color.a)) == (153, 102, 51, 204)
