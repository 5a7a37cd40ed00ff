from __future__ import annotations

from pathlib import Path

from PIL import Image

from bardo.assets import build_placeholder_sheet, resolve_sprite_path, write_placeholder_sheet
from bardo.direction import Direction
from bardo.sprite import SpriteSheet


def test_placeholder_sheet_matches_layout() -> None:
    sheet = SpriteSheet()

    image = build_placeholder_sheet(sheet)

    assert image.size == (78, 144)
    assert image.mode == "RGBA"


def test_placeholder_rows_are_colored_per_facing() -> None:
    sheet = SpriteSheet()
    image = build_placeholder_sheet(sheet)

    colors = {}
    for direction in Direction:
        src = sheet.frame_src(direction, 0)
        colors[direction] = image.getpixel((int(src.x) + 3, int(src.y) + 3))

    assert len(set(colors.values())) == 4
    assert all(color[3] == 255 for color in colors.values())


def test_write_placeholder_sheet_and_resolve(tmp_path: Path) -> None:
    out = write_placeholder_sheet(tmp_path / "assets" / "bardo.png")

    with Image.open(out) as image:
        assert image.size == (78, 144)

    assert resolve_sprite_path(Path("assets") / "bardo.png", base_dir=tmp_path) == tmp_path / "assets" / "bardo.png"
    assert resolve_sprite_path(Path("missing.png"), base_dir=tmp_path) is None
