from __future__ import annotations

from pathlib import Path

from PIL import Image

from .direction import Direction
from .sprite import SHEET_COLUMNS, SpriteSheet

_ROW_COLORS: dict[Direction, tuple[int, int, int, int]] = {
    Direction.DOWN: (220, 180, 60, 255),
    Direction.LEFT: (80, 180, 220, 255),
    Direction.RIGHT: (120, 220, 100, 255),
    Direction.UP: (220, 100, 120, 255),
}
_MARKER_COLOR = (20, 20, 24, 255)


def resolve_sprite_path(path: Path, *, base_dir: Path | None = None) -> Path | None:
    candidates = [path]
    if base_dir is not None and not path.is_absolute():
        candidates.insert(0, base_dir / path)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def build_placeholder_sheet(sheet: SpriteSheet) -> Image.Image:
    """Flat-color stand-in for the walk sheet.

    Each row gets its own color; a dark marker steps across the frame with the
    column index so the walk cycle is visible.
    """
    frame_w = int(sheet.frame_width)
    frame_h = int(sheet.frame_height)
    size = sheet.sheet_size
    width = int(sheet.origin.x + size.x)
    height = int(sheet.origin.y + size.y)
    output = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    marker_w = max(frame_w // SHEET_COLUMNS, 1)
    marker_h = max(frame_h // 6, 1)
    for direction in Direction:
        row_color = _ROW_COLORS[direction]
        for frame in range(SHEET_COLUMNS):
            src = sheet.frame_src(direction, frame)
            x0 = int(src.x)
            y0 = int(src.y)
            output.paste(row_color, (x0 + 1, y0 + 1, x0 + frame_w - 1, y0 + frame_h - 1))
            marker_x = x0 + frame * marker_w
            marker_y = y0 + frame_h - marker_h - 1
            output.paste(_MARKER_COLOR, (marker_x, marker_y, marker_x + marker_w, marker_y + marker_h))
    return output


def write_placeholder_sheet(out_path: Path, sheet: SpriteSheet | None = None) -> Path:
    if sheet is None:
        sheet = SpriteSheet()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    build_placeholder_sheet(sheet).save(out_path)
    return out_path
