"""Layout helpers for the centred focal image and caption block."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

Vec2 = Tuple[float, float]
Size = Tuple[float, float]


@dataclass(frozen=True)
class TextPlacement:
    """Top-left anchor of one caption line plus its measured height."""

    text: str
    x: float
    y: float
    height: float


def center_image(viewport_size: Size, image_size: Size, vertical_offset: float) -> Vec2:
    """Return the top-left corner that centres ``image_size`` in the viewport.

    The vertical term deliberately uses the image *width*; square-ish focal
    images stay visually centred and existing scenes depend on this placement.
    """

    view_w, view_h = viewport_size
    image_w, _image_h = image_size
    x = (view_w - image_w) / 2.0
    y = (view_h - image_w) / 2.0 + vertical_offset
    return (x, y)


def center_text_block(
    lines: Sequence[str],
    measured_widths: Sequence[float],
    measured_heights: Sequence[float],
    viewport_size: Size,
    y_offset: float,
    line_spacing: float,
) -> List[TextPlacement]:
    """Stack ``lines`` top to bottom, each one centred horizontally."""

    if not len(lines) == len(measured_widths) == len(measured_heights):
        raise ValueError("Every caption line needs a measured width and height")

    view_w, _view_h = viewport_size
    placements: List[TextPlacement] = []
    line_offset = 0.0
    for text, width, height in zip(lines, measured_widths, measured_heights):
        x = (view_w - width) / 2.0
        placements.append(TextPlacement(text=text, x=x, y=y_offset + line_offset, height=height))
        line_offset += height + line_spacing
    return placements


def point_in_box(point: Vec2, origin: Vec2, size: Size) -> bool:
    """Strict containment test; points on the border are outside."""

    px, py = point
    left, top = origin
    width, height = size
    return left < px < left + width and top < py < top + height


def text_window_anchor(
    placement_x: float, placement_y: float, text_height: float, viewport_height: float
) -> Vec2:
    """Convert a top-left text placement into bottom-left window coordinates.

    Window coordinates grow upwards from the bottom edge. Negative values are
    kept as-is: the rasteriser clips the off-screen part of the line.
    """

    return (placement_x, viewport_height - placement_y - text_height)
