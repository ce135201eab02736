"""Rectangle helpers for placing popups on the drawing surface."""

from __future__ import annotations

from popup_core.models import Rect


def centered_rect_absolute(width: int, height: int, area: Rect) -> Rect:
    width = max(0, min(width, area.width))
    height = max(0, min(height, area.height))
    return Rect(
        area.x + (area.width - width) // 2,
        area.y + (area.height - height) // 2,
        width,
        height,
    )


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    if not (0 <= percent_x <= 100 and 0 <= percent_y <= 100):
        raise ValueError(f"percentages must be within 0..100: {percent_x}, {percent_y}")
    width = area.width * percent_x // 100
    height = area.height * percent_y // 100
    return centered_rect_absolute(width, height, area)
