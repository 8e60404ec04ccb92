"""Plain value types shared by the renderer-facing code: rectangles and colours."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Integer axis-aligned rectangle with its origin at the top-left corner."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass(frozen=True)
class Color:
    """8-bit RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @staticmethod
    def from_rgb(rgb: int, alpha: int) -> Color:
        """Build a colour from a packed ``0xRRGGBB`` value and an alpha byte."""
        return Color(
            (rgb >> 16) & 0xFF,
            (rgb >> 8) & 0xFF,
            rgb & 0xFF,
            alpha & 0xFF,
        )