"""Simple 2D collision tests on integer rectangles and triangles."""

from __future__ import annotations

from typing import Optional

from corekit.geometry import Rect
from corekit.maths import V2i


def rect_overlap(a: Rect, b: Rect) -> Optional[V2i]:
    """Return the collision normal if ``a`` and ``b`` overlap, else ``None``.

    The normal points along the axis of least penetration.
    """
    if not (
        a.x + a.w > b.x
        and a.y + a.h > b.y
        and a.x < b.x + b.w
        and a.y < b.y + b.h
    ):
        return None

    right = (a.x + a.w) - b.x
    left = (b.x + b.w) - a.x
    top = (b.y + b.h) - a.y
    bottom = (a.y + a.h) - b.y

    smallest = min(right, left, top, bottom)

    if smallest == abs(right):
        return V2i(1, 0)
    if smallest == abs(left):
        return V2i(-1, 0)
    if smallest == abs(bottom):
        return V2i(0, 1)
    if smallest == abs(top):
        return V2i(0, -1)
    return V2i(0, 0)


def _area(a: V2i, b: V2i, c: V2i) -> int:
    doubled = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
    return abs(int(doubled / 2.0))


def point_vs_tri(p: V2i, a: V2i, b: V2i, c: V2i) -> bool:
    """True if ``p`` lies inside or on triangle ``abc``."""
    whole = _area(a, b, c)
    return whole == _area(p, b, c) + _area(p, a, c) + _area(p, a, b)


def point_vs_rtri(p: V2i, a: V2i, b: V2i) -> bool:
    """Point test against the right triangle ``a``, ``b``, ``(a.x, b.y)``."""
    return point_vs_tri(p, a, b, V2i(a.x, b.y))