"""Skyline bottom-left / best-fit rectangle packing into a fixed-size target."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

# Largest supported coordinate; also the position given to rectangles that did not fit.
MAXVAL = 0x7FFFFFFF

_SENTINEL_Y = 1 << 30


class Heuristic(IntEnum):
    """Placement heuristic used by :class:`Packer`."""

    BL_SORT_HEIGHT = 0
    BF_SORT_HEIGHT = 1
    DEFAULT = 0


@dataclass
class PackRect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in by packing."""

    id: int = 0
    w: int = 0
    h: int = 0
    x: int = 0
    y: int = 0
    was_packed: bool = False


class _Node:
    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Packer:
    """Packs rectangles into a ``width`` by ``height`` area.

    ``num_nodes`` bounds the number of skyline segments the packer may use.
    """

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.DEFAULT
        self._free = num_nodes
        self._skyline: List[_Node] = [_Node(0, 0), _Node(width, _SENTINEL_Y)]
        self.allow_out_of_mem(False)

    def allow_out_of_mem(self, allow: bool) -> None:
        """Allow unquantised widths, at the risk of running out of nodes."""
        if allow:
            self._align = 1
        else:
            self._align = (self.width + self.num_nodes - 1) // self.num_nodes

    def set_heuristic(self, heuristic: int) -> None:
        try:
            self.heuristic = Heuristic(heuristic)
        except ValueError:
            raise ValueError(f"unknown heuristic: {heuristic!r}") from None

    def _find_min_y(self, first: int, x0: int, width: int) -> Tuple[int, int]:
        nodes = self._skyline
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        i = first
        while nodes[i].x < x1:
            node, nxt = nodes[i], nodes[i + 1]
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                visited += nxt.x - x0 if node.x < x0 else nxt.x - node.x
            else:
                under = nxt.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
            i += 1
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> Optional[Tuple[int, int, int]]:
        width += self._align - 1
        width -= width % self._align

        if width > self.width or height > self.height:
            return None

        nodes = self._skyline
        best: Optional[int] = None
        best_y = _SENTINEL_Y
        best_waste = _SENTINEL_Y

        i = 0
        while nodes[i].x + width <= self.width:
            y, waste = self._find_min_y(i, nodes[i].x, width)
            if self.heuristic == Heuristic.BL_SORT_HEIGHT:
                if y < best_y:
                    best_y, best = y, i
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y, best_waste, best = y, waste, i
            i += 1

        best_x = 0 if best is None else nodes[best].x

        if self.heuristic == Heuristic.BF_SORT_HEIGHT:
            tail = 0
            node = 0
            while nodes[tail].x < width:
                tail += 1
            while tail < len(nodes):
                xpos = nodes[tail].x - width
                while nodes[node + 1].x <= xpos:
                    node += 1
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if (y < best_y or waste < best_waste
                            or (waste == best_waste and xpos < best_x)):
                        best_x, best_y, best_waste, best = xpos, y, waste, node
                tail += 1

        if best is None:
            return None
        return best, best_x, best_y

    def _pack_one(self, width: int, height: int) -> Optional[Tuple[int, int]]:
        found = self._find_best_pos(width, height)
        if found is None:
            return None
        index, x, y = found
        if y + height > self.height or self._free == 0:
            return None

        nodes = self._skyline
        self._free -= 1
        new = _Node(x, y + height)

        if nodes[index].x < x:
            nodes.insert(index + 1, new)
            cur = index + 2
        else:
            nodes.insert(index, new)
            cur = index + 1

        right = x + width
        while cur + 1 < len(nodes) and nodes[cur + 1].x <= right:
            del nodes[cur]
            self._free += 1

        if nodes[cur].x < right:
            nodes[cur].x = right

        return x, y

    def pack(self, rects: Iterable[PackRect]) -> bool:
        """Place ``rects`` in place; return True if every one of them fit."""
        items = list(rects)
        for rect in sorted(items, key=lambda r: (-r.h, -r.w)):
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            placed = self._pack_one(rect.w, rect.h)
            if placed is None:
                rect.x = rect.y = MAXVAL
            else:
                rect.x, rect.y = placed

        for rect in items:
            rect.was_packed = not (rect.x == MAXVAL and rect.y == MAXVAL)
        return all(rect.was_packed for rect in items)