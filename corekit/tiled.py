"""Loading of Tiled maps stored in the engine's compact binary map format.

All values are little-endian.

A string is a ``u32`` length followed by that many bytes.

A property table is a ``u32`` count of entries. Each entry is a name string
and an ``i32`` type tag, followed by the value:

* a single byte for a bool;
* an ``f64`` for a number;
* a string for a string.

The map itself is laid out as follows:

* the map's property table;
* the tilesets;
* the layers.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from corekit.maths import V2f

log = logging.getLogger(__name__)

# Maximum number of frames an animated tile may have.
ANIM_TILE_FRAME_COUNT = 32

PropertyValue = Union[bool, float, str, None]


class MapFormatError(ValueError):
    """Raised when map data is truncated or malformed."""


class PropertyType(IntEnum):
    BOOL = 0
    NUMBER = 1
    STRING = 2


class ObjectShape(IntEnum):
    RECT = 0
    POINT = 1
    POLYGON = 2


class LayerType(IntEnum):
    UNKNOWN = -1
    TILES = 0
    OBJECTS = 1


@dataclass(frozen=True)
class Tile:
    """One cell of a tile layer."""

    id: int
    tileset_id: int


@dataclass
class AnimatedTile:
    """Frame sequence of an animated tile; durations are in seconds."""

    frames: List[int] = field(default_factory=list)
    durations: List[float] = field(default_factory=list)
    current_frame: int = 0
    timer: float = 0.0


@dataclass
class Tileset:
    name: str
    image: str
    tile_count: int
    tile_w: int
    tile_h: int
    animations: Dict[int, AnimatedTile] = field(default_factory=dict)


@dataclass
class MapObject:
    """An object from an object layer; only the field matching ``shape`` is set."""

    name: str
    type: str
    shape: int
    properties: Dict[str, PropertyValue] = field(default_factory=dict)
    rect: Optional[Tuple[float, float, float, float]] = None
    point: Optional[V2f] = None
    polygon: List[V2f] = field(default_factory=list)


@dataclass
class TileLayer:
    """Tiles stored row by row: the tile at (x, y) is ``tiles[x + y * w]``."""

    w: int
    h: int
    tiles: List[Tile] = field(default_factory=list)


@dataclass
class ObjectLayer:
    objects: List[MapObject] = field(default_factory=list)


@dataclass
class Layer:
    name: str
    type: LayerType
    properties: Dict[str, PropertyValue] = field(default_factory=dict)
    tile_layer: Optional[TileLayer] = None
    object_layer: Optional[ObjectLayer] = None


@dataclass
class TiledMap:
    layers: List[Layer] = field(default_factory=list)
    tilesets: List[Tileset] = field(default_factory=list)
    properties: Dict[str, PropertyValue] = field(default_factory=dict)


def read_raw(path: Union[str, Path], term: bool = False) -> bytes:
    """Read a whole file; with ``term`` a NUL byte is appended."""
    data = Path(path).read_bytes()
    return data + b"\0" if term else data


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    def _unpack(self, fmt: str):
        size = struct.calcsize(fmt)
        if self._pos + size > len(self._data):
            raise MapFormatError(f"unexpected end of data at offset {self._pos}")
        (value,) = struct.unpack_from(fmt, self._data, self._pos)
        self._pos += size
        return value

    def u32(self) -> int:
        return self._unpack("<I")

    def i32(self) -> int:
        return self._unpack("<i")

    def i16(self) -> int:
        return self._unpack("<h")

    def f32(self) -> float:
        return self._unpack("<f")

    def f64(self) -> float:
        return self._unpack("<d")

    def boolean(self) -> bool:
        return self._unpack("<B") != 0

    def string(self) -> str:
        length = self.u32()
        end = self._pos + length
        if end > len(self._data):
            raise MapFormatError(f"string of {length} bytes runs past end of data")
        raw = bytes(self._data[self._pos:end])
        self._pos = end
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MapFormatError(f"invalid string: {exc}") from None

    def v2f(self) -> V2f:
        x = self.f32()
        return V2f(x, self.f32())


def _read_properties(r: _Reader) -> Dict[str, PropertyValue]:
    props: Dict[str, PropertyValue] = {}
    for _ in range(r.u32()):
        name = r.string()
        kind = r.i32()
        value: PropertyValue = None
        if kind == PropertyType.BOOL:
            value = r.boolean()
        elif kind == PropertyType.NUMBER:
            value = r.f64()
        elif kind == PropertyType.STRING:
            value = r.string()
        props[name] = value
    return props


def _read_tileset(r: _Reader) -> Tileset:
    name = r.string()
    image = r.string()
    tile_count = r.u32()
    tile_w = r.u32()
    tile_h = r.u32()
    tileset = Tileset(name, image, tile_count, tile_w, tile_h)

    for _ in range(r.u32()):
        frame_count = r.u32()
        tile_id = r.u32()
        if frame_count > ANIM_TILE_FRAME_COUNT:
            raise MapFormatError(
                f"animated tile has {frame_count} frames; "
                f"at most {ANIM_TILE_FRAME_COUNT} are allowed"
            )
        if tile_id >= tile_count:
            raise MapFormatError(
                f"animation for tile {tile_id} in a tileset of {tile_count} tiles"
            )
        anim = AnimatedTile()
        for _ in range(frame_count):
            anim.frames.append(r.i32())
            anim.durations.append(r.i32() * 0.001)
        tileset.animations[tile_id] = anim

    return tileset


def _read_object(r: _Reader) -> MapObject:
    properties = _read_properties(r)
    name = r.string()
    obj_type = r.string()
    obj = MapObject(name, obj_type, r.i32(), properties)

    if obj.shape == ObjectShape.POINT:
        obj.point = r.v2f()
    elif obj.shape == ObjectShape.POLYGON:
        obj.polygon = [r.v2f() for _ in range(r.u32())]
    elif obj.shape == ObjectShape.RECT:
        x, y, w, h = (r.f32() for _ in range(4))
        obj.rect = (x, y, w, h)
    return obj


def _read_layer(r: _Reader) -> Layer:
    name = r.string()
    properties = _read_properties(r)
    kind = r.i32()

    if kind == LayerType.TILES:
        w = r.u32()
        h = r.u32()
        tiles = []
        for _ in range(w * h):
            tile_id = r.i16()
            tiles.append(Tile(tile_id, r.i16()))
        return Layer(name, LayerType.TILES, properties, tile_layer=TileLayer(w, h, tiles))

    if kind == LayerType.OBJECTS:
        objects = [_read_object(r) for _ in range(r.u32())]
        return Layer(name, LayerType.OBJECTS, properties,
                     object_layer=ObjectLayer(objects))

    log.warning("unknown layer type ID %d in layer %r", kind, name)
    return Layer(name, LayerType.UNKNOWN, properties)


def parse_map(data: bytes) -> TiledMap:
    """Parse a map from its binary representation."""
    r = _Reader(data)
    properties = _read_properties(r)
    tilesets = [_read_tileset(r) for _ in range(r.u32())]
    layers = [_read_layer(r) for _ in range(r.u32())]
    return TiledMap(layers, tilesets, properties)


def load_map(filename: Union[str, Path]) -> TiledMap:
    """Read and parse a map file; raises OSError if it cannot be read."""
    return parse_map(read_raw(filename))