# corekit

A small core for 2D games, written in plain Python with no dependencies.

## Contents

- `corekit.maths` has the frozen vector dataclasses `V2f`, `V2i`, `V3f`, `V3i`, `V4f` and `V4i`.
  They support component-wise `+ - * /` and `scale`, `mag_sqrd` and `mag`.
  - The float vectors also have `normalised` and `approx_eq`. `approx_eq` uses a tolerance of `EPSILON`, and for `V4f` it compares only x, y and z.
  - `V3f` also has `dot` and `cross`.
  - Integer division truncates toward zero.
  - `M4f` is a 4×4 matrix stored as columns (`m[column][row]`). It provides `diagonal`, `identity`, `*`, `translate`, `rotate` (the angle is in radians), `scale`, `transform`, `lookat`, `perspective` (fov is in degrees), `orthographic`, `inverted` and `transposed`. `inverted` raises `ZeroDivisionError` for a singular matrix.
  - `todeg` and `torad` convert angles.
- `corekit.geometry` has `Rect(x, y, w, h)` and `Color(r, g, b, a)`, with `Color.from_rgb(0xRRGGBB, alpha)`.
- `corekit.physics`:
  - `rect_overlap(a, b)` returns `None` when the rectangles do not overlap. Otherwise it returns a `V2i` collision normal along the axis of least penetration.
  - `point_vs_tri(p, a, b, c)` tests whether a point lies in a triangle.
  - `point_vs_rtri(p, a, b)` tests whether a point lies in the right triangle `a`, `b`, `(a.x, b.y)`.
- `corekit.platform`:
  - Clock: `get_time` gives monotonic nanoseconds and `get_frequency` gives ticks per second.
  - Files and paths: `get_root_dir`, `iter_dir`, `file_exists`, `file_is_regular`, `file_is_dir`, `file_mod_time`, `get_file_name`, `get_file_extension` and `get_file_path`. `iter_dir` yields full paths and raises `OSError` if the directory cannot be opened.
  - Input enums: `Key`, `MouseButton` and `Cursor`, with `KEY_COUNT` and `MOUSE_BTN_COUNT`.
  - Threading: `Worker` is a re-runnable background thread that calls `worker(self)`. Its `execute` raises `RuntimeError` while it is still running. `Mutex` is a lock that holds optional `data` and can be used as a context manager.
- `corekit.rectpack` is a skyline rectangle packer (`Packer`, `PackRect`, `Heuristic`). It packs in place and sets `x`, `y` and `was_packed` on each rectangle. A rectangle that does not fit is placed at `MAXVAL`.
- `corekit.tiled` reads maps in the engine's little-endian binary map format.
  - `parse_map(data)` parses bytes.
  - `load_map(filename)` reads a file and then parses it.
  - `read_raw(path, term)` reads a whole file.
  - The result is a `TiledMap` with `tilesets`, `layers` (tile or object layers) and `properties`.
  - Malformed or truncated data raises `MapFormatError`.

## Installing

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from corekit.maths import V3f, M4f
from corekit.geometry import Rect
from corekit.physics import rect_overlap

m = M4f.identity().translate(V3f(10.0, 5.0, 0.0))

normal = rect_overlap(Rect(0, 0, 10, 10), Rect(8, 2, 10, 10))
if normal is not None:
    print(normal.x, normal.y)
```

```python
from corekit.rectpack import Packer, PackRect

packer = Packer(256, 256, 256)
rects = [PackRect(id=0, w=64, h=32), PackRect(id=1, w=16, h=16)]
all_packed = packer.pack(rects)
for r in rects:
    print(r.id, r.x, r.y, r.was_packed)
```

```python
from corekit.platform import Mutex

counter = Mutex({"n": 0})
with counter:
    counter.data["n"] += 1
```

```python
from corekit.tiled import load_map

tiled_map = load_map("level1.dat")
for layer in tiled_map.layers:
    print(layer.name, layer.type)
```

## What it does not do

corekit has no windowing, input polling, rendering, fonts or audio. The `Key`, `MouseButton` and `Cursor` enums are identifiers only.

Maps are read from plain files, not from a packed resource archive. A tileset's `image` is the path string stored in the map, and the image is not loaded.