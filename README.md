# toyrender

Building blocks for a small real-time renderer, written in plain Python with
numpy.

## Modules

- `toyrender.geometry` generates meshes and reads Wavefront OBJ files.
  - `build_box(length, width, height)` gives a box centred on the origin.
    It has 24 vertices (four per face) and 36 indices.
  - `build_cylinder(bottom_r, top_r, height, slice_count, stack_count)`
    gives the side surface of a cylinder or cone frustum around the y axis.
  - `build_grid(width, depth, m, n)` gives a flat grid in the xz plane with
    `m` rows and `n` columns of vertices.
  - `read_obj_file(path, file_name)` returns `(meshes, materials)`. It starts
    one `MeshData` per `g` group and one `IndicesGroup` per `usemtl`, and
    shares vertices that are equal. It reads the `mtllib` libraries it
    refers to with `read_mtl_file`.
  - `read_obj_file_in_one(path, file_name)` reads all faces into a single
    `MeshData`, indexed by OBJ position.
  - Face corners must have the form `v/vt/vn`. Malformed lines and indices
    that are out of range raise `ValueError`.
  - `Vertex` is a frozen, hashable record of `position`, `normal`,
    `tangent_u` and `tex_coordinate`. `MeshData` holds `name`, `vertices`,
    `idx_groups` and `indices`. `SubmeshGeometry` describes where a sub-mesh
    sits in shared buffers.
- `toyrender.material` reads MTL libraries.
  - `read_mtl_file(path, file_name)` returns a list of `Material` records.
  - Each record holds `mtl_name`, `tex_path` (the `map_Kd` entry joined to
    `path`), the colours `ka`, `kd`, `ks` and `tf`, and the values `ni` and
    `ns`.
  - Unknown statements are ignored.
- `toyrender.camera` provides the orbit camera and two matrix builders.
  - `Camera` orbits a target point. `on_mouse_move` rotates it while the
    button flag is set, and the pitch is clamped just inside ±π/2.
    `on_zoom` changes the radius and never lets it fall below 0.1.
    `on_resize` recomputes the projection. `on_update` returns
    `(view, projection)` as 4×4 numpy arrays.
  - `perspective_fov_lh` and `look_at_lh` build left-handed matrices in the
    row-vector convention. They raise `ValueError` on degenerate input.
- `toyrender.sample` holds `Sample`, the window-level state of an application:
  `width`, `height`, `title`, `use_warp_device` and `notification`.
  - `parse_command_line_args(argv)` skips `argv[0]`. It turns on
    `use_warp_device` and appends ` (WARP)` to the title for every argument
    that is a case-insensitive prefix of `-warp` or `/warp`.
  - `window_text(text)` builds the window caption.
- `toyrender.helpers` has small utilities:
  - `split_string` splits a string on separator characters and drops empty
    pieces.
  - `calc_const_buffer_byte_size` rounds a size up to a multiple of 256.
  - `hr_to_string` formats a result code.
  - `throw_if_failed` raises `HrError` when the high bit of a code is set.
  - `load_binary` returns a file's bytes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import math

from toyrender.camera import Camera
from toyrender.geometry import build_box, read_obj_file

box = build_box(1.0, 1.0, 1.0)
print(len(box.vertices), len(box.idx_groups[0].indices))  # 24 36

meshes, materials = read_obj_file("models", "scene.obj")
for mesh in meshes:
    for group in mesh.idx_groups:
        print(mesh.name, group.mtl_name, len(group.indices))

camera = Camera(1600, 900, 5.0, math.pi / 4, 1.0, 1000.0, (0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))
camera.on_mouse_move(10, 5, False)
camera.on_mouse_move(40, 20, True)
camera.on_zoom(12)
view, projection = camera.on_update()
```

The package looks up OBJ and MTL files as `path` joined with `file_name`.

## What it does not do

This package has no window, no event loop and no GPU access.

- It does not upload meshes or textures to a graphics device.
- It does not compile shaders.
- It does not decode image files. A `Material` only records its texture
  path.
- It does not draw anything.

It prepares the data and matrices that a renderer would consume, and the
application loop is left to the caller.