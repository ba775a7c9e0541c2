"""Procedural meshes and Wavefront OBJ loading."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TypeVar

from toyrender.helpers import split_string
from toyrender.material import Material, read_mtl_file

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_ZERO2: Vec2 = (0.0, 0.0)
_ZERO3: Vec3 = (0.0, 0.0, 0.0)
_DEFAULT_MATERIAL = "default"

_T = TypeVar("_T")


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex; equal vertices hash equally so they can be shared."""

    position: Vec3 = _ZERO3
    normal: Vec3 = _ZERO3
    tangent_u: Vec3 = _ZERO3
    tex_coordinate: Vec2 = _ZERO2


@dataclass
class IndicesGroup:
    """Triangle indices drawn with one material."""

    mtl_name: str = ""
    indices: list[int] = field(default_factory=list)


@dataclass
class MeshData:
    """Vertices of a mesh and its index groups."""

    name: str = ""
    vertices: list[Vertex] = field(default_factory=list)
    idx_groups: list[IndicesGroup] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


@dataclass
class SubmeshGeometry:
    """Location of a sub-mesh inside shared vertex and index buffers."""

    index_count: int = 0
    start_index_location: int = 0
    base_vertex_location: int = 0


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return _ZERO3
    return (v[0] / length, v[1] / length, v[2] / length)


def build_cylinder(
    bottom_r: float, top_r: float, height: float, slice_count: int, stack_count: int
) -> MeshData:
    """Build the side surface of a cylinder (or cone frustum) centred on the y axis."""
    if slice_count < 1 or stack_count < 1:
        raise ValueError("slice_count and stack_count must be at least 1")

    mesh = MeshData(name="cylinder")
    stack_height = height / stack_count
    step_r = (top_r - bottom_r) / slice_count
    angle_delta = 2.0 * math.pi / slice_count
    dr = bottom_r - top_r

    for i in range(stack_count + 1):
        y = -0.5 * height + stack_height * i
        r = bottom_r + step_r * i
        for j in range(slice_count + 1):
            c = math.cos(angle_delta * j)
            s = math.sin(angle_delta * j)
            tangent = (-s, 0.0, c)
            bitangent = (dr * c, -height, dr * s)
            mesh.vertices.append(
                Vertex(
                    position=(c * r, y, s * r),
                    normal=_normalize(_cross(tangent, bitangent)),
                    tangent_u=tangent,
                    tex_coordinate=(j / slice_count, 1.0 - i / stack_count),
                )
            )

    ring = slice_count + 1
    group = IndicesGroup(mtl_name=_DEFAULT_MATERIAL)
    for i in range(stack_count):
        for j in range(slice_count):
            a = i * ring + j
            b = (i + 1) * ring + j
            group.indices.extend((a, b, b + 1, a, b + 1, a + 1))
    mesh.idx_groups.append(group)
    return mesh


def build_box(length: float, width: float, height: float) -> MeshData:
    """Build an axis-aligned box centred on the origin, four vertices per face."""
    l2, h2, w2 = 0.5 * length, 0.5 * height, 0.5 * width
    uv = ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))
    faces: list[tuple[Vec3, tuple[Vec3, Vec3, Vec3, Vec3]]] = [
        ((0.0, 0.0, -1.0), ((-l2, +h2, -w2), (-l2, -h2, -w2), (+l2, -h2, -w2), (+l2, +h2, -w2))),
        ((0.0, 0.0, 1.0), ((+l2, +h2, +w2), (+l2, -h2, +w2), (-l2, -h2, +w2), (-l2, +h2, +w2))),
        ((0.0, 1.0, 0.0), ((-l2, +h2, +w2), (-l2, +h2, -w2), (+l2, +h2, -w2), (+l2, +h2, +w2))),
        ((0.0, -1.0, 0.0), ((-l2, -h2, -w2), (-l2, -h2, +w2), (+l2, -h2, +w2), (+l2, -h2, -w2))),
        ((-1.0, 0.0, 0.0), ((-l2, +h2, +w2), (-l2, -h2, +w2), (-l2, -h2, -w2), (-l2, +h2, -w2))),
        ((1.0, 0.0, 0.0), ((+l2, +h2, -w2), (+l2, -h2, -w2), (+l2, -h2, +w2), (+l2, +h2, +w2))),
    ]

    mesh = MeshData(name="box")
    group = IndicesGroup(mtl_name=_DEFAULT_MATERIAL)
    for normal, corners in faces:
        base = len(mesh.vertices)
        mesh.vertices.extend(
            Vertex(position=p, normal=normal, tangent_u=_ZERO3, tex_coordinate=t)
            for p, t in zip(corners, uv)
        )
        group.indices.extend((base + 1, base, base + 3, base + 1, base + 3, base + 2))
    mesh.idx_groups.append(group)
    return mesh


def build_grid(width: float, depth: float, m: int, n: int) -> MeshData:
    """Build a flat grid in the xz plane with ``m`` rows and ``n`` columns of vertices."""
    if m < 2 or n < 2:
        raise ValueError("a grid needs at least 2 rows and 2 columns")

    mesh = MeshData(name="grid")
    half_width = 0.5 * width
    half_depth = 0.5 * depth
    dx = width / (n - 1)
    dz = depth / (m - 1)
    du = 1.0 / (n - 1)
    dv = 1.0 / (m - 1)

    for i in range(m):
        z = half_depth - i * dz
        for j in range(n):
            mesh.vertices.append(
                Vertex(
                    position=(-half_width + j * dx, 0.0, z),
                    normal=(0.0, 1.0, 0.0),
                    tangent_u=(1.0, 0.0, 0.0),
                    tex_coordinate=(j * du, i * dv),
                )
            )

    group = IndicesGroup(mtl_name=_DEFAULT_MATERIAL)
    for i in range(m - 1):
        for j in range(n - 1):
            a = i * n + j
            b = (i + 1) * n + j
            group.indices.extend((a, a + 1, b, b, a + 1, b + 1))
    mesh.idx_groups.append(group)
    return mesh


def _floats(parts: list[str], count: int) -> tuple[float, ...]:
    if len(parts) < count + 1:
        raise ValueError(f"'{parts[0]}' needs {count} value(s), got {len(parts) - 1}")
    return tuple(float(value) for value in parts[1 : count + 1])


def _lookup(items: list[_T], token: str, offset: int, kind: str) -> _T:
    index = int(token) - offset
    if not 0 <= index < len(items):
        raise ValueError(f"{kind} index {token} is out of range")
    return items[index]


def _face_corner(token: str) -> list[str]:
    info = split_string(token, "/")
    if len(info) < 3:
        raise ValueError(f"face vertex '{token}' needs position, texture and normal indices")
    return info


def _lines(path: str | Path, file_name: str):
    with open(os.path.join(os.fspath(path), file_name), encoding="utf-8", errors="replace") as handle:
        for line in handle:
            parts = split_string(line.rstrip("\n"), " ")
            if parts:
                yield parts


def read_obj_file(path: str | Path, file_name: str) -> tuple[list[MeshData], list[Material]]:
    """Read an OBJ file into one mesh per group, together with its materials.

    A ``usemtl`` following a ``g`` closes the mesh built so far; every
    ``usemtl`` closes the current index group. Equal vertices are shared.
    """
    meshes: list[MeshData] = []
    materials: list[Material] = []

    current_mesh = MeshData()
    current_group = IndicesGroup()
    first_mesh = True
    g_sign = False
    mesh_name = ""

    positions: list[Vec3] = []
    tex_coords: list[Vec2] = []
    normals: list[Vec3] = []
    vertex_index: dict[Vertex, int] = {}

    for parts in _lines(path, file_name):
        key = parts[0]
        if key == "mtllib":
            if len(parts) < 2:
                raise ValueError("'mtllib' needs a file name")
            materials.extend(read_mtl_file(path, parts[1]))
        elif key == "g":
            if len(parts) < 2:
                raise ValueError("'g' needs a name")
            g_sign = True
            if parts[1] != "group":
                mesh_name = parts[1]
            elif len(parts) > 2:
                mesh_name = parts[2]
            else:
                raise ValueError("'g group' needs a name")
        elif key == "usemtl":
            if len(parts) < 2:
                raise ValueError("'usemtl' needs a material name")
            if first_mesh:
                first_mesh = False
            else:
                current_mesh.idx_groups.append(current_group)
                if g_sign:
                    meshes.append(current_mesh)
                    current_mesh = MeshData()
                    g_sign = False
                current_group = IndicesGroup()
            current_mesh.name = mesh_name
            current_group.mtl_name = parts[1]
        elif key == "f":
            for token in parts[1:]:
                v_idx, vt_idx, vn_idx = _face_corner(token)[:3]
                vertex = Vertex(
                    position=_lookup(positions, v_idx, 1, "position"),
                    normal=_lookup(normals, vn_idx, 1, "normal"),
                    tangent_u=_ZERO3,
                    tex_coordinate=_lookup(tex_coords, vt_idx, 1, "texture"),
                )
                if vertex not in vertex_index:
                    current_mesh.vertices.append(vertex)
                    vertex_index[vertex] = len(current_mesh.vertices) - 1
                current_group.indices.append(vertex_index[vertex])
        elif key == "v":
            x, y, z = _floats(parts, 3)
            positions.append((x, y, z))
        elif key == "vt":
            u, v = _floats(parts, 2)
            tex_coords.append((u, v))
        elif key == "vn":
            x, y, z = _floats(parts, 3)
            normals.append((x, y, z))

    current_mesh.idx_groups.append(current_group)
    meshes.append(current_mesh)
    return meshes, materials


def read_obj_file_in_one(path: str | Path, file_name: str) -> MeshData:
    """Read every face of an OBJ file into a single mesh indexed by OBJ position.

    Each position takes the texture coordinate and normal of the first face
    corner that references it.
    """
    mesh = MeshData(name=file_name)
    group = IndicesGroup()
    completed: set[int] = set()
    # Slot 0 stands in so that OBJ's one-based indices can be used directly.
    tex_coords: list[Vec2] = [_ZERO2]
    normals: list[Vec3] = [_ZERO3]

    for parts in _lines(path, file_name):
        key = parts[0]
        if key == "v":
            x, y, z = _floats(parts, 3)
            mesh.vertices.append(Vertex(position=(x, y, z)))
        elif key == "vt":
            u, v = _floats(parts, 2)
            tex_coords.append((u, v))
        elif key == "vn":
            x, y, z = _floats(parts, 3)
            normals.append((x, y, z))
        elif key == "f":
            for token in parts[1:]:
                v_idx, vt_idx, vn_idx = _face_corner(token)[:3]
                index = int(v_idx) - 1
                if not 0 <= index < len(mesh.vertices):
                    raise ValueError(f"position index {v_idx} is out of range")
                if index not in completed:
                    mesh.vertices[index] = replace(
                        mesh.vertices[index],
                        tex_coordinate=_lookup(tex_coords, vt_idx, 0, "texture"),
                        normal=_lookup(normals, vn_idx, 0, "normal"),
                    )
                    completed.add(index)
                group.indices.append(index)

    mesh.idx_groups.append(group)
    return mesh