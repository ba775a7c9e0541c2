"""Reading of Wavefront MTL material libraries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from toyrender.helpers import split_string

Vec3 = tuple[float, float, float]

_SEPARATORS = " \t\n\r"
_VECTOR_KEYS = {"Ka": "ka", "Kd": "kd", "Ks": "ks", "Tf": "tf"}
_SCALAR_KEYS = {"Ni": "ni", "Ns": "ns"}


@dataclass
class Material:
    """Surface properties of one ``newmtl`` entry."""

    mtl_name: str = ""
    tex_path: str = ""
    ka: Vec3 = (0.0, 0.0, 0.0)  # ambient
    kd: Vec3 = (0.0, 0.0, 0.0)  # diffuse
    ks: Vec3 = (0.0, 0.0, 0.0)  # specular
    tf: Vec3 = (0.0, 0.0, 0.0)  # transmission filter
    ni: float = 0.0  # optical density (index of refraction)
    ns: float = 0.0  # specular exponent


def _arguments(parts: list[str], count: int) -> list[str]:
    if len(parts) < count + 1:
        raise ValueError(f"'{parts[0]}' needs {count} value(s), got {len(parts) - 1}")
    return parts[1 : count + 1]


def _vector(parts: list[str]) -> Vec3:
    x, y, z = (float(value) for value in _arguments(parts, 3))
    return (x, y, z)


def read_mtl_file(path: str | Path, file_name: str) -> list[Material]:
    """Read the material library ``file_name`` found in directory ``path``.

    Every ``newmtl`` starts a new material. Texture paths from ``map_Kd`` are
    joined to ``path``. Unknown statements are ignored. The material being
    built when the file ends is always part of the result, so a file without
    any ``newmtl`` yields one default material.
    """
    directory = os.fspath(path)
    materials: list[Material] = []
    current = Material()
    first = True

    with open(os.path.join(directory, file_name), encoding="utf-8", errors="replace") as handle:
        for line in handle:
            parts = split_string(line, _SEPARATORS)
            if not parts:
                continue
            key = parts[0]
            if key == "newmtl":
                (name,) = _arguments(parts, 1)
                if first:
                    first = False
                else:
                    materials.append(current)
                    current = Material()
                current.mtl_name = name
            elif key == "map_Kd":
                (texture,) = _arguments(parts, 1)
                current.tex_path = os.path.join(directory, texture)
            elif key in _VECTOR_KEYS:
                setattr(current, _VECTOR_KEYS[key], _vector(parts))
            elif key in _SCALAR_KEYS:
                (value,) = _arguments(parts, 1)
                setattr(current, _SCALAR_KEYS[key], float(value))

    materials.append(current)
    return materials