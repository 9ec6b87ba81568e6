"""Geometry payload files (``mesh.json``)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np

from ..core.mesh import MeshGeometry
from ..errors import GeometryLoadError


def mesh_to_dict(mesh: MeshGeometry) -> dict[str, Any]:
    return {
        "vertices": mesh.vertices.tolist(),
        "faces": mesh.faces.tolist(),
        "normals": mesh.normals.tolist() if mesh.normals is not None else None,
        "uvs": mesh.uvs.tolist() if mesh.uvs is not None else None,
    }


def mesh_from_dict(data: dict[str, Any]) -> MeshGeometry:
    """Build geometry from decoded JSON.

    Raises:
        GeometryLoadError: If arrays are missing or have the wrong shape
    """
    try:
        mesh = MeshGeometry(
            vertices=np.array(data["vertices"], dtype=np.float64),
            faces=np.array(data["faces"], dtype=np.int64),
            normals=data.get("normals"),
            uvs=data.get("uvs"),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise GeometryLoadError(f"Malformed geometry: {e}") from e

    if mesh.face_count and (mesh.faces.min() < 0 or mesh.faces.max() >= mesh.vertex_count):
        raise GeometryLoadError("Face index out of range")
    return mesh


def mesh_from_file(path: str | Path) -> MeshGeometry:
    """Load geometry from a JSON file.

    Raises:
        GeometryLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise GeometryLoadError(f"Failed to read geometry {path}: {e}") from e

    try:
        return mesh_from_dict(data)
    except GeometryLoadError as e:
        raise GeometryLoadError(f"{path}: {e}") from e


def write_mesh(mesh: MeshGeometry, path: str | Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(mesh_to_dict(mesh), f)
