"""Geometry payload carried by mesh nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from .transform import Transform

if TYPE_CHECKING:
    import trimesh


class MeshGeometry:
    """Container for mesh geometry data.

    Stores vertices, faces, and optional normals/UVs as numpy arrays.
    Can convert to/from trimesh for export.
    """

    def __init__(
        self,
        vertices: NDArray[np.float64],
        faces: NDArray[np.int64],
        normals: NDArray[np.float64] | None = None,
        uvs: NDArray[np.float64] | None = None,
    ) -> None:
        """Create geometry from raw arrays.

        Args:
            vertices: Nx3 array of vertex positions
            faces: Mx3 array of triangle indices
            normals: Optional Nx3 array of vertex normals
            uvs: Optional Nx2 array of texture coordinates
        """
        self.vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        self.faces = np.asarray(faces, dtype=np.int64).reshape(-1, 3)
        self.normals = (
            np.asarray(normals, dtype=np.float64).reshape(-1, 3)
            if normals is not None
            else None
        )
        self.uvs = (
            np.asarray(uvs, dtype=np.float64).reshape(-1, 2) if uvs is not None else None
        )

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the mesh."""
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        """Number of faces (triangles) in the mesh."""
        return len(self.faces)

    def transformed_by(self, transform: Transform) -> MeshGeometry:
        """Return a copy repositioned by a translation.

        Normals and UVs are unaffected by translation and are copied as-is.

        Args:
            transform: Translation to apply to every vertex

        Returns:
            New MeshGeometry with offset vertices
        """
        return MeshGeometry(
            vertices=self.vertices + transform.translation,
            faces=self.faces.copy(),
            normals=self.normals.copy() if self.normals is not None else None,
            uvs=self.uvs.copy() if self.uvs is not None else None,
        )

    def copy(self) -> MeshGeometry:
        """Create a deep copy of this geometry."""
        return MeshGeometry(
            vertices=self.vertices.copy(),
            faces=self.faces.copy(),
            normals=self.normals.copy() if self.normals is not None else None,
            uvs=self.uvs.copy() if self.uvs is not None else None,
        )

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert to a trimesh.Trimesh object for export."""
        import trimesh as tm

        mesh = tm.Trimesh(
            vertices=self.vertices,
            faces=self.faces,
            process=False,  # Don't modify our geometry
        )
        if self.normals is not None:
            mesh.vertex_normals = self.normals
        if self.uvs is not None:
            mesh.visual = tm.visual.TextureVisuals(uv=self.uvs)
        return mesh

    @classmethod
    def from_trimesh(cls, mesh: trimesh.Trimesh) -> MeshGeometry:
        """Create geometry from a trimesh.Trimesh object."""
        uv = getattr(mesh.visual, "uv", None)
        return cls(
            vertices=np.array(mesh.vertices),
            faces=np.array(mesh.faces),
            normals=np.array(mesh.vertex_normals) if len(mesh.vertices) else None,
            uvs=np.array(uv) if uv is not None else None,
        )

    @staticmethod
    def merge(meshes: list[MeshGeometry]) -> MeshGeometry:
        """Merge multiple geometries into one.

        Args:
            meshes: List of MeshGeometry objects to merge

        Returns:
            New MeshGeometry containing all vertices and faces
        """
        if not meshes:
            return MeshGeometry(
                vertices=np.empty((0, 3)),
                faces=np.empty((0, 3), dtype=np.int64),
            )

        all_vertices = []
        all_faces = []
        all_normals = []
        all_uvs = []
        vertex_offset = 0
        has_normals = all(m.normals is not None for m in meshes)
        has_uvs = all(m.uvs is not None for m in meshes)

        for mesh in meshes:
            all_vertices.append(mesh.vertices)
            all_faces.append(mesh.faces + vertex_offset)
            if has_normals:
                all_normals.append(mesh.normals)
            if has_uvs:
                all_uvs.append(mesh.uvs)
            vertex_offset += len(mesh.vertices)

        return MeshGeometry(
            vertices=np.vstack(all_vertices),
            faces=np.vstack(all_faces),
            normals=np.vstack(all_normals) if has_normals else None,
            uvs=np.vstack(all_uvs) if has_uvs else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeshGeometry):
            return NotImplemented

        def _same(a: NDArray | None, b: NDArray | None) -> bool:
            if a is None or b is None:
                return a is None and b is None
            return bool(np.array_equal(a, b))

        return (
            _same(self.vertices, other.vertices)
            and _same(self.faces, other.faces)
            and _same(self.normals, other.normals)
            and _same(self.uvs, other.uvs)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MeshGeometry({self.vertex_count}v, {self.face_count}f)"
