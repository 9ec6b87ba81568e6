"""Core mesh tree components."""

from .transform import Transform, compose
from .mesh import MeshGeometry
from .metadata import MeshMetadata
from .node import MeshType, PolyMesh, TransformPointer

__all__ = [
    "Transform",
    "compose",
    "MeshGeometry",
    "MeshMetadata",
    "MeshType",
    "PolyMesh",
    "TransformPointer",
]
