"""Hierarchical mesh trees with translation-only transforms."""

__version__ = "0.1.0"

from .core import (
    MeshGeometry,
    MeshMetadata,
    MeshType,
    PolyMesh,
    Transform,
    TransformPointer,
    compose,
)
from .errors import DescriptorLoadError, GeometryLoadError, MetadataKeyError, PolyMeshError
from .flatten import FlatPolyMesh, build_tree, flatten_geometry
from .serialization import LATEST_POLY_META_VERSION, PolyChildReference, PolyMeta
from .storage import DirectoryStore, MeshStore

__all__ = [
    "MeshGeometry",
    "MeshMetadata",
    "MeshType",
    "PolyMesh",
    "Transform",
    "TransformPointer",
    "compose",
    "DescriptorLoadError",
    "GeometryLoadError",
    "MetadataKeyError",
    "PolyMeshError",
    "FlatPolyMesh",
    "build_tree",
    "flatten_geometry",
    "LATEST_POLY_META_VERSION",
    "PolyChildReference",
    "PolyMeta",
    "DirectoryStore",
    "MeshStore",
]
