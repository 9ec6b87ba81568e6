"""PolyMesh tree nodes and the transform pointers that link them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from .mesh import MeshGeometry
from .metadata import DEFAULT_NAME, NAME_KEY, RUNTIME_CULLING_KEY, MeshMetadata
from .transform import Transform, compose
from ..errors import MetadataKeyError

if TYPE_CHECKING:
    from ..serialization.polymeta import PolyMeta


class MeshType(Enum):
    """What a PolyMesh holds: other meshes, geometry, or both."""

    GROUP = "Group"
    GEOMETRY = "Geometry"
    GEO_GROUP = "GeoGroup"


@dataclass
class TransformPointer:
    """An owned reference from a parent mesh to a child mesh.

    Each pointer exclusively owns its child; a mesh must never be reachable
    through two pointers of the same tree. A translation of None means zero.

    Attributes:
        path: Locator fragment (on disk) or opaque name (in memory) of the child
        mesh: The child mesh
        translation: Offset of the child from its parent
    """

    path: str
    mesh: PolyMesh
    translation: Transform | None = None

    def get_translation(self) -> Transform:
        """Return the translation, or the zero transform when unset."""
        if self.translation is None:
            return Transform.zero()
        return self.translation

    def new_from_transform(self, other: TransformPointer) -> TransformPointer:
        """Create a pointer to the same mesh, offset by another pointer.

        The path and mesh always come from self; only the translation of
        ``other`` is used.
        """
        return TransformPointer(
            path=self.path,
            mesh=self.mesh,
            translation=compose(self.get_translation(), other.get_translation()),
        )

    def new_from_transform_optional(
        self, other: TransformPointer | None
    ) -> TransformPointer:
        """Like new_from_transform(), but returns a plain copy when other is None."""
        if other is None:
            return TransformPointer(
                path=self.path,
                mesh=self.mesh,
                translation=self.translation.copy() if self.translation is not None else None,
            )
        return self.new_from_transform(other)

    compose_with = new_from_transform_optional


@dataclass
class PolyMesh:
    """A mesh that contains geometry, other meshes, or a mix of both.

    Example:
        root = PolyMesh(MeshType.GROUP)
        leaf = PolyMesh(MeshType.GEOMETRY, geometry=cube)
        leaf.set_name("cube")
        root.add_child(TransformPointer("/cube", leaf, Transform.from_list([1, 0, 0])))
    """

    mesh_type: MeshType
    geometry: MeshGeometry | None = None
    metadata: MeshMetadata = field(default_factory=MeshMetadata)
    children: list[TransformPointer] = field(default_factory=list)

    def add_metadata(self, key: str, value: str) -> None:
        """Add arbitrary data to the mesh."""
        self.metadata.set(key, value)

    def add_child(self, child: TransformPointer) -> TransformPointer:
        """Append a child pointer, preserving declaration order.

        Returns:
            The added pointer (for chaining)
        """
        if child.mesh is self:
            raise ValueError("A mesh cannot be its own child")
        self.children.append(child)
        return child

    def try_get_meta_field(self, key: str) -> str:
        """Look up a metadata value.

        Raises:
            MetadataKeyError: If the key is not present
        """
        return self.metadata.get(key)

    def get_name(self) -> str:
        """Return the mesh name, or "Unnamed" when none is set."""
        try:
            return self.try_get_meta_field(NAME_KEY)
        except MetadataKeyError:
            return DEFAULT_NAME

    def set_name(self, name: str) -> None:
        self.metadata.set(NAME_KEY, name)

    def uses_runtime_culling(self) -> bool:
        """Check if this mesh requests the beta runtime culling feature."""
        try:
            return self.try_get_meta_field(RUNTIME_CULLING_KEY) == "on"
        except MetadataKeyError:
            return False

    def enable_runtime_culling(self) -> None:
        self.metadata.set(RUNTIME_CULLING_KEY, "on")

    def contains_geometry(self) -> bool:
        """Check if the mesh carries renderable geometry.

        True for Geometry and GeoGroup meshes, and for any mesh with a payload.
        """
        return (
            self.mesh_type in (MeshType.GEOMETRY, MeshType.GEO_GROUP)
            or self.geometry is not None
        )

    def to_poly_meta(self) -> PolyMeta:
        """Convert this mesh into a PolyMeta descriptor.

        Child translations are copied as stored, so an unset translation
        stays unset.
        """
        from ..serialization.polymeta import (
            LATEST_POLY_META_VERSION,
            PolyChildReference,
            PolyMeta,
        )

        children = [
            PolyChildReference(
                path=child.path,
                translation=child.translation.copy() if child.translation is not None else None,
            )
            for child in self.children
        ]
        return PolyMeta(
            version=LATEST_POLY_META_VERSION,
            mesh_type=self.mesh_type,
            metadata=self.metadata.to_dict(),
            children=children,
        )

    def iter_nodes(self, include_self: bool = True) -> Iterator[PolyMesh]:
        """Iterate over this mesh and all descendants (pre-order).

        Args:
            include_self: Whether to include this mesh in the iteration

        Yields:
            PolyMesh instances
        """
        if include_self:
            yield self
        for child in self.children:
            yield from child.mesh.iter_nodes(include_self=True)

    def find(self, name: str) -> PolyMesh | None:
        """Find the first mesh in this subtree with the given name."""
        for node in self.iter_nodes():
            if node.get_name() == name:
                return node
        return None

    def __repr__(self) -> str:
        geo_str = f", geometry={self.geometry.face_count}f" if self.geometry else ""
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"PolyMesh({self.get_name()!r}, {self.mesh_type.value}{geo_str}{children_str})"
