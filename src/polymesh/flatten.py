"""Flattening of PolyMesh trees into absolutely positioned geometry.

Two separate traversals live here:

- build_tree() loads a tree from storage and bakes each leaf's absolute
  translation into its geometry while loading.
- flatten_geometry() walks a tree that is already in memory and repositions
  the geometry found at every node.

Both are pre-order, children in declaration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from .config import PolyMeshConfig
from .core.mesh import MeshGeometry
from .core.metadata import MeshMetadata
from .core.node import PolyMesh, TransformPointer
from .core.transform import Transform
from .errors import DescriptorLoadError
from .serialization.polymeta import PolyMeta
from .storage import DirectoryStore, MeshStore, child_locator

logger = logging.getLogger(__name__)


@dataclass
class FlatPolyMesh:
    """Result of build_tree(): the root descriptor and every leaf mesh.

    Unpacks as ``root_meta, flat_meshes``.
    """

    root_meta: PolyMeta
    flat_meshes: list[PolyMesh] = field(default_factory=list)

    def __iter__(self) -> Iterator:
        yield self.root_meta
        yield self.flat_meshes

    def __len__(self) -> int:
        return len(self.flat_meshes)


def build_tree(
    root_locator: str,
    store: MeshStore | None = None,
    config: PolyMeshConfig | None = None,
) -> FlatPolyMesh:
    """Load a tree from storage and collect its leaves in root space.

    Any load failure aborts the whole build; no partial result is returned.

    Args:
        root_locator: Locator of the root mesh
        store: Where to load from. Defaults to a DirectoryStore.
        config: Settings (max_depth, file names). Defaults to PolyMeshConfig().

    Returns:
        FlatPolyMesh with the root descriptor and the leaves in pre-order

    Raises:
        DescriptorLoadError: If a descriptor cannot be loaded, or the tree
            is nested deeper than config.max_depth
        GeometryLoadError: If a leaf's geometry cannot be loaded
    """
    config = config or PolyMeshConfig()
    if store is None:
        store = DirectoryStore(config)

    root_meta = store.load_group_descriptor(root_locator)
    flat_meshes = _collect_meshes(
        store, root_locator, root_meta, Transform.zero(), 0, config.max_depth
    )

    logger.info("Built %d mesh(es) from %s", len(flat_meshes), root_locator)
    return FlatPolyMesh(root_meta=root_meta, flat_meshes=flat_meshes)


def _collect_meshes(
    store: MeshStore,
    locator: str,
    meta: PolyMeta,
    transform: Transform,
    depth: int,
    max_depth: int,
) -> list[PolyMesh]:
    if depth > max_depth:
        raise DescriptorLoadError(
            f"Mesh tree at {locator} is nested deeper than max_depth={max_depth}"
        )

    # Anything but a pure group is a leaf
    if not meta.group:
        geometry = store.load_geometry(locator)
        leaf = PolyMesh(
            mesh_type=meta.mesh_type,
            geometry=geometry.transformed_by(transform),
            metadata=MeshMetadata.from_dict(meta.metadata),
        )
        return [leaf]

    output: list[PolyMesh] = []
    for child in meta.children:
        new_locator = child_locator(locator, child.path)
        child_meta = store.load_group_descriptor(new_locator)
        new_transform = transform + child.get_translation()
        output.extend(
            _collect_meshes(store, new_locator, child_meta, new_transform, depth + 1, max_depth)
        )
    return output


def flatten_geometry(root: PolyMesh) -> list[MeshGeometry]:
    """Collect every geometry payload below root, positioned in root space.

    The root's own geometry is not included; only meshes reached through
    child pointers are.

    Args:
        root: Root of an in-memory tree whose pointers hold local translations

    Returns:
        Repositioned copies of the geometry, pre-order
    """
    all_geo: list[MeshGeometry] = []
    _flatten_recursive(root, None, all_geo)
    logger.debug("Flattened %d geometry payload(s) from %r", len(all_geo), root)
    return all_geo


def _flatten_recursive(
    mesh: PolyMesh,
    parent: TransformPointer | None,
    all_geo: list[MeshGeometry],
) -> None:
    for child in mesh.children:
        # Child pointer with its translation made absolute from the root
        abs_child = child.new_from_transform_optional(parent)
        child_mesh = abs_child.mesh

        if child_mesh.contains_geometry():
            if child_mesh.geometry is None:
                logger.warning(
                    "Mesh %r at %s is %s but has no geometry; skipping",
                    child_mesh.get_name(),
                    abs_child.path,
                    child_mesh.mesh_type.value,
                )
            else:
                all_geo.append(child_mesh.geometry.transformed_by(abs_child.get_translation()))

        _flatten_recursive(child_mesh, abs_child, all_geo)
