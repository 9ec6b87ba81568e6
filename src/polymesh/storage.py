"""Storage backends that provide descriptors and geometry by locator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from .config import PolyMeshConfig
from .core.mesh import MeshGeometry
from .core.node import PolyMesh
from .serialization.geometry import mesh_from_file, write_mesh
from .serialization.polymeta import PolyMeta, parse_poly_meta, write_poly_meta

logger = logging.getLogger(__name__)


def child_locator(parent: str, path: str) -> str:
    """Build a child locator by appending the child's path to its parent's.

    No normalization is done; child paths conventionally start with "/".
    """
    return f"{parent}{path}"


@runtime_checkable
class MeshStore(Protocol):
    """Protocol for anything that can load descriptors and geometry.

    Implementations raise DescriptorLoadError / GeometryLoadError on failure.
    """

    def load_group_descriptor(self, locator: str) -> PolyMeta:
        """Load the descriptor stored at a locator."""
        ...

    def load_geometry(self, locator: str) -> MeshGeometry:
        """Load the geometry payload stored at a locator."""
        ...


class DirectoryStore:
    """Reads and writes polymesh trees laid out as nested directories.

    Layout:
        root/polymeta.json
        root/mesh.json          (non-group meshes only)
        root/<child path>/...   (one directory per child)
    """

    def __init__(self, config: PolyMeshConfig | None = None) -> None:
        self.config = config or PolyMeshConfig()

    def descriptor_path(self, locator: str) -> Path:
        return Path(f"{locator}/{self.config.descriptor_filename}")

    def geometry_path(self, locator: str) -> Path:
        return Path(f"{locator}/{self.config.geometry_filename}")

    def load_group_descriptor(self, locator: str) -> PolyMeta:
        path = self.descriptor_path(locator)
        logger.debug("Loading descriptor %s", path)
        return parse_poly_meta(path)

    def load_geometry(self, locator: str) -> MeshGeometry:
        path = self.geometry_path(locator)
        logger.debug("Loading geometry %s", path)
        return mesh_from_file(path)

    def save_tree(self, root: PolyMesh, locator: str) -> None:
        """Write a mesh and all of its descendants under a locator.

        Every mesh gets a descriptor; meshes with a geometry payload also
        get a geometry file. Child directories are created as needed.
        """
        Path(locator).mkdir(parents=True, exist_ok=True)
        write_poly_meta(root.to_poly_meta(), self.descriptor_path(locator))
        if root.geometry is not None:
            write_mesh(root.geometry, self.geometry_path(locator))

        for child in root.children:
            self.save_tree(child.mesh, child_locator(locator, child.path))

        logger.debug("Saved %s to %s", root.get_name(), locator)
