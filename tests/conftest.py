"""Pytest fixtures for polymesh tests."""

from pathlib import Path

import numpy as np
import pytest

from polymesh import (
    DescriptorLoadError,
    GeometryLoadError,
    MeshGeometry,
    MeshType,
    PolyMesh,
    PolyMeta,
    Transform,
    TransformPointer,
)
from polymesh.storage import DirectoryStore


def make_triangle(offset=(0.0, 0.0, 0.0)) -> MeshGeometry:
    """A single triangle whose first vertex sits at offset."""
    base = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    return MeshGeometry(
        vertices=base + np.asarray(offset, dtype=np.float64),
        faces=np.array([[0, 1, 2]]),
    )


def pointer(path: str, mesh: PolyMesh, translation=None) -> TransformPointer:
    """Shorthand for a TransformPointer with a list translation."""
    return TransformPointer(
        path=path,
        mesh=mesh,
        translation=Transform.from_list(translation) if translation is not None else None,
    )


def leaf(name: str, geometry: MeshGeometry) -> PolyMesh:
    mesh = PolyMesh(MeshType.GEOMETRY, geometry=geometry)
    mesh.set_name(name)
    return mesh


def group(name: str) -> PolyMesh:
    mesh = PolyMesh(MeshType.GROUP)
    mesh.set_name(name)
    return mesh


class MemoryStore:
    """In-memory MeshStore keyed by locator, recording every load."""

    def __init__(self) -> None:
        self.descriptors: dict[str, PolyMeta] = {}
        self.geometry: dict[str, MeshGeometry] = {}
        self.loads: list[str] = []

    def load_group_descriptor(self, locator: str) -> PolyMeta:
        self.loads.append(locator)
        try:
            return self.descriptors[locator]
        except KeyError:
            raise DescriptorLoadError(f"No descriptor at {locator}") from None

    def load_geometry(self, locator: str) -> MeshGeometry:
        self.loads.append(locator)
        try:
            return self.geometry[locator]
        except KeyError:
            raise GeometryLoadError(f"No geometry at {locator}") from None

    def add_tree(self, root: PolyMesh, locator: str) -> None:
        self.descriptors[locator] = root.to_poly_meta()
        if root.geometry is not None:
            self.geometry[locator] = root.geometry
        for child in root.children:
            self.add_tree(child.mesh, f"{locator}{child.path}")


@pytest.fixture
def triangle() -> MeshGeometry:
    return make_triangle()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def two_level_tree() -> PolyMesh:
    """Root group -> group (1,0,0) -> geometry leaf (0,2,0)."""
    root = group("root")
    middle = group("middle")
    middle.add_child(pointer("/leaf", leaf("leaf", make_triangle()), [0, 2, 0]))
    root.add_child(pointer("/middle", middle, [1, 0, 0]))
    return root


@pytest.fixture
def tree_on_disk(tmp_path: Path, two_level_tree: PolyMesh) -> Path:
    """two_level_tree written to a directory."""
    root_dir = tmp_path / "scene"
    DirectoryStore().save_tree(two_level_tree, str(root_dir))
    return root_dir
