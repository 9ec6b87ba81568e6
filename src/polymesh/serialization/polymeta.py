"""PolyMeta descriptors: the geometry-free summary of a mesh.

File format (``polymeta.json``):

```json
{
  "version": 1,
  "mesh_type": "Group",
  "metadata": {"name": "table"},
  "children": [
    {"path": "/top", "translation": [0.0, 0.75, 0.0]},
    {"path": "/leg", "translation": null}
  ]
}
```

A missing or null translation is read back as None, so the difference
between "unset" and "zero" survives a round trip.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from ..core.node import MeshType
from ..core.transform import Transform
from ..errors import DescriptorLoadError

LATEST_POLY_META_VERSION = 1


@dataclass
class PolyChildReference:
    """Reference from a descriptor to one of its children."""

    path: str
    translation: Transform | None = None

    def get_translation(self) -> Transform:
        if self.translation is None:
            return Transform.zero()
        return self.translation

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "translation": self.translation.to_list() if self.translation is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        path = data["path"]
        if not isinstance(path, str):
            raise DescriptorLoadError(f"Child path must be a string, got {path!r}")
        translation = data.get("translation")
        return cls(
            path=path,
            translation=Transform.from_list(translation) if translation is not None else None,
        )


@dataclass
class PolyMeta:
    """Descriptor of a mesh's type, metadata and child topology."""

    version: int = LATEST_POLY_META_VERSION
    mesh_type: MeshType = MeshType.GROUP
    metadata: dict[str, str] = field(default_factory=dict)
    children: list[PolyChildReference] = field(default_factory=list)

    @property
    def group(self) -> bool:
        """True when this descriptor is a pure group."""
        return self.mesh_type is MeshType.GROUP

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "mesh_type": self.mesh_type.value,
            "metadata": dict(self.metadata),
            "children": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Parse a descriptor from decoded JSON.

        Raises:
            DescriptorLoadError: If fields are missing, mistyped, or the
                version is newer than this library understands
        """
        if not isinstance(data, dict):
            raise DescriptorLoadError(f"Descriptor must be an object, got {type(data).__name__}")

        version = data.get("version", LATEST_POLY_META_VERSION)
        if not isinstance(version, int) or version > LATEST_POLY_META_VERSION:
            raise DescriptorLoadError(
                f"Unsupported descriptor version {version!r} "
                f"(latest supported: {LATEST_POLY_META_VERSION})"
            )

        try:
            mesh_type = MeshType(data["mesh_type"])
            metadata = _parse_metadata(data.get("metadata") or {})
            children = [PolyChildReference.from_dict(c) for c in data.get("children") or []]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DescriptorLoadError(f"Malformed descriptor: {e}") from e

        return cls(version=version, mesh_type=mesh_type, metadata=metadata, children=children)


def _parse_metadata(data: dict[str, Any]) -> dict[str, str]:
    metadata = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise DescriptorLoadError(f"Metadata entries must be strings, got {key!r}: {value!r}")
        metadata[key] = value
    return metadata


def parse_poly_meta(path: str | Path) -> PolyMeta:
    """Load a descriptor from a JSON file.

    Raises:
        DescriptorLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise DescriptorLoadError(f"Failed to read descriptor {path}: {e}") from e

    try:
        return PolyMeta.from_dict(data)
    except DescriptorLoadError as e:
        raise DescriptorLoadError(f"{path}: {e}") from e


def write_poly_meta(meta: PolyMeta, path: str | Path) -> None:
    """Write a descriptor to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(meta.to_dict(), f, indent=2)
