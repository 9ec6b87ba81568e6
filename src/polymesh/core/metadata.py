"""Typed mesh metadata with reserved keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Self

from ..errors import MetadataKeyError

NAME_KEY = "name"
RUNTIME_CULLING_KEY = "_beta_runtime_culling"
RUNTIME_CULLING_ON = "on"
DEFAULT_NAME = "Unnamed"


@dataclass
class MeshMetadata:
    """Metadata attached to a mesh.

    The two reserved keys get typed fields; every other key is kept as a
    plain string in ``extra`` so unknown keys survive a round trip.

    Attributes:
        name: Display name, or None when unset
        runtime_culling: Whether the beta runtime culling feature is requested
        extra: Any other string metadata
    """

    name: str | None = None
    runtime_culling: bool = False
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> Self:
        """Create metadata from a flat string map."""
        metadata = cls()
        for key, value in data.items():
            metadata.set(key, value)
        return metadata

    def to_dict(self) -> dict[str, str]:
        """Convert to a flat string map."""
        data = dict(self.extra)
        if self.name is not None:
            data[NAME_KEY] = self.name
        if self.runtime_culling:
            data[RUNTIME_CULLING_KEY] = RUNTIME_CULLING_ON
        return data

    def get(self, key: str) -> str:
        """Look up a metadata value.

        Raises:
            MetadataKeyError: If the key is not present
        """
        if key == NAME_KEY and self.name is not None:
            return self.name
        if key == RUNTIME_CULLING_KEY and self.runtime_culling:
            return RUNTIME_CULLING_ON
        try:
            return self.extra[key]
        except KeyError:
            raise MetadataKeyError(key) from None

    def set(self, key: str, value: str) -> None:
        """Set a metadata value, routing reserved keys to typed fields."""
        value = str(value)
        if key == NAME_KEY:
            self.name = value
        elif key == RUNTIME_CULLING_KEY and value == RUNTIME_CULLING_ON:
            self.runtime_culling = True
            self.extra.pop(key, None)
        else:
            if key == RUNTIME_CULLING_KEY:
                # Any value but "on" disables the flag but is kept verbatim
                self.runtime_culling = False
            self.extra[key] = value

    def __contains__(self, key: str) -> bool:
        try:
            self.get(key)
        except MetadataKeyError:
            return False
        return True

    def copy(self) -> MeshMetadata:
        return MeshMetadata(
            name=self.name,
            runtime_culling=self.runtime_culling,
            extra=dict(self.extra),
        )
