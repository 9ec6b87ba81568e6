"""Library configuration loaded from YAML."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Union

import yaml


@dataclass
class PolyMeshConfig:
    """Settings for reading polymesh directories.

    YAML format:
    ```yaml
    descriptor_filename: polymeta.json
    geometry_filename: mesh.json
    max_depth: 128
    log_level: INFO
    ```
    """

    descriptor_filename: str = "polymeta.json"
    geometry_filename: str = "mesh.json"
    max_depth: int = 128  # deepest descriptor nesting the builder will follow
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "PolyMeshConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            PolyMeshConfig instance.
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PolyMeshConfig":
        """Create configuration from a dictionary.

        Raises:
            ValueError: On unknown keys or a non-positive max_depth.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = cls(**data)
        if config.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {config.max_depth}")
        return config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
