"""Command line entry point for polymesh."""

import argparse
import logging
from pathlib import Path

import yaml

from .config import PolyMeshConfig
from .core.mesh import MeshGeometry
from .errors import PolyMeshError
from .flatten import build_tree
from .logging_config import setup_logging
from .storage import DirectoryStore

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="PolyMesh - flatten hierarchical mesh directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "root",
        metavar="ROOT",
        help="Directory holding the root polymeta.json",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help="YAML configuration file",
    )
    parser.add_argument(
        "-e", "--export",
        metavar="PATH",
        help="Export the flattened geometry as one mesh (format from suffix, e.g. .obj, .glb, .stl)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Build a tree from disk, list its meshes and optionally export them."""
    args = parse_args(argv)

    try:
        config = PolyMeshConfig.from_yaml(args.config) if args.config else PolyMeshConfig()
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        logger.error("Failed to read config %s: %s", args.config, e)
        return 1

    setup_logging(logging.DEBUG if args.verbose else config.log_level)

    try:
        root_meta, flat_meshes = build_tree(args.root, DirectoryStore(config), config)
    except PolyMeshError as e:
        logger.error("Failed to load %s: %s", args.root, e)
        return 1

    root_name = root_meta.metadata.get("name", "Unnamed")
    print(f"{root_name} ({root_meta.mesh_type.value}, version {root_meta.version})")
    print(f"Flattened into {len(flat_meshes)} mesh(es):")
    for mesh in flat_meshes:
        culling = " [runtime culling]" if mesh.uses_runtime_culling() else ""
        geo = mesh.geometry
        print(f"  - {mesh.get_name()} ({geo.vertex_count} vertices, {geo.face_count} faces){culling}")

    if args.export:
        output_path = Path(args.export)
        merged = MeshGeometry.merge([m.geometry for m in flat_meshes])
        merged.to_trimesh().export(str(output_path))
        print(f"Exported {merged.face_count} faces to {output_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
