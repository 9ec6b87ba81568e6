"""On-disk JSON formats for descriptors and geometry."""

from .geometry import mesh_from_dict, mesh_from_file, mesh_to_dict, write_mesh
from .polymeta import (
    LATEST_POLY_META_VERSION,
    PolyChildReference,
    PolyMeta,
    parse_poly_meta,
    write_poly_meta,
)

__all__ = [
    "LATEST_POLY_META_VERSION",
    "PolyChildReference",
    "PolyMeta",
    "parse_poly_meta",
    "write_poly_meta",
    "mesh_from_dict",
    "mesh_from_file",
    "mesh_to_dict",
    "write_mesh",
]
