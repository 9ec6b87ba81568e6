"""Exceptions raised while loading and querying mesh trees."""


class PolyMeshError(Exception):
    """Base class for polymesh errors."""

    pass


class DescriptorLoadError(PolyMeshError):
    """Raised when a group descriptor is missing, unreadable or malformed."""

    pass


class GeometryLoadError(PolyMeshError):
    """Raised when a geometry payload is missing, unreadable or malformed."""

    pass


class MetadataKeyError(PolyMeshError, KeyError):
    """Raised when a metadata key is not present on a mesh."""

    pass
