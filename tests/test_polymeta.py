"""Tests for descriptor and geometry file formats."""

import json

import numpy as np
import pytest

from polymesh import (
    DescriptorLoadError,
    GeometryLoadError,
    LATEST_POLY_META_VERSION,
    MeshType,
    PolyChildReference,
    PolyMeta,
    Transform,
)
from polymesh.serialization import (
    mesh_from_dict,
    mesh_from_file,
    parse_poly_meta,
    write_mesh,
    write_poly_meta,
)

from conftest import make_triangle


def test_poly_meta_file_round_trip(tmp_path):
    meta = PolyMeta(
        mesh_type=MeshType.GROUP,
        metadata={"name": "scene"},
        children=[
            PolyChildReference("/a", Transform.from_list([1, 2, 3])),
            PolyChildReference("/b", None),
            PolyChildReference("/c", Transform.zero()),
        ],
    )
    path = tmp_path / "polymeta.json"
    write_poly_meta(meta, path)

    loaded = parse_poly_meta(path)

    assert loaded == meta
    # Unset and zero translations stay distinct
    assert loaded.children[1].translation is None
    assert loaded.children[2].translation == Transform.zero()


def test_poly_meta_json_shape():
    meta = PolyMeta(mesh_type=MeshType.GEO_GROUP, children=[PolyChildReference("/x")])
    assert meta.to_dict() == {
        "version": LATEST_POLY_META_VERSION,
        "mesh_type": "GeoGroup",
        "metadata": {},
        "children": [{"path": "/x", "translation": None}],
    }


def test_missing_translation_key_is_unset():
    meta = PolyMeta.from_dict({"mesh_type": "Group", "children": [{"path": "/a"}]})
    assert meta.children[0].translation is None
    assert meta.children[0].get_translation() == Transform.zero()


def test_group_property():
    assert PolyMeta(mesh_type=MeshType.GROUP).group
    assert not PolyMeta(mesh_type=MeshType.GEOMETRY).group
    assert not PolyMeta(mesh_type=MeshType.GEO_GROUP).group


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"mesh_type": "Blob"},
        {"children": []},
        {"mesh_type": "Group", "children": [{"translation": [0, 0, 0]}]},
        {"mesh_type": "Group", "children": [{"path": "/a", "translation": [0, 0]}]},
        {"mesh_type": "Group", "version": LATEST_POLY_META_VERSION + 1},
        {"mesh_type": "Group", "metadata": {"name": None}},
        {"mesh_type": "Group", "metadata": {"lod": 2}},
        {"mesh_type": "Group", "metadata": ["name"]},
        {"mesh_type": "Group", "children": [{"path": None}]},
        {"mesh_type": "Group", "children": [{"path": 3}]},
    ],
)
def test_malformed_descriptor(data):
    with pytest.raises(DescriptorLoadError):
        PolyMeta.from_dict(data)


def test_unreadable_descriptor(tmp_path):
    with pytest.raises(DescriptorLoadError):
        parse_poly_meta(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(DescriptorLoadError):
        parse_poly_meta(bad)


def test_geometry_file_round_trip(tmp_path):
    mesh = make_triangle((1, 2, 3))
    mesh.uvs = np.array([[0, 0], [1, 0], [0, 1]], dtype=np.float64)
    path = tmp_path / "mesh.json"
    write_mesh(mesh, path)

    assert mesh_from_file(path) == mesh


def test_geometry_errors(tmp_path):
    with pytest.raises(GeometryLoadError):
        mesh_from_file(tmp_path / "missing.json")

    with pytest.raises(GeometryLoadError):
        mesh_from_dict({"faces": [[0, 1, 2]]})

    with pytest.raises(GeometryLoadError):
        mesh_from_dict({"vertices": [[0, 0, 0]], "faces": [[0, 1, 2]]})

    bad = tmp_path / "mesh.json"
    bad.write_text(json.dumps({"vertices": "nope", "faces": []}))
    with pytest.raises(GeometryLoadError):
        mesh_from_file(bad)


def test_non_utf8_files(tmp_path):
    descriptor = tmp_path / "polymeta.json"
    descriptor.write_bytes(b'{"mesh_type": "\xff\xfe"}')
    with pytest.raises(DescriptorLoadError):
        parse_poly_meta(descriptor)

    geometry = tmp_path / "mesh.json"
    geometry.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(GeometryLoadError):
        mesh_from_file(geometry)
