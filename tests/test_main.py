"""Tests for the command line entry point."""

from polymesh.main import main


def test_lists_flat_meshes(tree_on_disk, capsys):
    assert main([str(tree_on_disk)]) == 0
    out = capsys.readouterr().out
    assert "root (Group, version 1)" in out
    assert "Flattened into 1 mesh(es)" in out
    assert "- leaf (3 vertices, 1 faces)" in out


def test_export(tree_on_disk, tmp_path, capsys):
    output = tmp_path / "flat.stl"
    assert main([str(tree_on_disk), "--export", str(output)]) == 0
    assert output.exists()
    assert output.stat().st_size > 0


def test_load_failure_returns_error(tmp_path):
    assert main([str(tmp_path / "missing")]) == 1


def test_config_file(tree_on_disk, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("max_depth: 1\n")
    # Leaf is two levels down
    assert main([str(tree_on_disk), "--config", str(config)]) == 1


def test_missing_config_file(tree_on_disk, tmp_path):
    assert main([str(tree_on_disk), "--config", str(tmp_path / "missing.yaml")]) == 1


def test_bad_config_file(tree_on_disk, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("max_depth: [1\n")
    assert main([str(tree_on_disk), "--config", str(config)]) == 1

    config.write_text("colour: red\n")
    assert main([str(tree_on_disk), "--config", str(config)]) == 1


def test_non_utf8_descriptor_exits_cleanly(tree_on_disk):
    (tree_on_disk / "polymeta.json").write_bytes(b"\xff\xfe")
    assert main([str(tree_on_disk)]) == 1
