# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objmesh import Config, ObjParseError, parse_file
from objmesh.__main__ import main

from conftest import QUAD, TEXTURED


def test_parse_file(obj_file, tmp_path):
    path = obj_file(QUAD, name="quad.obj")
    mesh = parse_file(path, config=Config(tmp_path / "none.json"))
    assert mesh.name == "quad"
    assert mesh.triangles.tolist() == [[0, 1, 2], [0, 2, 3]]
    assert not mesh.is_shared


def test_parse_file_takes_storage_mode_from_config(obj_file, tmp_path):
    cfg = Config(tmp_path / "none.json")
    cfg["shared"] = True
    mesh = parse_file(obj_file(QUAD), config=cfg)
    assert mesh.is_shared
    assert not parse_file(obj_file(QUAD), shared=False, config=cfg).is_shared


def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "nonexistent.obj")


def test_parse_file_propagates_fatal_errors(obj_file, tmp_path):
    with pytest.raises(ObjParseError) as info:
        parse_file(obj_file("v 1 2\n"), config=Config(tmp_path / "none.json"))
    assert info.value.line == 0


def test_cli_prints_summary(obj_file, tmp_path, capsys):
    path = obj_file(TEXTURED, name="square.obj")
    assert main([str(path), "--config", str(tmp_path / "none.json"), "-q"]) == 0
    out = capsys.readouterr().out
    assert "square: 4 vertices, 2 triangles" in out
    assert "normals=yes" in out and "texcoords=yes" in out
    assert "storage=exclusive" in out


def test_cli_writes_npz(obj_file, tmp_path):
    path = obj_file(TEXTURED)
    out = tmp_path / "buffers.npz"
    assert main([str(path), "--shared", "--config", str(tmp_path / "none.json"),
                 "-o", str(out), "-q"]) == 0
    data = np.load(out)
    assert sorted(data.files) == ["normals", "positions", "texcoords", "triangles"]
    assert data["triangles"].tolist() == [[0, 1, 2], [1, 3, 2]]


def test_cli_reports_parse_error(obj_file, tmp_path, capsys):
    path = obj_file("v 0 0 0\nf 1 2\n")
    assert main([str(path), "--config", str(tmp_path / "none.json"), "-q"]) == 1
    assert "At line 1: faces must have at least 3 vertices." in capsys.readouterr().err


def test_cli_reports_undecodable_file(tmp_path, capsys):
    path = tmp_path / "broken.obj"
    path.write_bytes(b"v 0 0 0\nv \xff\xfe 0 0\n")
    assert main([str(path), "--config", str(tmp_path / "none.json"), "-q"]) == 1
    assert "error:" in capsys.readouterr().err


def test_cli_reports_directory_path(tmp_path, capsys):
    assert main([str(tmp_path), "--config", str(tmp_path / "none.json"), "-q"]) == 1
    assert "Not a regular file" in capsys.readouterr().err


def test_parse_file_rejects_directory(tmp_path):
    with pytest.raises(IsADirectoryError):
        parse_file(tmp_path)
