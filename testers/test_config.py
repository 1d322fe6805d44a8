# -*- coding: utf-8 -*-
import json

from objmesh.utils.config import DEFAULT_CONFIG, Config


def test_missing_file_gives_defaults(tmp_path):
    cfg = Config(tmp_path / "none.json")
    assert cfg["max_line_length"] == 254
    assert cfg["compute_missing_normals"] is True
    assert not (tmp_path / "none.json").exists()


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"max_line_length": 80}), encoding="utf-8")
    cfg = Config(path)
    assert cfg["max_line_length"] == 80
    assert cfg["log_level"] == DEFAULT_CONFIG["log_level"]


def test_broken_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text("{not json", encoding="utf-8")
    assert Config(path).data == DEFAULT_CONFIG


def test_save_round_trip(tmp_path):
    path = tmp_path / "objmesh.json"
    cfg = Config(path, data={"search_paths": ["textures"]})
    cfg.save()
    assert Config(path)["search_paths"] == ["textures"]


def test_defaults_are_not_shared(tmp_path):
    cfg = Config(data={})
    cfg["search_paths"].append("x")
    assert DEFAULT_CONFIG["search_paths"] == []
