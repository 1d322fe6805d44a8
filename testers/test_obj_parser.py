# -*- coding: utf-8 -*-
import pytest

from objmesh.resources.obj_parser import ObjParser

TRIANGLE = """
    v 0 0 0
    v 1 0 0
    v 0 1 0
    vt 0.5 0.5
    vn 0 0 1
"""


def _parse(write_file, body, **kwargs):
    return ObjParser(**kwargs).parse(write_file("m.obj", TRIANGLE + body))


def test_raw_arrays_and_face_record(write_file):
    session = _parse(write_file, "f 1/1/1 2/1/1 3/1/1\n")

    assert session.positions == [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    assert session.texcoords == [(0.5, 0.5)]
    assert session.normals == [(0.0, 0.0, 1.0)]
    assert len(session.faces) == 1
    face = session.faces[0]
    assert face.corners == ((1, 1, 1), (2, 1, 1), (3, 1, 1))
    assert face.material is None
    assert face.line == 6
    assert len(session.diagnostics) == 0


@pytest.mark.parametrize("line, corners", [
    ("f 1/1/1 2/1/1 3/1/1", ((1, 1, 1), (2, 1, 1), (3, 1, 1))),
    ("f 1//1 2//1 3//1", ((1, None, 1), (2, None, 1), (3, None, 1))),
    ("f 1 2 3", ((1, None, None), (2, None, None), (3, None, None))),
])
def test_face_grammars(line, corners):
    assert ObjParser.match_corners(line.split()[1:]) == corners


def test_explicit_zero_is_not_an_omitted_slot():
    corners = ObjParser.match_corners(["1/0/0", "2/0/0", "3/0/0"])
    assert corners == ((1, 0, 0), (2, 0, 0), (3, 0, 0))


@pytest.mark.parametrize("tokens", [
    ["1/1", "2/1", "3/1"],          # v/vt не поддерживается
    ["1/1/1", "2//1", "3"],         # смешанные форматы
    ["a", "b", "c"],
])
def test_invalid_corner_tokens(tokens):
    assert ObjParser.match_corners(tokens) is None


def test_quad_is_not_triangulated(write_file):
    session = _parse(write_file, "v 1 1 0\nf 1 2 3 4\n")

    assert session.faces == []
    assert len(session.diagnostics.matching("not been triangulated")) == 1


def test_two_corner_face_is_rejected(write_file):
    session = _parse(write_file, "f 1 2\n")
    assert session.faces == []
    assert session.diagnostics.matching("not been triangulated")


def test_invalid_face_is_dropped(write_file):
    session = _parse(write_file, "f 1/1 2/1 3/1\nf 1 2 3\n")

    assert len(session.faces) == 1
    assert [d.message for d in session.diagnostics] == ["Invalid face"]


@pytest.mark.parametrize("line, message", [
    ("v 1 2", "Invalid vertex"),
    ("v 1 x 3", "Invalid vertex"),
    ("vt 0.5", "Invalid texture coordinate"),
    ("vn 0 1", "Invalid vertex normal"),
])
def test_malformed_attributes_are_skipped(write_file, line, message):
    session = _parse(write_file, line + "\n")

    assert len(session.positions) == 3
    assert len(session.texcoords) == 1
    assert len(session.normals) == 1
    assert [(d.line, d.message) for d in session.diagnostics] == [(6, message)]


def test_ignored_and_unsupported_lines(write_file):
    session = _parse(write_file, """
        # comment
        g group
        o object
        s 1
        curv 0 1 1 2
        f 1 2 3
    """)

    assert len(session.faces) == 1
    # `o` не входит в список пропускаемых – объекты не моделируются
    assert [d.message for d in session.diagnostics] == [
        "Unsupported OBJ declaration",
        "Unsupported OBJ declaration",
    ]


def test_extra_fields_are_ignored(write_file):
    session = _parse(write_file, "v 1 2 3 1.0\nvt 0.1 0.2 0.0\n")
    assert session.positions[-1] == (1.0, 2.0, 3.0)
    assert session.texcoords[-1] == pytest.approx((0.1, 0.2))
    assert len(session.diagnostics) == 0


def test_long_line_is_truncated(write_file):
    session = _parse(write_file, "v 1 2 3" + " " * 300 + "\n", max_line_length=254)
    assert session.positions[-1] == (1.0, 2.0, 3.0)
    assert len(session.diagnostics.matching("truncated")) == 1


def test_mtllib_and_usemtl(write_file):
    write_file("mats.mtl", "newmtl red\nKd 1 0 0\n")
    write_file("more.mtl", "newmtl blue\nKd 0 0 1\n")
    session = _parse(write_file, """
        mtllib mats.mtl more.mtl
        f 1 2 3
        usemtl red
        f 1 2 3
        usemtl blue
        f 1 2 3
    """)

    assert set(session.materials) == {"red", "blue"}
    assert [f.material.name if f.material else None for f in session.faces] == [
        None, "red", "blue",
    ]
    assert len(session.diagnostics) == 0


def test_undefined_material_falls_back_to_default(write_file):
    session = _parse(write_file, """
        usemtl ghost
        f 1/1/1 2/1/1 3/1/1
    """)

    assert len(session.diagnostics) == 1
    assert "ghost is not defined" in next(iter(session.diagnostics)).message
    mat = session.faces[0].material
    assert mat is session.default_material
    assert "ghost" not in session.materials
    assert mat.ambient.to_tuple() == pytest.approx((0.2, 0.2, 0.2, 1.0))
    assert mat.diffuse.to_tuple() == pytest.approx((0.8, 0.8, 0.8, 1.0))
    assert mat.specular.to_tuple() == pytest.approx((1.0, 1.0, 1.0, 1.0))
    assert mat.shininess == 0.0


def test_mtl_diagnostics_name_the_mtl_file(write_file):
    mtl = write_file("mats.mtl", "Kd 1 0 0\n")
    session = _parse(write_file, "mtllib mats.mtl\nfoo\n")

    files = [(d.file, d.line) for d in session.diagnostics]
    assert files == [(str(mtl), 1), (str(session.path), 7)]


def test_missing_obj_raises(tmp_path):
    with pytest.raises(OSError):
        ObjParser().parse(tmp_path / "missing.obj")


def test_missing_mtllib_raises(write_file):
    with pytest.raises(OSError):
        _parse(write_file, "mtllib nowhere.mtl\n")
