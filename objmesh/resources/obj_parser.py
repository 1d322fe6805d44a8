# -*- coding: utf-8 -*-
"""
Однопроходный построчный парсер Wavefront OBJ.

Собирает «сырые» массивы позиций/нормалей/texcoords, список
FaceRecord‑ов (индексы как в файле, 1‑based) и таблицу материалов.
Сами индексы здесь не разрешаются – этим занимается `repack`.

Поддерживаемые форматы граней (только треугольники)::

    f 1/2/3 4/5/6 7/8/9     # позиция/texcoord/нормаль
    f 1//3 4//6 7//9        # без texcoord
    f 1 4 7                 # только позиции
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple, Optional

from objmesh.assets.material import Material
from objmesh.assets.material_library import MaterialLibraryParser
from objmesh.utils.diagnostics import DiagnosticLog
from objmesh.utils.logger import logger
from objmesh.utils.numeric import parse_floats
from objmesh.utils.search_path import SearchPath

# Грамматики угла грани в порядке проверки. Каждая возвращает
# (position, texcoord, normal); опущенный индекс = None.
_CORNER_GRAMMARS = (
    (re.compile(r"^([-+]?\d+)/([-+]?\d+)/([-+]?\d+)$"),
     lambda m: (int(m[1]), int(m[2]), int(m[3]))),
    (re.compile(r"^([-+]?\d+)//([-+]?\d+)$"),
     lambda m: (int(m[1]), None, int(m[2]))),
    (re.compile(r"^([-+]?\d+)$"),
     lambda m: (int(m[1]), None, None)),
)

# строки, которые мы сознательно пропускаем (группы, smoothing)
_IGNORED = {"g", "s"}


class FaceRecord(NamedTuple):
    """Треугольник в индексах файла + материал, активный при объявлении."""
    corners: tuple  # 3 × (position, texcoord, normal)
    material: Optional[Material]
    line: int


class ParseSession:
    """
    Состояние одного прохода по OBJ‑файлу.

    Сессия – единственный владелец сырых массивов и таблицы
    материалов; после разбора она передаётся в `repack_faces`.
    """

    def __init__(self, path) -> None:
        self.path = Path(path)
        self.positions: list[tuple[float, float, float]] = []
        self.texcoords: list[tuple[float, float]] = []
        self.normals: list[tuple[float, float, float]] = []
        self.faces: list[FaceRecord] = []
        self.materials: dict[str, Material] = {}
        self.diagnostics = DiagnosticLog()

        self.current_material: Optional[Material] = None
        # материал для неизвестных usemtl – в таблицу не попадает
        self.default_material = Material()

    def error(self, line_no: int, msg: str) -> None:
        self.diagnostics.error(str(self.path), line_no, msg)


class ObjParser:
    """Разбор OBJ‑файла в ParseSession."""

    def __init__(
        self,
        texture_loader=None,
        shader_loader=None,
        search_path: Optional[SearchPath] = None,
        max_line_length: int = 254,
    ) -> None:
        self.texture_loader = texture_loader
        self.shader_loader = shader_loader
        self.search_path = search_path if search_path is not None else SearchPath()
        self.max_line_length = max_line_length

        self._handlers = {
            "v": self._parse_position,
            "vt": self._parse_texcoord,
            "vn": self._parse_normal,
            "f": self._parse_face,
            "mtllib": self._parse_mtllib,
            "usemtl": self._parse_usemtl,
        }

    # -----------------------------------------------------------------
    def parse(self, path) -> ParseSession:
        """
        Прочитать файл целиком.

        Ошибка открытия/чтения (OSError) пробрасывается – частичной
        сессии вызывающий не получает.
        """
        session = ParseSession(path)

        with session.path.open("r", encoding="utf-8", errors="replace") as f:
            for line_no, raw in enumerate(f, start=1):
                line = raw.rstrip("\r\n")
                if len(line) > self.max_line_length:
                    session.error(line_no, f"Line longer than {self.max_line_length} characters truncated")
                    line = line[: self.max_line_length]

                tokens = line.split()
                if not tokens or tokens[0].startswith("#") or tokens[0] in _IGNORED:
                    continue

                handler = self._handlers.get(tokens[0])
                if handler is None:
                    session.error(line_no, "Unsupported OBJ declaration")
                    continue
                handler(session, line_no, tokens[1:])

        logger.info(
            f"[ObjParser] {session.path.name}: {len(session.positions)} positions, "
            f"{len(session.texcoords)} texcoords, {len(session.normals)} normals, "
            f"{len(session.faces)} faces, {len(session.diagnostics)} diagnostic(s)"
        )
        return session

    # -----------------------------------------------------------------
    # атрибуты вершин
    # -----------------------------------------------------------------
    def _parse_position(self, session, line_no, args):
        xyz = parse_floats(args, 3)
        if xyz is None:
            session.error(line_no, "Invalid vertex")
        else:
            session.positions.append(tuple(xyz))

    def _parse_texcoord(self, session, line_no, args):
        uv = parse_floats(args, 2)
        if uv is None:
            session.error(line_no, "Invalid texture coordinate")
        else:
            session.texcoords.append(tuple(uv))

    def _parse_normal(self, session, line_no, args):
        xyz = parse_floats(args, 3)
        if xyz is None:
            session.error(line_no, "Invalid vertex normal")
        else:
            session.normals.append(tuple(xyz))

    # -----------------------------------------------------------------
    # грани
    # -----------------------------------------------------------------
    def _parse_face(self, session, line_no, args):
        if len(args) != 3:
            session.error(line_no, "Face has not been triangulated")
            return

        corners = self.match_corners(args)
        if corners is None:
            session.error(line_no, "Invalid face")
            return

        session.faces.append(FaceRecord(corners, session.current_material, line_no))

    @staticmethod
    def match_corners(tokens) -> Optional[tuple]:
        """
        Первая грамматика, которой соответствуют все три угла, или None.
        Смешивать форматы в одной грани нельзя.
        """
        for pattern, convert in _CORNER_GRAMMARS:
            matches = [pattern.match(tok) for tok in tokens]
            if all(matches):
                return tuple(convert(m) for m in matches)
        return None

    # -----------------------------------------------------------------
    # материалы
    # -----------------------------------------------------------------
    def _parse_mtllib(self, session, line_no, args):
        if not args:
            session.error(line_no, "Invalid mtllib declaration")
            return

        kwargs = {
            "search_path": self.search_path,
            "max_line_length": self.max_line_length,
        }
        if self.texture_loader is not None:
            kwargs["texture_loader"] = self.texture_loader
        if self.shader_loader is not None:
            kwargs["shader_loader"] = self.shader_loader
        mtl_parser = MaterialLibraryParser(session.materials, session.diagnostics, **kwargs)

        for name in args:
            mtl_parser.parse(session.path.parent / name)

    def _parse_usemtl(self, session, line_no, args):
        if not args:
            session.error(line_no, "Invalid usemtl declaration")
            return

        name = args[0]
        mat = session.materials.get(name)
        if mat is None:
            session.error(line_no, f"Material {name} is not defined in any material resources")
            session.current_material = session.default_material
        else:
            session.current_material = mat
