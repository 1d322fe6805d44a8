# -*- coding: utf-8 -*-
"""
OBJ‑ресурс: загрузка файла в Mesh и выгрузка.

    res = ObjResource("models/box.obj")
    res.load()
    mesh = res.get_mesh()

`load()` повторно ничего не делает, пока ресурс не выгружен.
`unload()` забывает только свой меш – текстуры и шейдеры материалов
принадлежат менеджерам и не освобождаются.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from objmesh.resources.obj_parser import ObjParser, ParseSession
from objmesh.resources.repack import repack_faces
from objmesh.scene.mesh import Mesh, TRIANGLES
from objmesh.utils.config import Config
from objmesh.utils.diagnostics import DiagnosticLog
from objmesh.utils.logger import logger, set_log_level
from objmesh.utils.search_path import SearchPath


class ObjLoadError(RuntimeError):
    """OBJ/MTL‑файл не удалось открыть или прочитать."""


class ObjResource:
    """Модельный ресурс для одного OBJ‑файла."""

    def __init__(self, path, config: Optional[Config] = None,
                 texture_loader=None, shader_loader=None):
        self.path = Path(path)
        self.config = config if config is not None else Config(data={})
        self.texture_loader = texture_loader
        self.shader_loader = shader_loader
        set_log_level(self.config["log_level"])

        self.mesh: Optional[Mesh] = None
        self.materials: dict = {}
        self.diagnostics = DiagnosticLog()

    @property
    def loaded(self) -> bool:
        return self.mesh is not None

    # -----------------------------------------------------------------
    def load(self) -> None:
        if self.mesh is not None:
            return

        parser = ObjParser(
            texture_loader=self.texture_loader,
            shader_loader=self.shader_loader,
            search_path=SearchPath(self.config["search_paths"]),
            max_line_length=self.config["max_line_length"],
        )
        try:
            session = parser.parse(self.path)
        except OSError as exc:
            logger.error(f"[ObjResource] Cannot load {self.path}: {exc}")
            raise ObjLoadError(f"Cannot load {self.path}: {exc}") from exc

        buffers = repack_faces(
            session, compute_missing_normals=self.config["compute_missing_normals"]
        )

        self.materials = session.materials
        self.diagnostics = session.diagnostics
        self.mesh = Mesh(
            vertices=buffers.vertices,
            normals=buffers.normals,
            texcoords=buffers.texcoords,
            indices=buffers.indices,
            material=self._mesh_material(session),
            primitive=TRIANGLES,
            name=self.path.stem,
        )
        logger.info(f"[ObjResource] Loaded {self.path} → {self.mesh}")

    @staticmethod
    def _mesh_material(session: ParseSession):
        """Один материал на весь меш – тот, что был у последней грани."""
        if session.faces:
            return session.faces[-1].material
        return session.current_material

    def unload(self) -> None:
        self.mesh = None

    def get_mesh(self) -> Optional[Mesh]:
        return self.mesh
