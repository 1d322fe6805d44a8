# -*- coding: utf-8 -*-
"""
Разбор MTL‑библиотеки материалов.

Заполняет общую таблицу `name → Material` сессии разбора OBJ.
Любая ошибка в строке некритична: пишется диагностика с именем
MTL‑файла и номером строки, разбор продолжается со следующей строки.
Фатальна только невозможность открыть сам файл.

Поддерживаемые директивы:

* ``newmtl <name>``   – новый материал со значениями по‑умолчанию
  (повторное имя перезаписывает старый материал);
* ``Ka/Kd/Ks r g b``  – RGB‑часть цвета, альфа не меняется;
* ``Ns s``            – shininess;
* ``map_Kd <file>``   – диффузная текстура (не больше одной);
* ``shader <file>``   – шейдер (не больше одного).

Остальные директивы молча игнорируются.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from objmesh.assets.material import Material
from objmesh.assets.shader_manager import ShaderManager
from objmesh.assets.texture_manager import TextureManager
from objmesh.utils.diagnostics import DiagnosticLog
from objmesh.utils.logger import logger
from objmesh.utils.numeric import parse_floats
from objmesh.utils.search_path import SearchPath

# директива → имя атрибута материала
_COLOR_DIRECTIVES = {
    "Ka": "ambient",
    "Kd": "diffuse",
    "Ks": "specular",
}

# директива → атрибут материала (и ключ загрузчика)
_RESOURCE_DIRECTIVES = {
    "map_Kd": "texture",
    "shader": "shader",
}

ResourceLoader = Callable[[str, SearchPath], object]


class MaterialLibraryParser:
    """
    Парсер одного MTL‑файла.

    Контекст (таблица, диагностика, загрузчики) передаётся явно; имя
    файла в диагностике – всегда путь к MTL, а не к OBJ.
    """

    def __init__(
        self,
        materials: dict[str, Material],
        diagnostics: DiagnosticLog,
        texture_loader: ResourceLoader = TextureManager.get,
        shader_loader: ResourceLoader = ShaderManager.get,
        search_path: Optional[SearchPath] = None,
        max_line_length: int = 254,
    ) -> None:
        self.materials = materials
        self.diagnostics = diagnostics
        self.loaders = {
            "texture": texture_loader,
            "shader": shader_loader,
        }
        self.search_path = search_path if search_path is not None else SearchPath()
        self.max_line_length = max_line_length

    # -----------------------------------------------------------------
    def parse(self, path) -> None:
        """Прочитать MTL‑файл `path` и слить материалы в таблицу."""
        path = Path(path)
        resource_dir = path.parent
        current: Optional[Material] = None

        # OSError уходит наверх: без файла разбор OBJ прерывается.
        with path.open("r", encoding="utf-8", errors="replace") as f:
            for line_no, raw in enumerate(f, start=1):
                line = raw.rstrip("\r\n")
                if len(line) > self.max_line_length:
                    self._error(path, line_no,
                                f"Line longer than {self.max_line_length} characters truncated")
                    line = line[: self.max_line_length]
                tokens = line.split()
                if not tokens or tokens[0].startswith("#"):
                    continue
                directive, args = tokens[0], tokens[1:]

                if directive == "newmtl":
                    current = self._new_material(path, line_no, args) or current
                elif directive in _COLOR_DIRECTIVES:
                    self._set_color(path, line_no, current, directive, args)
                elif directive == "Ns":
                    self._set_shininess(path, line_no, current, args)
                elif directive in _RESOURCE_DIRECTIVES:
                    self._attach_resource(
                        path, line_no, current, directive, args, resource_dir
                    )
                # всё остальное в MTL игнорируем

        logger.debug(f"[MTL] {path}: {len(self.materials)} material(s) in table")

    # -----------------------------------------------------------------
    def _error(self, path: Path, line_no: int, msg: str) -> None:
        self.diagnostics.error(str(path), line_no, msg)

    def _new_material(self, path, line_no, args) -> Optional[Material]:
        if len(args) < 1:
            self._error(path, line_no, "Invalid newmtl declaration")
            return None
        mat = Material(args[0])
        if args[0] in self.materials:
            logger.debug(f"[MTL] Material {args[0]!r} redeclared – reset to defaults")
        self.materials[args[0]] = mat
        return mat

    def _set_color(self, path, line_no, current, directive, args) -> None:
        rgb = parse_floats(args, 3)
        if rgb is None:
            self._error(path, line_no, f"Invalid {directive} declaration")
        elif current is None:
            self._error(path, line_no,
                        f"{directive} section without newmtl declaration")
        else:
            getattr(current, _COLOR_DIRECTIVES[directive]).set_rgb(*rgb)

    def _set_shininess(self, path, line_no, current, args) -> None:
        value = parse_floats(args, 1)
        if value is None:
            self._error(path, line_no, "Invalid Ns declaration")
        elif current is None:
            self._error(path, line_no, "Ns section without newmtl declaration")
        else:
            current.shininess = value[0]

    def _attach_resource(self, path, line_no, current, directive, args,
                         resource_dir: Path) -> None:
        attr = _RESOURCE_DIRECTIVES[directive]
        if len(args) < 1:
            self._error(path, line_no, f"Invalid {directive} declaration")
            return
        if current is None:
            self._error(path, line_no,
                        f"{directive} section without newmtl declaration")
            return
        if getattr(current, attr) is not None:
            self._error(path, line_no,
                        f"Multiple {directive} sections appear before a newmtl declaration")
            return

        # каталог MTL‑файла – в путь поиска только на время создания ресурса
        with self.search_path.pushed(resource_dir):
            try:
                handle = self.loaders[attr](args[0], self.search_path)
            except (OSError, ValueError) as exc:
                self._error(path, line_no, f"Cannot create {attr} {args[0]}: {exc}")
                return
        setattr(current, attr, handle)


def load_material_library(
    path,
    materials: dict[str, Material],
    diagnostics: DiagnosticLog,
    **kwargs,
) -> dict[str, Material]:
    """Разобрать `path` в таблицу `materials` (она же и возвращается)."""
    MaterialLibraryParser(materials, diagnostics, **kwargs).parse(path)
    return materials
