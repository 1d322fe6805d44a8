# objmesh/assets/shader_manager.py
"""Менеджер шейдеров, на которые ссылается директива `shader` в MTL."""

from __future__ import annotations

from pathlib import Path

from objmesh.utils.search_path import SearchPath
from objmesh.utils.logger import logger


class Shader:
    """Дескриптор шейдера: путь + исходник, читаемый при первом обращении."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._source: str | None = None

    @property
    def source(self) -> str:
        if self._source is None:
            self._source = self.path.read_text(encoding="utf-8")
        return self._source

    def __repr__(self) -> str:
        return f"Shader({str(self.path)!r})"


class ShaderManager:
    _cache: dict[Path, Shader] = {}

    @classmethod
    def get(cls, name: str, search_path: SearchPath | None = None) -> Shader:
        search_path = search_path or SearchPath()
        path = search_path.find(name)
        if path is None:
            raise FileNotFoundError(f"Shader not found: {name}")
        if path not in cls._cache:
            cls._cache[path] = Shader(path)
            logger.debug(f"[ShaderManager] Registered shader: {path}")
        return cls._cache[path]

    @classmethod
    def clear(cls) -> None:
        cls._cache.clear()
