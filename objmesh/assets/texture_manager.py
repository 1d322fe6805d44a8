# objmesh/assets/texture_manager.py
"""Менеджер кэширования текстур – загрузка через Pillow «по‑запросу»."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from objmesh.utils.search_path import SearchPath
from objmesh.utils.logger import logger


class Texture:
    """
    Дескриптор текстуры. Пиксели читаются лениво при первом `load()`;
    материал держит только ссылку, владеет ею TextureManager.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.data: np.ndarray | None = None
        self.width = 0
        self.height = 0

    def load(self) -> np.ndarray:
        if self.data is None:
            with Image.open(self.path) as img:
                rgba = img.convert("RGBA")
                self.width, self.height = rgba.size
                self.data = np.array(rgba, dtype=np.uint8)
            logger.debug(f"[Texture] Loaded {self.path} ({self.width}x{self.height})")
        return self.data

    def unload(self) -> None:
        self.data = None

    def __repr__(self) -> str:
        return f"Texture({str(self.path)!r})"


class TextureManager:
    """Кеширующий менеджер текстур – один объект на процесс."""
    _cache: dict[Path, Texture] = {}

    @classmethod
    def get(cls, name: str, search_path: SearchPath | None = None) -> Texture:
        search_path = search_path or SearchPath()
        path = search_path.find(name)
        if path is None:
            raise FileNotFoundError(f"Texture not found: {name}")
        if path in cls._cache:
            return cls._cache[path]
        tex = Texture(path)
        cls._cache[path] = tex
        logger.debug(f"[TextureManager] Registered texture: {path}")
        return tex

    @classmethod
    def clear(cls) -> None:
        cls._cache.clear()
