# objmesh/utils/search_path.py
"""
Пути поиска ресурсов (текстуры, шейдеры).

MTL‑файлы ссылаются на текстуры по относительному имени; на время
создания такого ресурса каталог MTL‑файла кладётся в начало пути
поиска и гарантированно снимается после вызова.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional

from objmesh.utils.logger import logger


class SearchPath:
    """Упорядоченный список каталогов для поиска ресурсов по имени."""

    def __init__(self, dirs: Iterable = ()):
        self._dirs: list[Path] = [Path(d) for d in dirs]

    @property
    def dirs(self) -> list[Path]:
        return list(self._dirs)

    @contextmanager
    def pushed(self, directory) -> Iterator["SearchPath"]:
        """Временно добавить каталог в начало списка."""
        p = Path(directory)
        self._dirs.insert(0, p)
        try:
            yield self
        finally:
            self._dirs.remove(p)

    def find(self, name: str) -> Optional[Path]:
        """Первый существующий файл `name` (абсолютный путь – как есть)."""
        candidate = Path(name).expanduser()
        if candidate.is_absolute():
            return candidate if candidate.is_file() else None
        for d in self._dirs:
            p = d / candidate
            if p.is_file():
                return p.resolve()
        if candidate.is_file():
            return candidate.resolve()
        logger.debug(f"[SearchPath] {name} not found in {self._dirs}")
        return None
