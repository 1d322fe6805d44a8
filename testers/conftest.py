# -*- coding: utf-8 -*-
"""
conftest.py – фикстуры для тестов загрузчика OBJ/MTL.

Файлы моделей пишутся во временный каталог; текстуры и шейдеры
подменяются фейковыми загрузчиками, которые только записывают вызовы.
"""

import textwrap
from pathlib import Path
from typing import Any, Tuple

import pytest

from objmesh.assets.shader_manager import ShaderManager
from objmesh.assets.texture_manager import TextureManager
from objmesh.utils.config import Config


# ----------------------------------------------------------------------
# Фейковый загрузчик ресурсов (текстуры/шейдеры)
# ----------------------------------------------------------------------
class FakeLoader:
    """
    Имитация TextureManager.get / ShaderManager.get.
    Возвращает строку‑«хэндл», имена из `missing` → FileNotFoundError.
    """

    def __init__(self, kind: str, missing: Tuple[str, ...] = ()) -> None:
        self.kind = kind
        self.missing = set(missing)
        # (name, список каталогов пути поиска в момент вызова)
        self.calls: list[Tuple[str, list]] = []
        self.handles: dict[str, Any] = {}

    def __call__(self, name: str, search_path) -> Any:
        self.calls.append((name, search_path.dirs))
        if name in self.missing:
            raise FileNotFoundError(f"{self.kind} not found: {name}")
        return self.handles.setdefault(name, f"{self.kind}:{name}")


@pytest.fixture
def texture_loader() -> FakeLoader:
    return FakeLoader("texture", missing=("missing.png",))


@pytest.fixture
def shader_loader() -> FakeLoader:
    return FakeLoader("shader")


@pytest.fixture
def write_file(tmp_path):
    """Фабрика: write_file("a.obj", "...") → Path (текст без отступов)."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config() -> Config:
    """Конфигурация по‑умолчанию без чтения файла с диска."""
    return Config(data={})


@pytest.fixture(autouse=True)
def _clear_resource_caches():
    TextureManager.clear()
    ShaderManager.clear()
    yield
    TextureManager.clear()
    ShaderManager.clear()
