# objmesh/utils/diagnostics.py
"""
Диагностика парсера: (файл, строка, сообщение).

Все некритичные ошибки OBJ/MTL не бросают исключений, а попадают сюда
и одновременно пишутся в лог.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from objmesh.utils.logger import logger


class Diagnostic(NamedTuple):
    file: str
    line: int
    message: str

    def __str__(self) -> str:
        return f"{self.file} line[{self.line}] {self.message}."


class DiagnosticLog:
    """Накопитель диагностик одной сессии разбора."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def error(self, file: str, line: int, message: str) -> None:
        diag = Diagnostic(str(file), line, message)
        self._items.append(diag)
        logger.warning(str(diag))

    def matching(self, text: str) -> list[Diagnostic]:
        """Все диагностики, в сообщении которых есть `text`."""
        return [d for d in self._items if text in d.message]

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
