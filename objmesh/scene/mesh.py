"""
Результат загрузки OBJ – «развёрнутый» индексированный меш.
"""

import numpy as np

TRIANGLES = "triangles"


class Mesh:
    """Буферы вершин/нормалей/texcoords + индексный буфер и один материал."""

    def __init__(self,
                 vertices: np.ndarray,
                 normals: np.ndarray = None,
                 texcoords: np.ndarray = None,
                 indices: np.ndarray = None,
                 material=None,
                 primitive: str = TRIANGLES,
                 name="Mesh"):
        self.name = name
        self.vertices = np.asarray(vertices, dtype=np.float32).reshape(-1, 3)
        self.normals = (np.asarray(normals, dtype=np.float32).reshape(-1, 3)
                        if normals is not None else None)
        self.texcoords = (np.asarray(texcoords, dtype=np.float32).reshape(-1, 2)
                          if texcoords is not None else None)
        self.indices = (np.asarray(indices, dtype=np.uint32)
                        if indices is not None else None)
        self.material = material
        self.primitive = primitive

        # количество индексов/вершин
        self.index_count = len(self.indices) if self.indices is not None else len(self.vertices)

    @property
    def face_count(self) -> int:
        return self.index_count // 3

    def is_empty(self) -> bool:
        return self.index_count == 0

    @staticmethod
    def _same(a, b) -> bool:
        if a is None or b is None:
            return a is b
        return a.shape == b.shape and bool(np.array_equal(a, b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mesh):
            return NotImplemented
        return (
            self.primitive == other.primitive
            and self._same(self.vertices, other.vertices)
            and self._same(self.normals, other.normals)
            and self._same(self.texcoords, other.texcoords)
            and self._same(self.indices, other.indices)
            and self.material == other.material
        )

    __hash__ = None

    def __repr__(self) -> str:
        mat = self.material.name if self.material is not None else None
        return f"Mesh({self.name!r}, faces={self.face_count}, material={mat!r})"
