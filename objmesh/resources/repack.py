# objmesh/resources/repack.py
"""
Разрешение индексов граней и упаковка в плоские буферы.

Каждый угол каждого треугольника получает свою вершину (слот
`face * 3 + corner`), индексный буфер – тождественная перестановка.
Одинаковые вершины не склеиваются.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from objmesh.resources.obj_parser import ParseSession
from objmesh.utils.logger import logger


class PackedBuffers(NamedTuple):
    vertices: np.ndarray   # (3F, 3) float32
    normals: np.ndarray    # (3F, 3) float32
    texcoords: np.ndarray  # (3F, 2) float32
    indices: np.ndarray    # (3F,)   uint32
    face_count: int


def _as_array(rows, width: int) -> np.ndarray:
    if not rows:
        return np.zeros((0, width), dtype=np.float32)
    return np.asarray(rows, dtype=np.float32).reshape(-1, width)


def _face_normals(tri: np.ndarray) -> np.ndarray:
    """Нормали плоских треугольников (F, 3, 3) → (F, 3); вырожденные = 0."""
    n = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
    length = np.linalg.norm(n, axis=1, keepdims=True)
    return np.divide(n, length, out=np.zeros_like(n), where=length > 0)


def _in_range(corners, counts) -> bool:
    """Все явные индексы угла лежат в 1..N соответствующего массива."""
    for corner in corners:
        for index, count in zip(corner, counts):
            if index is not None and not 1 <= index <= count:
                return False
    return True


def repack_faces(session: ParseSession, compute_missing_normals: bool = True) -> PackedBuffers:
    """
    Разрешить FaceRecord‑ы сессии в буферы.

    Грань, у которой хоть один индекс вне массива (в том числе 0 и
    отрицательные), отбрасывается с диагностикой; остальные грани не
    затрагиваются. Опущенный в файле texcoord (None) → заглушка (0, 0).
    Опущенная нормаль (формат `f p p p`) → нормаль плоскости
    треугольника или (0, 0, 0), если `compute_missing_normals` выключен.
    """
    positions = _as_array(session.positions, 3)
    normals = _as_array(session.normals, 3)
    # строка 0 – заглушка для опущенного texcoord
    texcoords = np.vstack([np.zeros((1, 2), dtype=np.float32),
                           _as_array(session.texcoords, 2)])

    if not session.faces:
        return PackedBuffers(
            vertices=np.zeros((0, 3), dtype=np.float32),
            normals=np.zeros((0, 3), dtype=np.float32),
            texcoords=np.zeros((0, 2), dtype=np.float32),
            indices=np.zeros(0, dtype=np.uint32),
            face_count=0,
        )

    counts = (len(positions), len(session.texcoords), len(normals))
    valid = np.array([_in_range(face.corners, counts) for face in session.faces], dtype=bool)
    for face, ok in zip(session.faces, valid):
        if not ok:
            session.error(face.line, "Invalid face. Index out of range")

    # (F, 3, 3): грань × угол × (p, t, n), только разрешимые грани;
    # опущенный texcoord → строка 0 (заглушка), опущенная нормаль → -1
    idx = np.array(
        [[(p, t if t is not None else 0, n if n is not None else 0)
          for p, t, n in face.corners]
         for face, ok in zip(session.faces, valid) if ok],
        dtype=np.int64,
    ).reshape(-1, 3, 3)
    p_idx = idx[:, :, 0] - 1
    t_idx = idx[:, :, 1]
    n_idx = idx[:, :, 2] - 1
    n_missing = n_idx < 0

    face_count = int(valid.sum())

    tri_pos = positions[p_idx]                       # (F, 3, 3)
    tri_tex = texcoords[t_idx]                       # (F, 3, 2)
    tri_nrm = np.zeros_like(tri_pos)
    if len(normals):
        tri_nrm[~n_missing] = normals[n_idx[~n_missing]]
    if compute_missing_normals and n_missing.any():
        flat = np.repeat(_face_normals(tri_pos)[:, None, :], 3, axis=1)
        tri_nrm[n_missing] = flat[n_missing]

    # проверка на нулевые нормали (грань остаётся)
    kept = [face for face, ok in zip(session.faces, valid) if ok]
    zero = ~tri_nrm.any(axis=2)
    for f_i, corner in zip(*np.nonzero(zero)):
        session.error(kept[f_i].line, f"norm[{corner}] is the zero vector")

    logger.debug(f"[Repack] {face_count}/{len(session.faces)} faces resolved")
    return PackedBuffers(
        vertices=tri_pos.reshape(-1, 3).astype(np.float32),
        normals=tri_nrm.reshape(-1, 3).astype(np.float32),
        texcoords=tri_tex.reshape(-1, 2).astype(np.float32),
        indices=np.arange(face_count * 3, dtype=np.uint32),
        face_count=face_count,
    )
