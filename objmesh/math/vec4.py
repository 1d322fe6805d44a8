# objmesh/math/vec4.py
"""
4‑мерный вектор (float32). Используется для RGBA‑цветов материалов.
"""

import numpy as np
from typing import Tuple


class Vec4:
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = float(value)

    # -----------------------------------------------------------------
    # покомпонентный доступ (RGB‑часть цвета задаётся по индексам)
    # -----------------------------------------------------------------
    def __getitem__(self, i: int) -> float:
        return float(self._v[i])

    def __setitem__(self, i: int, value: float) -> None:
        self._v[i] = float(value)

    def set_rgb(self, r: float, g: float, b: float) -> None:
        """Записать первые три компоненты, альфа не меняется."""
        self._v[0:3] = (r, g, b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    def copy(self) -> "Vec4":
        return Vec4(*self._v)

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())
