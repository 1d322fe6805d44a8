"""
Математический суб‑пакет: Vec4 (RGBA‑цвета материалов).
"""

from objmesh.math.vec4 import Vec4

__all__ = ["Vec4"]
