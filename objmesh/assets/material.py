# -*- coding: utf-8 -*-
"""
Материал из MTL‑библиотеки: цвета ambient/diffuse/specular, shininess
и ссылки (не владение) на диффузную текстуру и шейдер.
"""

from __future__ import annotations

from typing import Any

from objmesh.math.vec4 import Vec4

# значения по‑умолчанию из спецификации формата MTL
DEFAULT_AMBIENT = (0.2, 0.2, 0.2, 1.0)
DEFAULT_DIFFUSE = (0.8, 0.8, 0.8, 1.0)
DEFAULT_SPECULAR = (1.0, 1.0, 1.0, 1.0)
DEFAULT_SHININESS = 0.0


class Material:
    """Параметры поверхности одного `newmtl`‑блока."""

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self.ambient = Vec4(*DEFAULT_AMBIENT)
        self.diffuse = Vec4(*DEFAULT_DIFFUSE)
        self.specular = Vec4(*DEFAULT_SPECULAR)
        self.shininess = DEFAULT_SHININESS

        # Ссылки на внешние ресурсы – ими владеют TextureManager/ShaderManager.
        self.texture: Any = None
        self.shader: Any = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.name == other.name
            and self.ambient == other.ambient
            and self.diffuse == other.diffuse
            and self.specular == other.specular
            and self.shininess == other.shininess
            and self.texture is other.texture
            and self.shader is other.shader
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material({self.name!r}, ambient={self.ambient}, "
                f"diffuse={self.diffuse}, specular={self.specular}, "
                f"shininess={self.shininess})")
