# objmesh/assets/__init__.py
"""Пакет с материалами, MTL‑парсером и менеджерами текстур/шейдеров."""
from objmesh.assets.material import Material
from objmesh.assets.material_library import MaterialLibraryParser, load_material_library
from objmesh.assets.texture_manager import Texture, TextureManager
from objmesh.assets.shader_manager import Shader, ShaderManager

__all__ = [
    "Material",
    "MaterialLibraryParser",
    "load_material_library",
    "Texture",
    "TextureManager",
    "Shader",
    "ShaderManager",
]
