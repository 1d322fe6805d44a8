"""
objmesh – загрузчик Wavefront OBJ/MTL в индексированный треугольный меш
(буферы позиций/нормалей/texcoords, индексный буфер, один материал).
"""

from objmesh.utils import logger, Config, Diagnostic, DiagnosticLog
from objmesh.math import Vec4
from objmesh.assets import Material, TextureManager, ShaderManager, load_material_library
from objmesh.scene import Mesh, TRIANGLES
from objmesh.resources import ObjParser, ObjResource, ObjLoadError, repack_faces
from objmesh.plugins import PluginManager, ObjPlugin

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "Diagnostic",
    "DiagnosticLog",
    "Vec4",
    "Material",
    "TextureManager",
    "ShaderManager",
    "load_material_library",
    "Mesh",
    "TRIANGLES",
    "ObjParser",
    "ObjResource",
    "ObjLoadError",
    "repack_faces",
    "PluginManager",
    "ObjPlugin",
]
