"""
Пакет resources – разбор OBJ, упаковка буферов и сам OBJ‑ресурс.
"""

from objmesh.resources.obj_parser import FaceRecord, ObjParser, ParseSession
from objmesh.resources.repack import PackedBuffers, repack_faces
from objmesh.resources.obj_resource import ObjLoadError, ObjResource

__all__ = [
    "FaceRecord",
    "ObjParser",
    "ParseSession",
    "PackedBuffers",
    "repack_faces",
    "ObjLoadError",
    "ObjResource",
]
