"""
Пакет scene – выходные данные загрузчика (Mesh).
"""

from objmesh.scene.mesh import Mesh, TRIANGLES

__all__ = ["Mesh", "TRIANGLES"]
