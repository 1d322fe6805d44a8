"""
Плагины ресурсов: расширение файла → загрузчик.
"""

from objmesh.plugins.plugin_manager import PluginManager
from objmesh.plugins.obj_plugin import ObjPlugin

__all__ = ["PluginManager", "ObjPlugin"]
