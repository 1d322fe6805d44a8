"""
Простейший менеджер плагинов ресурсов.
Плагины – обычные модули, содержащие функцию `register(manager)`.
Плагин сообщает свои расширения (`extensions()`) и создаёт ресурс
по пути к файлу (`create(path)`).
"""

import importlib
import pkgutil
from pathlib import Path

from objmesh.utils.logger import logger


class PluginManager:
    """Сканирует подпапку `plugins/` и регистрирует найденные загрузчики."""
    def __init__(self, plugins_dir: Path = None):
        if plugins_dir is None:
            plugins_dir = Path(__file__).parent
        self.dir = plugins_dir
        self.plugins = {}

    def discover(self):
        """Импортировать все модули и вызвать `register`."""
        for modinfo in pkgutil.iter_modules([str(self.dir)]):
            module = importlib.import_module(f"objmesh.plugins.{modinfo.name}")
            if hasattr(module, "register"):
                module.register(self)

    def register_plugin(self, plugin):
        for ext in plugin.extensions():
            key = ext.lower().lstrip(".")
            if key in self.plugins:
                logger.debug(f"[PluginManager] '{key}' handler replaced by {plugin!r}")
            self.plugins[key] = plugin

    def get_plugin(self, extension: str):
        return self.plugins.get(extension.lower().lstrip("."))

    def create_resource(self, path):
        plugin = self.get_plugin(Path(path).suffix)
        if plugin is None:
            raise ValueError(f"No resource plugin for {path}")
        return plugin.create(path)
