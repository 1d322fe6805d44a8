"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import copy
import json
from pathlib import Path

from objmesh.utils.logger import logger

DEFAULT_CONFIG = {
    "max_line_length": 254,
    "log_level": "INFO",
    "compute_missing_normals": True,
    "search_paths": [],
}


class Config:
    """Настройки загрузчика (значения из файла поверх DEFAULT_CONFIG)."""

    def __init__(self, path: str = "objmesh.json", data: dict = None):
        self.path = Path(path)
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if data is not None:
            self.data.update(data)
        else:
            self._load()

    def _load(self):
        if not self.path.is_file():
            logger.info(f"[Config] No config file {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError("top-level JSON value must be an object")
            self.data.update(loaded)
            logger.info(f"[Config] Loaded configuration from {self.path}.")
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
