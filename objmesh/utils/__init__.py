# objmesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * Config        – JSON‑конфигурация загрузчика
    * DiagnosticLog – накопитель ошибок разбора (файл, строка, сообщение)
"""

from .logger import logger, set_log_level
from .config import Config, DEFAULT_CONFIG
from .diagnostics import Diagnostic, DiagnosticLog
from .numeric import parse_float, parse_floats

__all__ = [
    "logger",
    "set_log_level",
    "Config",
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DiagnosticLog",
    "parse_float",
    "parse_floats",
]
