# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Уровень можно переопределить через Config.
# ---------------------------------------------------------------

import logging


def init_logger(level: str = "INFO"):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    log = logging.getLogger("objmesh")
    log.setLevel(level)
    return log


logger = init_logger()


def set_log_level(level: str) -> None:
    """Сменить уровень логгера `objmesh` (например, из конфигурации)."""
    try:
        logger.setLevel(level.upper())
    except (ValueError, AttributeError) as exc:
        logger.error(f"[Logger] Unknown log level {level!r}: {exc}")
