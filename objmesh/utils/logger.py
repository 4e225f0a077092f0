# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objmesh")

logger = init_logger()

def set_level(level):
    """Выставить уровень логгера пакета (имя уровня или число)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        logger.error(f"[Logger] Unknown log level: {level!r}")
        return
    logger.setLevel(level)
