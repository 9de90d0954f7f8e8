from loguru import logger
import sys

from smart_ping.core.config import settings

def setup_logging():
    logger.remove()
    logger.add(sys.stdout, level=settings.LOG_LEVEL.upper())
    return logger
