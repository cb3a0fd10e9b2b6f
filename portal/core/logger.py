import logging
import sys
from typing import Optional

from portal.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger("portal")


def configure_logging(level: Optional[str] = None) -> None:
    """
    Root handler'ı bir kez kurar, sonraki çağrılar sadece seviyeyi günceller.
    """
    level = (level or settings.LOG_LEVEL).upper()

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
