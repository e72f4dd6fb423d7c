import logging
from logging.handlers import RotatingFileHandler
from typing import Optional, Tuple

from formwright.config import Settings


LOG_FORMAT = "%(levelname)-8s %(message)s"
LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


logger = logging.getLogger("formwright")


def get_log_level(level: str):
    return getattr(logging, level.upper())


def setup_logger(
        settings: Settings
) -> Tuple[logging.Handler, Optional[logging.Handler]]:
    """
    Attach a console handler and, when ``LOG_FILE`` is set, a rotating file
    handler to the ``formwright`` logger. Calling it again replaces the
    handlers installed before.
    """
    _log = logging.getLogger("formwright")
    _log.setLevel(logging.DEBUG)
    _log.propagate = False

    if _log.hasHandlers():
        _log.handlers.clear()

    ch = logging.StreamHandler()
    ch.setLevel(get_log_level(settings.LOG_STD_LEVEL))
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    _log.addHandler(ch)

    fh = None
    if settings.LOG_FILE:
        fh = RotatingFileHandler(
            settings.LOG_FILE,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        fh.setLevel(get_log_level(settings.LOG_FILE_LEVEL))
        fh.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        _log.addHandler(fh)

    return ch, fh
