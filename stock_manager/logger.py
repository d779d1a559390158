import logging
import sys
from logging.handlers import RotatingFileHandler
from . import settings


def setup_logger(
    name: str = None, log_level: int | str = None, console: bool = True
) -> logging.Logger:
    """
    Attaches the session log file (and, unless `console` is off, stdout) to a logger.

    Console output stays bare so printed stock tables and reports read cleanly; the
    file keeps timestamps and the module name of every store, draft and report event.
    Calling it again on a configured logger only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level or settings.LOG_LEVEL)

    if logger.handlers:
        return logger

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.LOG_DIR / settings.LOG_FILENAME,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    return logger
