"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Logger dell'applicazione. Console via RichHandler su
     stderr e file di log nella cartella logs per il tracing
     delle esecuzioni.
============================================================
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_NAME = "cmdy.log"

logger = logging.getLogger("cmdy")


def setup_logging(settings):
    """Configura console e file di log; chiamate ripetute non duplicano gli handler"""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    # Assicura che la cartella logs esista
    try:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.logs_dir / LOG_FILE_NAME, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Log file non disponibile in {settings.logs_dir}: {e}")
    else:
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger
