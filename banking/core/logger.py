"""
Colourised console logging shared by every module.
"""

import logging
import os
import sys

from colorlog import ColoredFormatter

from banking.core.config import settings

CONSOLE_FORMAT = "%(log_color)s%(levelname)-8s [%(folder)s/%(filename)s:%(lineno)d] %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


class FolderColoredFormatter(ColoredFormatter):
    def format(self, record):
        # Folder the logging call came from, e.g. "services"
        record.folder = os.path.basename(os.path.dirname(record.pathname))
        return super().format(record)


def get_logger(name: str = "banking") -> logging.Logger:
    """
    Return a configured logger.

    Handlers are attached the first time a name is requested, so calling
    this at import time in many modules never duplicates output.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(settings.LOG_LEVEL.upper())

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FolderColoredFormatter(CONSOLE_FORMAT, log_colors=LOG_COLORS))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
