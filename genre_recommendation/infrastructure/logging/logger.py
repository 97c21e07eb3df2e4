import logging
import os
from logging import Logger as StdLogger
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, quiet_libs: tuple[str, ...] = ("uvicorn.access",)) -> None:
    """Route all records through one stream handler; level defaults to LOG_LEVEL or INFO"""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        handlers=[handler],
        force=True,
    )

    for lib in quiet_libs:
        logging.getLogger(lib).setLevel(logging.WARNING)


class Logger:
    @staticmethod
    def get_logger(name: Optional[str] = None) -> StdLogger:
        return logging.getLogger(name)
