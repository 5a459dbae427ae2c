"""
Logging configuration for addrconv
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.INFO, package_level: int | str | None = None) -> None:
    """
    Send log records to stdout with timestamp, file and line number

    Args:
        level: Root logging level, as a number or a name such as "DEBUG"
        package_level: Optional separate level for the ``addrconv`` loggers
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop handlers left over from a previous call
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if package_level is not None:
        if isinstance(package_level, str):
            package_level = logging.getLevelName(package_level.upper())
        logging.getLogger("addrconv").setLevel(package_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for ``__name__``)"""
    return logging.getLogger(name)
