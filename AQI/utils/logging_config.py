import logging
import os
import sys


def setup_logging(level=None) -> logging.Logger:
    """Configure a root logger with a simple console handler.

    The level defaults to the ``AQI_LOG_LEVEL`` environment variable, then INFO.
    """
    if level is None:
        level = os.getenv("AQI_LOG_LEVEL", default="INFO")
    if isinstance(level, str):
        levels = logging.getLevelNamesMapping()
        if level.upper() not in levels:
            raise ValueError(f"Unknown log level: {level}")
        level = levels[level.upper()]

    handler = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s %(levelname)s [%(name)s:%(module)s:%(lineno)d] %(message)s"
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%dT%H:%M:%S%z"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)
    return root
