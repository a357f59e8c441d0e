# chat_relay/util/logging.py

import logging
import sys

LOG_LEVEL = logging.INFO
LOG_FORMAT = "[%(levelname)s] [%(asctime)s] [%(name)s] [%(funcName)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = LOG_LEVEL) -> logging.Logger:
    """
    Configure the root logger with a stdout handler and return it.

    Safe to call more than once: handlers are only attached the first time.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return root

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    return root
