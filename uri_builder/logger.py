import logging
import os
import sys


def get_logger(name="uri-builder"):
    """
    Configures and returns a standardized logger instance.

    The level is DEBUG when DEBUG_LOGS_ENABLED is "true", INFO otherwise.
    """
    logger = logging.getLogger(name)

    if os.environ.get("DEBUG_LOGS_ENABLED", "false").lower() == "true":
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    # Configure handler only if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
