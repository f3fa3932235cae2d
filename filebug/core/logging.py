import logging

from ..config.paths import APP_NAME


def get_logger(name: str = APP_NAME) -> logging.Logger:
    return logging.getLogger(name)
