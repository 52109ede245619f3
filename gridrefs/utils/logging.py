"""Logging utility for gridrefs"""

__all__ = ['LOGGER', 'get_logger', 'warn_once']

import logging

LOGGER = logging.getLogger('gridrefs')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def get_logger(name: str) -> logging.Logger:
    """Returns a child of the package logger, e.g. 'gridrefs.converters'"""
    return LOGGER.getChild(name.rsplit('.', 1)[-1])


def warn_once(warning: str):
    """Logs a warning the first time a given message is seen; repeats are dropped."""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)
