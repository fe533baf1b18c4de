"""Logging utility for geodatum"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geodatum')
LOGGER.setLevel(logging.WARNING)

_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str, *args):
    """Logs a warning, unless the same (formatted) warning was logged before"""
    message = warning % args if args else warning
    if message not in _WARNINGS:
        LOGGER.warning(message)
        _WARNINGS.add(message)
