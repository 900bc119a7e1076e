"""
System configuration domain: settings of the stackenv package itself.
"""

from .logging_config import (
    LoggingConfig, LogLevel, get_default_logging_config,
    LOG_LEVEL_VARIABLE, JSON_LOGS_VARIABLE
)

__all__ = [
    'LoggingConfig',
    'LogLevel',
    'get_default_logging_config',
    'LOG_LEVEL_VARIABLE',
    'JSON_LOGS_VARIABLE'
]
