"""
Logging configuration of the stackenv package itself.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

LOG_LEVEL_VARIABLE = "STACKENV_LOG_LEVEL"
JSON_LOGS_VARIABLE = "STACKENV_JSON_LOGS"


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class LoggingConfig:
    """Level and renderer used by the package logger."""
    level: str = LogLevel.INFO.value
    json_logs: bool = False

    @classmethod
    def from_environment(cls, environment: Optional[Mapping[str, str]] = None) -> "LoggingConfig":
        """
        Build the logging config from STACKENV_LOG_LEVEL and STACKENV_JSON_LOGS.

        Unknown levels fall back to INFO. JSON logs are enabled only by the
        exact value "true", like every other flag in this package.
        """
        if environment is None:
            environment = os.environ

        level = (environment.get(LOG_LEVEL_VARIABLE) or LogLevel.INFO.value).strip().upper()
        if level not in LogLevel.__members__:
            level = LogLevel.INFO.value

        return cls(level=level, json_logs=environment.get(JSON_LOGS_VARIABLE) == "true")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'level': self.level,
            'json_logs': self.json_logs
        }


def get_default_logging_config() -> LoggingConfig:
    """Get default logging configuration."""
    return LoggingConfig()
