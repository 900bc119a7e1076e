"""
Environment configuration enums.
"""

from enum import Enum


class Visibility(Enum):
    """Where a validated variable may be exposed."""
    SERVER = "server"
    CLIENT = "client"


class RuleKind(Enum):
    """Value shape a rule validates."""
    STRING = "string"
    URL = "url"
    EMAIL = "email"
    ENUM = "enum"


class RuleOrigin(Enum):
    """Which part of the schema contributed a rule."""
    REQUIRED = "required"
    SERVICE = "service"
    OPTIONAL = "optional"


class ViolationCode(Enum):
    """Error codes for environment variable violations."""
    MISSING = "MISSING_REQUIRED_VARIABLE"
    EMPTY = "EMPTY_VALUE"
    FORMAT = "FORMAT_VIOLATION"
