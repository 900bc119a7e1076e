"""
Core enums for the stackenv package.
"""

from .env import (
    Visibility,
    RuleKind,
    RuleOrigin,
    ViolationCode
)

__all__ = [
    'Visibility',
    'RuleKind',
    'RuleOrigin',
    'ViolationCode'
]
