"""
Core exceptions for the stackenv package.

This module provides all exception classes used throughout stackenv,
with a clear inheritance hierarchy rooted at StackEnvError.
"""

# Base exceptions
from .base import (
    StackEnvError,
    RegistryError,
    RegistryCollisionError,
    DuplicateServiceError,
    UnknownServiceError,
    PartitionError,
    EnvironmentFileError
)

# Validation exceptions
from .env import (
    EnvVariableError,
    MissingRequiredVariable,
    EmptyValue,
    FormatViolation,
    ConfigurationError
)

__all__ = [
    # Base exceptions
    'StackEnvError',
    'RegistryError',
    'RegistryCollisionError',
    'DuplicateServiceError',
    'UnknownServiceError',
    'PartitionError',
    'EnvironmentFileError',

    # Validation exceptions
    'EnvVariableError',
    'MissingRequiredVariable',
    'EmptyValue',
    'FormatViolation',
    'ConfigurationError'
]
