"""
Core environment configuration components.

This module provides the building blocks of environment validation:
- Rule: constraint on a single variable
- ServiceRegistry: ordered registry of optional integrations
- compose / partition: rule set composition and server/client split
- EnvValidator: validation into a ValidatedConfig
- EnvironmentProvider: read-only environment snapshots
"""

from .rule import Rule, string, url, email, one_of, is_absolute_url
from .registry import ServiceDescriptor, ServiceRegistry
from .composer import (
    ActivationMode, RuleSet, compose, is_flag_set, is_service_active,
    TRUTHY, SERVICES_FLAGS_VARIABLE
)
from .partition import partition, visibility_of, PUBLIC_PREFIX
from .validated import ValidatedConfig
from .validator import EnvValidator, ValidationResult, load
from .provider import (
    EnvironmentProvider, ProcessEnvironmentProvider, FileEnvironmentProvider,
    LayeredEnvironmentProvider
)

__all__ = [
    # Rules
    'Rule',
    'string',
    'url',
    'email',
    'one_of',
    'is_absolute_url',

    # Registry
    'ServiceDescriptor',
    'ServiceRegistry',

    # Composition
    'ActivationMode',
    'RuleSet',
    'compose',
    'is_flag_set',
    'is_service_active',
    'TRUTHY',
    'SERVICES_FLAGS_VARIABLE',

    # Partition
    'partition',
    'visibility_of',
    'PUBLIC_PREFIX',

    # Validation
    'ValidatedConfig',
    'EnvValidator',
    'ValidationResult',
    'load',

    # Providers
    'EnvironmentProvider',
    'ProcessEnvironmentProvider',
    'FileEnvironmentProvider',
    'LayeredEnvironmentProvider'
]
