"""
Environment configuration management.

This module provides:
- Core rule, registry, composition, partition and validation infrastructure
- The built-in service catalog with its required and optional rules
- System-level settings for the package's own logging
"""

# Core infrastructure
from .core import (
    Rule, string, url, email, one_of,
    ServiceDescriptor, ServiceRegistry,
    ActivationMode, RuleSet, compose, is_flag_set, is_service_active,
    partition, visibility_of, PUBLIC_PREFIX,
    ValidatedConfig, EnvValidator, ValidationResult, load,
    EnvironmentProvider, ProcessEnvironmentProvider, FileEnvironmentProvider,
    LayeredEnvironmentProvider
)

# Built-in services
from .services import (
    Service, Runtime, REQUIRED_SCHEMA, OPTIONAL_SCHEMA, default_registry,
    list_available_services
)

# System domain
from .system import LoggingConfig, get_default_logging_config

__all__ = [
    # Core infrastructure
    'Rule',
    'string',
    'url',
    'email',
    'one_of',
    'ServiceDescriptor',
    'ServiceRegistry',
    'ActivationMode',
    'RuleSet',
    'compose',
    'is_flag_set',
    'is_service_active',
    'partition',
    'visibility_of',
    'PUBLIC_PREFIX',
    'ValidatedConfig',
    'EnvValidator',
    'ValidationResult',
    'load',
    'EnvironmentProvider',
    'ProcessEnvironmentProvider',
    'FileEnvironmentProvider',
    'LayeredEnvironmentProvider',

    # Built-in services
    'Service',
    'Runtime',
    'REQUIRED_SCHEMA',
    'OPTIONAL_SCHEMA',
    'default_registry',
    'list_available_services',

    # System domain
    'LoggingConfig',
    'get_default_logging_config'
]
