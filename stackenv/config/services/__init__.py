"""
Built-in services and the always-present rules.
"""

from .catalog import Service, SERVICE_DESCRIPTORS, default_registry, list_available_services
from .schema import (
    Runtime, REQUIRED_SCHEMA, OPTIONAL_SCHEMA, get_required_schema, get_optional_schema
)

__all__ = [
    'Service',
    'SERVICE_DESCRIPTORS',
    'default_registry',
    'list_available_services',
    'Runtime',
    'REQUIRED_SCHEMA',
    'OPTIONAL_SCHEMA',
    'get_required_schema',
    'get_optional_schema'
]
