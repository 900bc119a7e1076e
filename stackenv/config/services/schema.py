"""
Rules that do not belong to any service.

REQUIRED_SCHEMA is always enforced. OPTIONAL_SCHEMA is always included but
none of its variables has to be set.
"""

from enum import Enum
from types import MappingProxyType

from ..core.rule import string, url, one_of


class Runtime(Enum):
    """Server runtime the application is executing in."""
    NODEJS = "nodejs"
    EDGE = "edge"


REQUIRED_SCHEMA = MappingProxyType({
    'NEXT_PUBLIC_APP_URL': url(),
    'NEXT_PUBLIC_WEB_URL': url(),
    'NEXT_PUBLIC_DOCS_URL': url(),
    'FLAGS_SECRET': string(),
})

OPTIONAL_SCHEMA = MappingProxyType({
    'ANALYZE': string(min_length=0, optional=True),
    'SENTRY_ORG': string(optional=True),
    'SENTRY_PROJECT': string(optional=True),
    'VERCEL': string(min_length=0, optional=True),
    'NEXT_RUNTIME': one_of(Runtime, optional=True),
    'NEXT_PUBLIC_VERCEL_PROJECT_PRODUCTION_URL': url(optional=True),
})


def get_required_schema() -> dict:
    """Get a copy of the required rules."""
    return dict(REQUIRED_SCHEMA)


def get_optional_schema() -> dict:
    """Get a copy of the optional rules."""
    return dict(OPTIONAL_SCHEMA)
