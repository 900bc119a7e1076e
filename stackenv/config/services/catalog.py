"""
Built-in service catalog.

When ENABLE_SERVICES_FLAGS is "true", each service is validated only if its
own ENABLE_<SERVICE> flag is "true" as well. Otherwise every service below is
validated.

To add an integration, add a member to Service and a descriptor to
SERVICE_DESCRIPTORS.
"""

from enum import Enum
from typing import List

from ..core.registry import ServiceDescriptor, ServiceRegistry
from ..core.rule import string, url, email


class Service(Enum):
    """Known optional integrations."""
    CLERK = "CLERK"
    RESEND = "RESEND"
    DATABASE = "DATABASE"
    STRIPE = "STRIPE"
    BETTERSTACK = "BETTERSTACK"
    ARCJET = "ARCJET"
    SVIX = "SVIX"
    POSTHOG = "POSTHOG"
    GA = "GA"


SERVICE_DESCRIPTORS: List[ServiceDescriptor] = [
    ServiceDescriptor(
        Service.CLERK,
        {
            'CLERK_SECRET_KEY': string(prefix='sk_'),
            'CLERK_WEBHOOK_SECRET': string(prefix='whsec_'),
            'NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY': string(prefix='pk_'),
            'NEXT_PUBLIC_CLERK_SIGN_IN_URL': string(prefix='/'),
            'NEXT_PUBLIC_CLERK_SIGN_UP_URL': string(prefix='/'),
            'NEXT_PUBLIC_CLERK_AFTER_SIGN_IN_URL': string(prefix='/'),
            'NEXT_PUBLIC_CLERK_AFTER_SIGN_UP_URL': string(prefix='/'),
        },
        "Authentication"
    ),
    ServiceDescriptor(
        Service.RESEND,
        {
            'RESEND_AUDIENCE_ID': string(),
            'RESEND_FROM': email(),
            'RESEND_TOKEN': string(prefix='re_'),
        },
        "Transactional e-mail"
    ),
    ServiceDescriptor(
        Service.DATABASE,
        {
            'DATABASE_URL': url(),
        },
        "Database"
    ),
    ServiceDescriptor(
        Service.STRIPE,
        {
            'STRIPE_SECRET_KEY': string(prefix='sk_'),
            'STRIPE_WEBHOOK_SECRET': string(prefix='whsec_'),
        },
        "Payments"
    ),
    ServiceDescriptor(
        Service.BETTERSTACK,
        {
            'BETTERSTACK_API_KEY': string(),
            'BETTERSTACK_URL': url(),
        },
        "Logging"
    ),
    ServiceDescriptor(
        Service.ARCJET,
        {
            'ARCJET_KEY': string(prefix='ajkey_'),
        },
        "Bot protection"
    ),
    ServiceDescriptor(
        Service.SVIX,
        {
            'SVIX_TOKEN': string(prefix=('sk_', 'testsk_')),
        },
        "Webhooks"
    ),
    ServiceDescriptor(
        Service.POSTHOG,
        {
            'NEXT_PUBLIC_POSTHOG_KEY': string(prefix='phc_'),
            'NEXT_PUBLIC_POSTHOG_HOST': url(),
        },
        "Product analytics"
    ),
    ServiceDescriptor(
        Service.GA,
        {
            'NEXT_PUBLIC_GA_MEASUREMENT_ID': string(prefix='G-'),
        },
        "Google Analytics"
    ),
]


def default_registry() -> ServiceRegistry:
    """Fresh registry holding the built-in services, in catalog order."""
    return ServiceRegistry(SERVICE_DESCRIPTORS)


def list_available_services() -> List[str]:
    """Names of the built-in services."""
    return [service.value for service in Service]
