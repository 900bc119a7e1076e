"""
Service registry for optional integrations.

This module provides the ordered registry of services whose variables are
only validated when the service is active. Adding an integration means
registering one more descriptor, nothing else changes.
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Union

from .rule import Rule
from stackenv.core.exceptions import (
    RegistryCollisionError, DuplicateServiceError, UnknownServiceError
)
from stackenv.logger import get_stackenv_logger


@dataclass(frozen=True)
class ServiceDescriptor:
    """
    An optional integration and the rules of its variables.

    Activation is not stored here: it is computed by the composer from the
    activation mode and the ``ENABLE_<NAME>`` flag.
    """
    service: Union[Enum, str]
    rules: Mapping[str, Rule] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self):
        # Freeze a private copy so the descriptor cannot change after registration
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @property
    def name(self) -> str:
        if isinstance(self.service, Enum):
            return str(self.service.value)
        return str(self.service)

    @property
    def flag_name(self) -> str:
        """Environment flag that activates the service in granular mode."""
        return f"ENABLE_{self.name}"

    def __hash__(self):
        return hash((self.name, tuple(self.rules.items())))

    def __eq__(self, other):
        if not isinstance(other, ServiceDescriptor):
            return NotImplemented
        return (self.name == other.name
                and list(self.rules.items()) == list(other.rules.items()))


class ServiceRegistry:
    """
    Ordered registry of service descriptors.

    A variable name may be claimed by one service only; registering a
    descriptor that reuses a claimed name fails with RegistryCollisionError.
    """

    def __init__(self, descriptors=None):
        self.logger = get_stackenv_logger(component="ServiceRegistry")
        self._lock = threading.RLock()

        self._services: Dict[str, ServiceDescriptor] = {}
        self._owners: Dict[str, str] = {}

        for descriptor in descriptors or []:
            self.register(descriptor)

    def register(self, descriptor: ServiceDescriptor) -> ServiceDescriptor:
        """
        Register a service at the end of the registry.

        Args:
            descriptor: The service descriptor to append

        Returns:
            The registered descriptor

        Raises:
            DuplicateServiceError: If the service name is already registered
            RegistryCollisionError: If one of its variables is claimed by another service
        """
        with self._lock:
            if descriptor.name in self._services:
                raise DuplicateServiceError(descriptor.name)

            collisions = [name for name in descriptor.rules if name in self._owners]
            if collisions:
                raise RegistryCollisionError(
                    descriptor.name, collisions,
                    {name: self._owners[name] for name in collisions}
                )

            self._services[descriptor.name] = descriptor
            for name in descriptor.rules:
                self._owners[name] = descriptor.name

            self.logger.debug("Service registered",
                              service=descriptor.name,
                              variables=len(descriptor.rules))
            return descriptor

    def get(self, service: Union[Enum, str]) -> ServiceDescriptor:
        """
        Get the descriptor of a registered service.

        Raises:
            UnknownServiceError: If the service is not registered
        """
        name = service.value if isinstance(service, Enum) else service
        with self._lock:
            if name not in self._services:
                raise UnknownServiceError(name)
            return self._services[name]

    def owner_of(self, variable: str) -> Union[str, None]:
        """Name of the service that claims a variable, None if unclaimed."""
        return self._owners.get(variable)

    def names(self) -> List[str]:
        """Service names in registration order."""
        with self._lock:
            return list(self._services.keys())

    def variables(self) -> List[str]:
        """Every variable claimed by a service, in registration order."""
        with self._lock:
            return list(self._owners.keys())

    def check_collisions(self, *rule_sets: Mapping[str, Rule]) -> Dict[str, str]:
        """
        Find service variables that also appear in the given rule sets.

        Returns:
            Mapping of overlapping variable name to the owning service
        """
        overlaps = {}
        for rules in rule_sets:
            for name in rules:
                owner = self._owners.get(name)
                if owner is not None:
                    overlaps[name] = owner
        return overlaps

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        with self._lock:
            return iter(list(self._services.values()))

    def __len__(self) -> int:
        return len(self._services)

    def __contains__(self, service) -> bool:
        name = service.value if isinstance(service, Enum) else service
        return name in self._services
