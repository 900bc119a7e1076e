"""
Schema composition.

Builds the rule set to enforce from the required rules, the rules of every
active service and the optional rules. The merge order is fixed (required,
services in registry order, optional) so the resulting rule set, and the
order errors are reported in, is reproducible.
"""

from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

from .registry import ServiceDescriptor, ServiceRegistry
from .rule import Rule
from stackenv.core.enums import RuleOrigin
from stackenv.logger import get_stackenv_logger

TRUTHY = "true"
SERVICES_FLAGS_VARIABLE = "ENABLE_SERVICES_FLAGS"

logger = get_stackenv_logger(component="SchemaComposer")


def is_flag_set(value: Optional[str]) -> bool:
    """
    Exact-string boolean flag.

    Only the literal ``"true"`` enables a flag. ``"1"``, ``"TRUE"``, ``"yes"``
    or ``""`` do not.
    """
    return value == TRUTHY


@dataclass(frozen=True)
class ActivationMode:
    """Whether services need an explicit ``ENABLE_<SERVICE>`` opt-in."""
    granular_flags_enabled: bool = False

    @classmethod
    def from_environment(cls, environment: Mapping[str, str]) -> "ActivationMode":
        return cls(granular_flags_enabled=is_flag_set(environment.get(SERVICES_FLAGS_VARIABLE)))


def is_service_active(descriptor: ServiceDescriptor,
                      activation_mode: ActivationMode,
                      activation_flags: Mapping[str, str]) -> bool:
    """
    Activation predicate of a service.

    With granular flags off every service is active and the flag mapping is
    not read at all.
    """
    return (not activation_mode.granular_flags_enabled
            or is_flag_set(activation_flags.get(descriptor.flag_name)))


class RuleSet(Mapping):
    """
    Immutable, ordered mapping of variable name to Rule.

    Also remembers where each rule came from, which is used for reporting.
    """

    def __init__(self, rules: Mapping[str, Rule] = None,
                 origins: Mapping[str, Tuple[RuleOrigin, Optional[str]]] = None,
                 active_services: List[str] = None):
        rules = OrderedDict(rules or {})
        origins = dict(origins or {})
        self._rules = MappingProxyType(rules)
        self._origins = MappingProxyType(
            {name: origins.get(name, (RuleOrigin.REQUIRED, None)) for name in rules}
        )
        self._active_services = tuple(active_services or ())

    def __getitem__(self, name: str) -> Rule:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def origin(self, name: str) -> RuleOrigin:
        return self._origins[name][0]

    def service_of(self, name: str) -> Optional[str]:
        """Service that contributed a rule, None for required/optional rules."""
        return self._origins[name][1]

    @property
    def active_services(self) -> Tuple[str, ...]:
        return self._active_services

    def subset(self, names) -> "RuleSet":
        """New rule set restricted to `names`, keeping this set's order."""
        wanted = set(names)
        keep = [name for name in self._rules if name in wanted]
        return RuleSet(
            OrderedDict((name, self._rules[name]) for name in keep),
            {name: self._origins[name] for name in keep},
            list(self._active_services)
        )

    def __eq__(self, other):
        if isinstance(other, RuleSet):
            return (list(self._rules.items()) == list(other._rules.items())
                    and dict(self._origins) == dict(other._origins))
        if isinstance(other, Mapping):
            return dict(self._rules) == dict(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._rules.items()))

    def __repr__(self):
        return f"RuleSet({list(self._rules)!r})"


def compose(registry: ServiceRegistry,
            activation_mode: ActivationMode,
            activation_flags: Mapping[str, str],
            required_rules: Mapping[str, Rule] = None,
            optional_rules: Mapping[str, Rule] = None) -> RuleSet:
    """
    Compose the rule set to enforce.

    Parameters
    ----------
    registry : ServiceRegistry
        Known services, merged in registration order
    activation_mode : ActivationMode
        Whether per-service opt-in is active
    activation_flags : Mapping
        Lookup of ``ENABLE_<SERVICE>`` flag values, usually the environment
        snapshot itself
    required_rules : Mapping, optional
        Rules always enforced, defaults to the built-in required schema
    optional_rules : Mapping, optional
        Optional rules always included, defaults to the built-in optional schema

    Returns
    -------
    RuleSet
        Required rules, then active services' rules, then optional rules.
        When a name is merged twice the later rule wins and keeps the first
        position.
    """
    if required_rules is None or optional_rules is None:
        from stackenv.config.services.schema import REQUIRED_SCHEMA, OPTIONAL_SCHEMA
        required_rules = REQUIRED_SCHEMA if required_rules is None else required_rules
        optional_rules = OPTIONAL_SCHEMA if optional_rules is None else optional_rules

    rules: Dict[str, Rule] = OrderedDict()
    origins: Dict[str, Tuple[RuleOrigin, Optional[str]]] = {}
    active: List[str] = []

    def merge(pieces: Mapping[str, Rule], origin: RuleOrigin, service: Optional[str] = None):
        for name, rule in pieces.items():
            if name in rules:
                previous_origin, previous_service = origins[name]
                logger.warning("Rule overridden by a later merge",
                               variable=name,
                               previous_origin=previous_origin.value,
                               previous_service=previous_service,
                               origin=origin.value,
                               service=service)
            rules[name] = rule
            origins[name] = (origin, service)

    merge(required_rules, RuleOrigin.REQUIRED)

    for descriptor in registry:
        if is_service_active(descriptor, activation_mode, activation_flags):
            active.append(descriptor.name)
            merge(descriptor.rules, RuleOrigin.SERVICE, descriptor.name)

    merge(optional_rules, RuleOrigin.OPTIONAL)

    logger.debug("Rule set composed",
                 granular_flags_enabled=activation_mode.granular_flags_enabled,
                 active_services=active,
                 variables=len(rules))

    return RuleSet(rules, origins, active)
