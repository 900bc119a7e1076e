"""
Server/client visibility partition.

Only variables whose name carries the public prefix may reach client code;
everything else stays on the server.
"""

from typing import Tuple

from .composer import RuleSet
from stackenv.core.enums import Visibility

PUBLIC_PREFIX = "NEXT_PUBLIC_"


def _check_prefix(public_prefix: str):
    if not public_prefix:
        raise ValueError("public_prefix must not be empty")


def visibility_of(name: str, public_prefix: str = PUBLIC_PREFIX) -> Visibility:
    """Visibility of a variable, derived from its name only."""
    _check_prefix(public_prefix)
    if name.startswith(public_prefix):
        return Visibility.CLIENT
    return Visibility.SERVER


def partition(rule_set: RuleSet, public_prefix: str = PUBLIC_PREFIX) -> Tuple[RuleSet, RuleSet]:
    """
    Split a rule set into server-only and client-exposed rules.

    Every rule lands in exactly one of the two sets and both keep the input
    order.

    Returns:
        (server_rules, client_rules)
    """
    _check_prefix(public_prefix)
    if not isinstance(rule_set, RuleSet):
        rule_set = RuleSet(rule_set)

    client_names = [name for name in rule_set
                    if visibility_of(name, public_prefix) == Visibility.CLIENT]
    server_names = [name for name in rule_set
                    if visibility_of(name, public_prefix) == Visibility.SERVER]

    return rule_set.subset(server_names), rule_set.subset(client_names)
