"""
Startup entry point.

create_env runs the whole pipeline once:
snapshot -> activation mode -> compose -> partition -> validate.
"""

import threading
from typing import Mapping, Optional

from stackenv.config.core import (
    ActivationMode, EnvValidator, ProcessEnvironmentProvider, Rule, ServiceRegistry,
    ValidatedConfig, compose, partition, PUBLIC_PREFIX
)
from stackenv.config.services import default_registry, REQUIRED_SCHEMA, OPTIONAL_SCHEMA
from stackenv.logger import get_stackenv_logger

logger = get_stackenv_logger(component="Env")

_env: Optional[ValidatedConfig] = None
_env_lock = threading.Lock()


def create_env(environment: Optional[Mapping[str, str]] = None,
               registry: Optional[ServiceRegistry] = None,
               required_rules: Optional[Mapping[str, Rule]] = None,
               optional_rules: Optional[Mapping[str, Rule]] = None,
               public_prefix: str = PUBLIC_PREFIX,
               empty_string_as_unset: bool = False) -> ValidatedConfig:
    """
    Validate the environment and build the application configuration.

    Parameters
    ----------
    environment : Mapping, optional
        Raw environment; defaults to a snapshot of ``os.environ``
    registry : ServiceRegistry, optional
        Services to consider; defaults to the built-in catalog
    required_rules, optional_rules : Mapping, optional
        Override the built-in always-present rules
    public_prefix : str
        Name prefix of the variables exposed to client code
    empty_string_as_unset : bool
        Treat empty values as unset

    Returns
    -------
    ValidatedConfig
        The immutable configuration

    Raises
    ------
    ConfigurationError
        With every violation found; startup must not continue
    """
    snapshot = ProcessEnvironmentProvider(environment).get_snapshot()
    if registry is None:
        registry = default_registry()
    if required_rules is None:
        required_rules = REQUIRED_SCHEMA
    if optional_rules is None:
        optional_rules = OPTIONAL_SCHEMA

    activation_mode = ActivationMode.from_environment(snapshot)
    rule_set = compose(registry, activation_mode, snapshot, required_rules, optional_rules)

    overlaps = registry.check_collisions(required_rules, optional_rules)
    if overlaps:
        logger.warning("Service variables shadowed by always-present rules", variables=overlaps)

    server_rules, client_rules = partition(rule_set, public_prefix)

    logger.debug("Validating environment",
                 granular_flags_enabled=activation_mode.granular_flags_enabled,
                 active_services=list(rule_set.active_services))

    validator = EnvValidator(empty_string_as_unset=empty_string_as_unset)
    return validator.load(server_rules, client_rules, snapshot)


def get_env() -> ValidatedConfig:
    """
    Process-wide configuration built from ``os.environ`` on first use.

    Later calls return the same object; changes to ``os.environ`` after the
    first call are not observed.
    """
    global _env
    with _env_lock:
        if _env is None:
            _env = create_env()
        return _env


def reset_env():
    """Forget the cached configuration so the next get_env() rebuilds it."""
    global _env
    with _env_lock:
        _env = None
