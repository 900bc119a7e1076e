"""
Environment validation.

This module applies the composed rules to the environment snapshot and
turns the outcome into a ValidatedConfig or one aggregated
ConfigurationError.
"""

from typing import Any, Dict, List, Mapping, Optional

from .composer import RuleSet
from .validated import ValidatedConfig
from stackenv.core.exceptions import (
    ConfigurationError, EnvVariableError, PartitionError
)
from stackenv.logger import get_stackenv_logger


class ValidationResult:
    """Result of environment validation."""

    def __init__(self, config: Optional[ValidatedConfig] = None,
                 errors: Optional[List[EnvVariableError]] = None):
        self.config = config
        self.errors = errors or []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, error: EnvVariableError):
        """Add a validation error."""
        self.errors.append(error)
        self.config = None

    def raise_for_errors(self) -> ValidatedConfig:
        """Return the config, or raise the aggregated ConfigurationError."""
        if self.errors:
            raise ConfigurationError(self.errors)
        return self.config

    def __bool__(self):
        return self.is_valid

    def __eq__(self, other):
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self.config == other.config and self.errors == other.errors


class EnvValidator:
    """
    Validates an environment snapshot against server and client rules.

    Every variable is checked; a failure never stops the pass, so a single
    run reports all missing and malformed variables.
    """

    def __init__(self, empty_string_as_unset: bool = False):
        """
        Parameters
        ----------
        empty_string_as_unset : bool
            Treat ``VAR=""`` exactly like an unset variable
        """
        self.empty_string_as_unset = empty_string_as_unset
        self.logger = get_stackenv_logger(component="EnvValidator")

    def validate(self, server_rules: RuleSet, client_rules: RuleSet,
                 raw_environment: Mapping[str, str]) -> ValidationResult:
        """
        Validate the environment without raising.

        Raises:
            PartitionError: If a variable appears in both rule sets
        """
        overlap = [name for name in server_rules if name in client_rules]
        if overlap:
            raise PartitionError(overlap)

        values: Dict[str, Any] = {}
        errors: List[EnvVariableError] = []

        for rules in (server_rules, client_rules):
            for name, rule in rules.items():
                raw = raw_environment.get(name)
                if raw == "" and self.empty_string_as_unset:
                    raw = None
                value, violations = rule.check(name, raw)
                if violations:
                    errors.extend(violations)
                else:
                    values[name] = value

        if errors:
            self.logger.error("Environment validation failed",
                              violations=[(e.variable, e.code.value) for e in errors])
            return ValidationResult(errors=errors)

        config = ValidatedConfig(values, client_names=list(client_rules))
        self.logger.info("Environment validated",
                         server_variables=len(server_rules),
                         client_variables=len(client_rules))
        return ValidationResult(config=config)

    def load(self, server_rules: RuleSet, client_rules: RuleSet,
             raw_environment: Mapping[str, str]) -> ValidatedConfig:
        """
        Validate the environment and return the typed configuration.

        Raises:
            ConfigurationError: With every violation found
        """
        return self.validate(server_rules, client_rules, raw_environment).raise_for_errors()


def load(server_rules: RuleSet, client_rules: RuleSet,
         raw_environment: Mapping[str, str],
         empty_string_as_unset: bool = False) -> ValidatedConfig:
    """Validate with a default EnvValidator, see EnvValidator.load."""
    return EnvValidator(empty_string_as_unset).load(server_rules, client_rules, raw_environment)
