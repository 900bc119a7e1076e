"""
Environment variable validation exceptions.

Individual violations are exceptions so they can be raised on their own, but
the loader never raises them one at a time: it collects every violation of a
run into a single ConfigurationError.
"""

from .base import StackEnvError
from ..enums.env import ViolationCode


class EnvVariableError(StackEnvError):
    """Base exception for a single invalid environment variable."""

    code = ViolationCode.FORMAT

    def __init__(self, variable: str, reason: str):
        self.variable = variable
        self.reason = reason
        super().__init__(f"{variable}: {reason}")

    def _key(self):
        return (type(self), self.variable, self.code, self.reason)

    def __eq__(self, other):
        if not isinstance(other, EnvVariableError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"{type(self).__name__}({self.variable!r}, {self.reason!r})"


class MissingRequiredVariable(EnvVariableError):
    """Raised when a required variable is not set."""

    code = ViolationCode.MISSING

    def __init__(self, variable: str):
        super().__init__(variable, "required variable is not set")


class EmptyValue(EnvVariableError):
    """Raised when a variable is set to an empty string but must not be empty."""

    code = ViolationCode.EMPTY

    def __init__(self, variable: str):
        super().__init__(variable, "value must not be empty")


class FormatViolation(EnvVariableError):
    """Raised when a value does not satisfy a format constraint."""

    code = ViolationCode.FORMAT

    def __init__(self, variable: str, constraint: str, expected: str):
        self.constraint = constraint
        self.expected = expected
        super().__init__(variable, f"{constraint} violation, expected {expected}")


class ConfigurationError(StackEnvError):
    """
    Aggregated environment configuration failure.

    Carries every violation found in one validation pass. Startup must stop
    when this is raised.
    """

    def __init__(self, violations: list):
        self.violations = list(violations)
        lines = [f"  - {violation}" for violation in self.violations]
        message = f"Invalid environment configuration ({len(self.violations)} problem(s)):"
        super().__init__("\n".join([message] + lines))

    @property
    def variables(self) -> list:
        """Names of the invalid variables, in the order they were checked."""
        seen = []
        for violation in self.violations:
            if violation.variable not in seen:
                seen.append(violation.variable)
        return seen

    def for_variable(self, variable: str) -> list:
        """All violations reported for one variable."""
        return [v for v in self.violations if v.variable == variable]

    def __eq__(self, other):
        if not isinstance(other, ConfigurationError):
            return NotImplemented
        return self.violations == other.violations

    def __hash__(self):
        return hash(tuple(self.violations))
