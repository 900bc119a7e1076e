"""
Environment variable rules.

A Rule is the constraint attached to one variable name. Rules are plain
frozen values, the name they apply to is the key they are stored under in a
schema mapping.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Optional, Tuple, Union
from urllib.parse import urlsplit

from stackenv.core.enums import RuleKind
from stackenv.core.exceptions import (
    EnvVariableError, MissingRequiredVariable, EmptyValue, FormatViolation
)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Rule:
    """Validation constraint for a single environment variable."""
    kind: RuleKind = RuleKind.STRING
    min_length: int = 0
    prefixes: Tuple[str, ...] = ()
    suffixes: Tuple[str, ...] = ()
    choices: Union[Tuple[str, ...], type, None] = None
    optional: bool = False

    def as_optional(self) -> "Rule":
        """Copy of this rule that accepts an unset variable."""
        return replace(self, optional=True)

    @property
    def allowed_values(self) -> Tuple[str, ...]:
        if self.choices is None:
            return ()
        if isinstance(self.choices, type) and issubclass(self.choices, Enum):
            return tuple(member.value for member in self.choices)
        return tuple(self.choices)

    @property
    def description(self) -> str:
        """Human readable summary of the constraint."""
        parts = [self.kind.value]
        if self.min_length == 1:
            parts.append("non-empty")
        elif self.min_length > 1:
            parts.append(f"min length {self.min_length}")
        if self.prefixes:
            parts.append("starts with " + " or ".join(repr(p) for p in self.prefixes))
        if self.suffixes:
            parts.append("ends with " + " or ".join(repr(s) for s in self.suffixes))
        if self.kind == RuleKind.ENUM:
            parts.append("one of " + ", ".join(repr(v) for v in self.allowed_values))
        parts.append("optional" if self.optional else "required")
        return ", ".join(parts)

    def check(self, name: str, raw: Optional[str]) -> Tuple[Any, List[EnvVariableError]]:
        """
        Validate a raw environment value.

        Parameters
        ----------
        name : str
            The variable name, used in the reported violations
        raw : str or None
            The raw value, None when the variable is unset

        Returns
        -------
        tuple
            The typed value (None when unset or invalid) and the list of
            violations, empty on success
        """
        if raw is None:
            if self.optional:
                return None, []
            return None, [MissingRequiredVariable(name)]

        if raw == "" and self.min_length >= 1:
            return None, [EmptyValue(name)]

        errors = []

        if len(raw) < self.min_length:
            errors.append(FormatViolation(
                name, "min_length", f"at least {self.min_length} characters"
            ))

        if self.prefixes and not raw.startswith(self.prefixes):
            errors.append(FormatViolation(
                name, "prefix", "a value starting with " + " or ".join(repr(p) for p in self.prefixes)
            ))

        if self.suffixes and not raw.endswith(self.suffixes):
            errors.append(FormatViolation(
                name, "suffix", "a value ending with " + " or ".join(repr(s) for s in self.suffixes)
            ))

        if self.kind == RuleKind.URL and not is_absolute_url(raw):
            errors.append(FormatViolation(name, "url", "a well-formed absolute URL"))

        if self.kind == RuleKind.EMAIL and not EMAIL_PATTERN.match(raw):
            errors.append(FormatViolation(name, "email", "an e-mail address"))

        if self.kind == RuleKind.ENUM and raw not in self.allowed_values:
            errors.append(FormatViolation(
                name, "enum", "one of " + ", ".join(repr(v) for v in self.allowed_values)
            ))

        if errors:
            return None, errors
        return self._coerce(raw), []

    def _coerce(self, raw: str) -> Any:
        if self.kind == RuleKind.ENUM and isinstance(self.choices, type):
            return self.choices(raw)
        return raw


def is_absolute_url(value: str) -> bool:
    """
    True for absolute URLs: a scheme followed by an authority or a path.

    ``sqlite:///app.db`` and ``postgresql:///app?host=/var/run/postgresql``
    have an empty network location and are accepted.
    """
    if any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        # Accessing the port validates it
        parts.port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def _as_tuple(value) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def string(min_length: int = 1, prefix=None, suffix=None, optional: bool = False) -> Rule:
    """
    String rule.

    Args:
        min_length: Minimum length, 1 means non-empty and 0 accepts ""
        prefix: Literal prefix, or a sequence of accepted prefixes
        suffix: Literal suffix, or a sequence of accepted suffixes
        optional: Whether the variable may be unset
    """
    return Rule(
        kind=RuleKind.STRING,
        min_length=min_length,
        prefixes=_as_tuple(prefix),
        suffixes=_as_tuple(suffix),
        optional=optional
    )


def url(optional: bool = False) -> Rule:
    """Non-empty, well-formed absolute URL."""
    return Rule(kind=RuleKind.URL, min_length=1, optional=optional)


def email(optional: bool = False) -> Rule:
    """Non-empty e-mail address."""
    return Rule(kind=RuleKind.EMAIL, min_length=1, optional=optional)


def one_of(choices, optional: bool = False) -> Rule:
    """
    Enum membership rule.

    `choices` is either an Enum subclass (the validated value is then the
    enum member) or a sequence of literal strings.
    """
    if not (isinstance(choices, type) and issubclass(choices, Enum)):
        choices = tuple(choices)
        if not choices:
            raise ValueError("one_of() needs at least one choice")
    return Rule(kind=RuleKind.ENUM, choices=choices, optional=optional)
