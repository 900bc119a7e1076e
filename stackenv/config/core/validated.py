"""
Validated configuration object.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator

from stackenv.core.enums import Visibility


class ValidatedConfig(Mapping):
    """
    Immutable result of a successful validation.

    Holds every variable of the composed rule set. Unset optional variables
    are present with the value None. Values can be read by key or as
    attributes (``config.DATABASE_URL``).
    """

    __slots__ = ("_values", "_visibility")

    def __init__(self, values: Mapping[str, Any], client_names: Iterable[str] = ()):
        client_names = set(client_names)
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))
        object.__setattr__(self, "_visibility", MappingProxyType({
            name: Visibility.CLIENT if name in client_names else Visibility.SERVER
            for name in values
        }))

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"No configuration variable named '{name}'") from None

    def __setattr__(self, name, value):
        raise TypeError("ValidatedConfig is immutable")

    def __delattr__(self, name):
        raise TypeError("ValidatedConfig is immutable")

    def __reduce__(self):
        client_names = [name for name, v in self._visibility.items() if v == Visibility.CLIENT]
        return (ValidatedConfig, (dict(self._values), client_names))

    def is_set(self, name: str) -> bool:
        """True if the variable is known and has a value."""
        return self._values.get(name) is not None

    def visibility(self, name: str) -> Visibility:
        return self._visibility[name]

    def _restricted(self, visibility: Visibility) -> "ValidatedConfig":
        names = [name for name, v in self._visibility.items() if v == visibility]
        client = names if visibility == Visibility.CLIENT else ()
        return ValidatedConfig({name: self._values[name] for name in names}, client)

    @property
    def server(self) -> "ValidatedConfig":
        """Server-only variables."""
        return self._restricted(Visibility.SERVER)

    @property
    def client(self) -> "ValidatedConfig":
        """Variables safe to expose to client code."""
        return self._restricted(Visibility.CLIENT)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __eq__(self, other):
        if isinstance(other, ValidatedConfig):
            return (dict(self._values) == dict(other._values)
                    and dict(self._visibility) == dict(other._visibility))
        if isinstance(other, Mapping):
            return dict(self._values) == dict(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(sorted(self._values)))

    def __repr__(self):
        shown = {}
        for name, value in self._values.items():
            if value is not None and self._visibility[name] == Visibility.SERVER:
                shown[name] = "***"
            else:
                shown[name] = value
        return f"ValidatedConfig({shown!r})"
