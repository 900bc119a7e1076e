"""
Environment snapshot providers.

The environment is read once and frozen; validation only ever sees the
snapshot, never the live process environment.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

import yaml

from stackenv.core.exceptions import EnvironmentFileError
from stackenv.logger import get_stackenv_logger


class EnvironmentProvider(ABC):
    """
    Abstract base class for environment providers.

    Defines the interface that all environment providers must implement.
    """

    def __init__(self, source: str):
        self.source = source
        self.logger = get_stackenv_logger(component=f"EnvironmentProvider_{source}")

    @abstractmethod
    def get_snapshot(self) -> Mapping[str, str]:
        """Get the read-only environment snapshot."""
        pass


class ProcessEnvironmentProvider(EnvironmentProvider):
    """
    Snapshot of the process environment, taken at construction.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        super().__init__("process")
        source = os.environ if environ is None else environ
        self._snapshot = MappingProxyType(dict(source))

    def get_snapshot(self) -> Mapping[str, str]:
        return self._snapshot


class FileEnvironmentProvider(EnvironmentProvider):
    """
    Environment read from a YAML file mapping variable names to values.

    Scalars are kept as the literal text written in the file, without YAML
    type resolution: ``TRUE``, ``yes`` and ``0123`` stay exactly that, like
    they would in the process environment. An empty value is the empty
    string.
    """

    def __init__(self, path):
        super().__init__("file")
        self.path = Path(path)
        self._snapshot: Optional[Mapping[str, str]] = None

    def get_snapshot(self) -> Mapping[str, str]:
        if self._snapshot is None:
            self._snapshot = MappingProxyType(self._load())
        return self._snapshot

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            raise EnvironmentFileError(str(self.path), "file does not exist")

        try:
            with open(self.path, 'r') as f:
                # BaseLoader resolves every scalar to str
                data = yaml.load(f, Loader=yaml.BaseLoader)
        except yaml.YAMLError as e:
            raise EnvironmentFileError(str(self.path), f"invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise EnvironmentFileError(
                str(self.path), f"expected a mapping, got {type(data).__name__}"
            )

        values = {}
        for key, value in data.items():
            if isinstance(value, (dict, list)):
                raise EnvironmentFileError(
                    str(self.path), f"value of '{key}' must be a scalar"
                )
            values[key] = value

        self.logger.debug("Environment file loaded", path=str(self.path), variables=len(values))
        return values


class LayeredEnvironmentProvider(EnvironmentProvider):
    """
    Combination of providers where later providers override earlier ones.
    """

    def __init__(self, *providers: EnvironmentProvider):
        super().__init__("layered")
        self.providers = list(providers)
        self._snapshot: Optional[Mapping[str, str]] = None

    def get_snapshot(self) -> Mapping[str, str]:
        if self._snapshot is None:
            merged: Dict[str, str] = {}
            for provider in self.providers:
                merged.update(provider.get_snapshot())
            self._snapshot = MappingProxyType(merged)
        return self._snapshot
