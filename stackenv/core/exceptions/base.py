"""
Base exception classes for the stackenv package.
"""


class StackEnvError(Exception):
    """Base exception for all stackenv errors."""
    pass


class RegistryError(StackEnvError):
    """Base exception for service registry errors."""
    pass


class RegistryCollisionError(RegistryError):
    """Raised when a service claims a variable already claimed by another service."""

    def __init__(self, service: str, variables: list, owners: dict):
        self.service = service
        self.variables = list(variables)
        self.owners = dict(owners)
        claimed = ", ".join(f"{name} (claimed by {owners[name]})" for name in self.variables)
        super().__init__(f"Service '{service}' declares variables already registered: {claimed}")


class DuplicateServiceError(RegistryError):
    """Raised when a service identifier is registered twice."""

    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Service '{service}' is already registered")


class UnknownServiceError(RegistryError):
    """Raised when looking up a service that is not registered."""

    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Service '{service}' not found")


class PartitionError(StackEnvError):
    """Raised when server and client rule sets overlap."""

    def __init__(self, variables: list):
        self.variables = list(variables)
        super().__init__(
            f"Variables present in both server and client rules: {', '.join(self.variables)}"
        )


class EnvironmentFileError(StackEnvError):
    """Raised when an environment file cannot be read or has the wrong shape."""

    def __init__(self, path: str, reason: str = None):
        self.path = path
        self.reason = reason
        message = f"Cannot load environment file '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
