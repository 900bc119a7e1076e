from stackenv.config import (
    Rule, string, url, email, one_of,
    ServiceDescriptor, ServiceRegistry,
    ActivationMode, RuleSet, compose, partition, visibility_of, PUBLIC_PREFIX,
    ValidatedConfig, EnvValidator, ValidationResult, load,
    ProcessEnvironmentProvider, FileEnvironmentProvider, LayeredEnvironmentProvider,
    Service, Runtime, default_registry, LoggingConfig
)
from stackenv.core.exceptions import (
    StackEnvError, ConfigurationError, MissingRequiredVariable, EmptyValue,
    FormatViolation, RegistryCollisionError
)
from stackenv.env import create_env, get_env, reset_env
from stackenv.logger import init_logger, get_stackenv_logger

__version__ = "0.1.0"

# Initialize logger
log = init_logger(LoggingConfig.from_environment())
