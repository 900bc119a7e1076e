#!/usr/bin/env python3
"""
Command line checker for the environment configuration.

    python -m stackenv check [--env-file FILE]
    python -m stackenv list  [--env-file FILE]

`check` exits with status 1 and prints every violation when the
environment is invalid, so it can gate a deployment.
"""

import argparse
import os
import sys

from stackenv.config.core import (
    ActivationMode, ProcessEnvironmentProvider, FileEnvironmentProvider,
    LayeredEnvironmentProvider, compose, visibility_of
)
from stackenv.config.services import default_registry
from stackenv.config.system import LoggingConfig, LogLevel
from stackenv.core.exceptions import ConfigurationError, EnvironmentFileError
from stackenv.env import create_env
from stackenv.logger import init_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stackenv", description="Validate environment configuration")
    parser.add_argument(
        "command",
        nargs="?",
        default="check",
        choices=["check", "list"],
        help="check: validate the environment, list: show the rules that apply"
    )
    parser.add_argument("--env-file", help="YAML file with variables, overridden by the process environment")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=[level.value for level in LogLevel],
        help="Log level (defaults to STACKENV_LOG_LEVEL or INFO)"
    )
    parser.add_argument("--json-logs", action="store_true", help="Render logs as JSON")
    return parser


def read_environment(env_file=None, environ=None):
    """Snapshot of the process environment, layered over `env_file` if given."""
    process = ProcessEnvironmentProvider(environ)
    if env_file is None:
        return process.get_snapshot()
    return LayeredEnvironmentProvider(FileEnvironmentProvider(env_file), process).get_snapshot()


def list_rules(environment, out=None):
    """Print one line per applicable variable: name, visibility, origin, constraint."""
    out = out or sys.stdout
    registry = default_registry()
    rule_set = compose(registry, ActivationMode.from_environment(environment), environment)
    for name, rule in rule_set.items():
        origin = rule_set.service_of(name) or rule_set.origin(name).value
        print(f"{name}\t{visibility_of(name).value}\t{origin}\t{rule.description}", file=out)


def main(argv=None, environ=None) -> int:
    args = build_parser().parse_args(argv)

    logging_config = LoggingConfig.from_environment(os.environ if environ is None else environ)
    if args.log_level or args.json_logs:
        logging_config = LoggingConfig(
            level=args.log_level or logging_config.level,
            json_logs=args.json_logs or logging_config.json_logs
        )
    init_logger(logging_config, force=True)

    try:
        environment = read_environment(args.env_file, environ)
    except EnvironmentFileError as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.command == "list":
        list_rules(environment)
        return 0

    try:
        config = create_env(environment)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"OK: {len(config)} variables validated "
          f"({len(config.server)} server, {len(config.client)} client)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
