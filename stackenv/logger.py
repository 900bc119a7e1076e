import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    """
    Uvicorn logs the message a second time in the extra `color_message`, but we don't
    need it. This processor drops the key from the event dict if it exists.
    """
    event_dict.pop("color_message", None)
    return event_dict


def setup_logging(json_logs: bool = False, log_level: str = "INFO", force: bool = False):
    """
    Configure structlog for the stackenv package.

    Without `force`, handlers already installed on the root logger belong to
    the host application and are left untouched: events are then rendered to
    a string and handed to those handlers.
    """

    root_logger = logging.getLogger()

    if not force:
        # Leave an application that already wired structlog on the root logger alone
        for handler in root_logger.handlers:
            if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
                return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    if root_logger.handlers and not force:
        structlog.configure(
            processors=shared_processors + [
                structlog.processors.JSONRenderer() if json_logs
                else structlog.dev.ConsoleRenderer(colors=False),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        return

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    # Configuration errors are reported on stderr so stdout stays usable for the CLI
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class StackEnvStructLogger:
    """
    Structured logger for the stackenv package.

    `bind` returns a new logger carrying the extra key/values, so components can
    keep their own bound instance (e.g. ``component="ServiceRegistry"``).
    """

    def __init__(self, log_name: str = "stackenv", context: dict | None = None):
        self.log_name = log_name
        self.context = dict(context or {})
        # Lazy proxy: the configuration is resolved on first use, not here
        self.logger = structlog.stdlib.get_logger(log_name, **self.context)

    def bind(self, **new_values: Any) -> "StackEnvStructLogger":
        """Return a logger with the given values bound to every event."""
        return StackEnvStructLogger(self.log_name, {**self.context, **new_values})

    @staticmethod
    def bind_context(**new_values: Any):
        """Bind values to the structlog context variables"""
        structlog.contextvars.bind_contextvars(**new_values)

    @staticmethod
    def unbind_context(*keys: str):
        """Unbind keys from the structlog context variables"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_stackenv_logger(**context: Any) -> StackEnvStructLogger:
    """
    Get the package logger, optionally bound to some context.

    Args:
        **context: Key-value pairs bound to every event of the returned logger

    Returns:
        StackEnvStructLogger: The (bound) package logger
    """
    logger = StackEnvStructLogger("stackenv")
    if context:
        return logger.bind(**context)
    return logger


def init_logger(config, force: bool = False) -> StackEnvStructLogger:
    """
    Initialize the structured logger for the stackenv package.

    Args:
        config: LoggingConfig with the level and renderer settings
        force: Reconfigure even if structlog handlers are already installed

    Returns:
        StackEnvStructLogger: Configured structured logger instance
    """
    setup_logging(json_logs=config.json_logs, log_level=config.level, force=force)

    return StackEnvStructLogger("stackenv")
