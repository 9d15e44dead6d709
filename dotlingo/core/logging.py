"""dotlingo structured logging module.

Importing this module configures nothing. Library modules log through
structlog and inherit whatever configuration the host application set up.
Applications without their own setup can call configure_logging().
"""

import logging
import inspect
import structlog
from structlog.stdlib import BoundLogger
from .config import settings

logger: BoundLogger = structlog.stdlib.get_logger()


def configure_logging() -> BoundLogger:
    """Configure structlog and stdlib logging from settings.

    Opt-in for applications: renders to the console in development and as
    JSON in production, at settings.LOG_LEVEL.
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    The logger is assembled lazily on first use, so configuration applied
    after import still takes effect.
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    module = inspect.getmodule(frame)

    if module:
        module_name = module.__name__

        context = {
            "component": module_name.split(".")[-1],
            "module_path": module_name,
        }

        return structlog.stdlib.get_logger(**context)

    return structlog.stdlib.get_logger(component="unknown")
