"""Structlog configuration for the translation resolver.

Every log entry carries the scope fields bound with ``bind_scope()``
(``scope``, ``scope_path``, ``correlation_id`` and any extra keys such as
``source`` or ``lang``), a level and a timestamp. Output is rendered for
humans in development and as JSON lines in production. Nothing is emitted
while pytest is running.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("resource_loaded", source=url)

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import Settings
from infrastructure.configuration import settings as default_settings

# Above CRITICAL, so no stdlib handler ever emits
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def build_processors(prod_mode: bool) -> List[Processor]:
    """Build the processor chain for the given rendering mode.

    Args:
        prod_mode: Render JSON when True, console output otherwise.

    Returns:
        Processors ending with the renderer.
    """
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        settings: Optional Settings instance. Defaults to the module singleton.
        log_level: Optional override for LOG_LEVEL (DEBUG, INFO, WARNING, ...).
        is_production: Optional override for production mode, which selects
            JSON rendering.

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings

    if _is_test_environment():
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
    else:
        prod_mode = (
            is_production if is_production is not None else settings.is_production
        )
        processors = build_processors(prod_mode)
        effective_log_level = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, effective_log_level, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    logging.root.setLevel(level)

    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last segment of the module name) and
    ``module_path`` (full module name), so entries from
    ``infrastructure.i18n.loader`` carry ``component="loader"``.

    Returns:
        Logger with module context
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None

    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.split(".")[-1],
        module_path=module.__name__,
    )
