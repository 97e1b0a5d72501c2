"""Structured logging infrastructure.

Centralized logging configuration and utilities using structlog.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
    - bind_scope(): Context manager for operation-scoped logging
    - get_scope(): Get the innermost active scope name
    - get_correlation_id(): Get current correlation ID from context
    - clear_scope_context(): Clear all scoped context

Example:
    from infrastructure.logging import bind_scope, get_module_logger

    logger = get_module_logger()

    with bind_scope("ResourceLoader.load_resource", source=url):
        logger.debug("loading_resource")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_scope,
    get_scope,
    get_correlation_id,
    clear_scope_context,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_scope",
    "get_scope",
    "get_correlation_id",
    "clear_scope_context",
]
