"""Scoped context binding for structured logging.

Binds an operation scope (and a correlation ID) to every log entry emitted
while the operation runs. Scopes nest: an inner scope keeps the outer
correlation ID and records the full chain in ``scope_path``.

Usage:
    from infrastructure.logging import bind_scope

    with bind_scope("ResourceLoader.load_resources", source_count=2):
        with bind_scope("ResourceLoader.load_resource", source=url):
            logger.debug("loading_resource")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional
import structlog

SCOPE_SEPARATOR = " > "


@contextmanager
def bind_scope(
    scope: str,
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind an operation scope to all logs within the context manager.

    Args:
        scope: Name of the operation (e.g., "ResourceLoader.load_resource").
        correlation_id: Identifier shared by every log of the operation.
            Inherited from an enclosing scope, or auto-generated.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    previous = structlog.contextvars.get_contextvars()

    context: dict[str, Any] = {
        "scope": scope,
        "scope_path": (
            f"{previous['scope_path']}{SCOPE_SEPARATOR}{scope}"
            if previous.get("scope_path")
            else scope
        ),
        "correlation_id": correlation_id
        or previous.get("correlation_id")
        or str(uuid.uuid4()),
    }
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        # Restore whatever the enclosing scope had bound for these keys
        structlog.contextvars.unbind_contextvars(*context.keys())
        restored = {key: previous[key] for key in context if key in previous}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


def get_scope() -> Optional[str]:
    """Get the innermost active scope name.

    Returns:
        The scope name if inside bind_scope(), None otherwise.
    """
    return structlog.contextvars.get_contextvars().get("scope")


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_scope_context() -> None:
    """Clear all scoped context from the logging context.

    Prevents context leaking between unrelated operations.
    """
    structlog.contextvars.clear_contextvars()
