"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_scope() context manager
- get_scope()
- get_correlation_id()
- clear_scope_context()
- Nesting, isolation and cleanup
"""

import uuid

import pytest
import structlog
from infrastructure.logging.context import (
    bind_scope,
    clear_scope_context,
    get_correlation_id,
    get_scope,
)


@pytest.mark.unit
class TestBindScope:
    """Test suite for bind_scope context manager."""

    def test_bind_scope_sets_scope(self):
        """The scope name is bound while the block runs."""
        with bind_scope("ResourceLoader.load_resource"):
            assert get_scope() == "ResourceLoader.load_resource"
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("scope_path") == "ResourceLoader.load_resource"

    def test_bind_scope_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_scope("op"):
            correlation_id = get_correlation_id()
            assert correlation_id is not None
            uuid.UUID(correlation_id)

    def test_bind_scope_uses_provided_correlation_id(self):
        """Provided correlation ID is used instead of generating one."""
        with bind_scope("op", correlation_id="corr-123"):
            assert get_correlation_id() == "corr-123"

    def test_bind_scope_binds_extra_context(self):
        """Extra keyword arguments are bound to context."""
        with bind_scope("op", source="https://example.com/en.json", lang="en"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("source") == "https://example.com/en.json"
            assert ctx.get("lang") == "en"

    def test_bind_scope_clears_after_exit(self):
        """Context is cleared after exiting the context manager."""
        with bind_scope("op", correlation_id="corr-123", lang="en"):
            pass

        assert get_scope() is None
        assert get_correlation_id() is None
        assert "lang" not in structlog.contextvars.get_contextvars()

    def test_nested_scopes(self):
        """Inner scopes keep the outer correlation ID and extend the path."""
        with bind_scope("outer", lang="en"):
            outer_id = get_correlation_id()
            with bind_scope("inner", lang="fa", source="fa.json"):
                ctx = structlog.contextvars.get_contextvars()
                assert get_scope() == "inner"
                assert ctx["scope_path"] == "outer > inner"
                assert ctx["lang"] == "fa"
                assert get_correlation_id() == outer_id

            ctx = structlog.contextvars.get_contextvars()
            assert get_scope() == "outer"
            assert ctx["scope_path"] == "outer"
            assert ctx["lang"] == "en"
            assert "source" not in ctx
            assert get_correlation_id() == outer_id

    def test_bind_scope_cleans_up_on_exception(self):
        """Context is restored even if the block raises."""
        with pytest.raises(RuntimeError):
            with bind_scope("op", lang="en"):
                raise RuntimeError("boom")

        assert get_scope() is None
        assert "lang" not in structlog.contextvars.get_contextvars()


@pytest.mark.unit
class TestClearScopeContext:
    """Test suite for clear_scope_context."""

    def test_clear_scope_context(self):
        """All bound context is removed."""
        structlog.contextvars.bind_contextvars(scope="op", correlation_id="c")
        clear_scope_context()
        assert get_scope() is None
        assert get_correlation_id() is None
