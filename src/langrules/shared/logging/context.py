"""
Context management for structured logging.
"""

import uuid
from contextvars import ContextVar
from typing import Any, Callable, Optional, TypeVar

import structlog

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_language_id: ContextVar[Optional[str]] = ContextVar("language_id", default=None)
_translator_id: ContextVar[Optional[str]] = ContextVar("translator_id", default=None)

T = TypeVar("T")


def with_request_context(
    correlation_id: Optional[str] = None,
    language_id: Optional[str] = None,
    translator_id: Optional[str] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to add render/sync context to all logs within a function.

    Args:
        correlation_id: Correlation ID for distributed tracing
        language_id: Target language of the operation
        translator_id: Translator performing the operation, if any

    Returns:
        Decorated function with logging context
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        def wrapper(*args: Any, **kwargs: Any) -> T:
            corr_id = correlation_id or generate_correlation_id()

            _correlation_id.set(corr_id)
            if language_id:
                _language_id.set(language_id)
            if translator_id:
                _translator_id.set(translator_id)

            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(correlation_id=corr_id)
            if language_id:
                structlog.contextvars.bind_contextvars(language_id=language_id)
            if translator_id:
                structlog.contextvars.bind_contextvars(translator_id=translator_id)

            try:
                return func(*args, **kwargs)
            finally:
                structlog.contextvars.clear_contextvars()
                _correlation_id.set(None)
                _language_id.set(None)
                _translator_id.set(None)

        return wrapper
    return decorator


def generate_correlation_id() -> str:
    """Generate a unique correlation ID for distributed tracing."""
    return f"corr_{uuid.uuid4().hex[:16]}"


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from context."""
    return _correlation_id.get()


def get_language_id() -> Optional[str]:
    """Get the current language ID from context."""
    return _language_id.get()


def get_translator_id() -> Optional[str]:
    """Get the current translator ID from context."""
    return _translator_id.get()
