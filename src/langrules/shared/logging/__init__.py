"""
Structured logging for the rule engine.

This module provides structured logging capabilities with:
- structlog configuration for JSON or key-value output
- Correlation ID and language context tracking
- Audit trail events for rule changes
"""

from .factory import configure_logging, get_logger
from .context import (
    with_request_context,
    get_correlation_id,
    get_language_id,
    get_translator_id,
)
from .audit import AuditEventType, AuditLogger

__all__ = [
    "configure_logging",
    "get_logger",
    "with_request_context",
    "get_correlation_id",
    "get_language_id",
    "get_translator_id",
    "AuditEventType",
    "AuditLogger",
]
