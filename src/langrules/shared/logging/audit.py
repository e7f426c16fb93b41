"""
Audit trail of translator and sync changes to language rules.

Audit records go to ``audit.<component>`` loggers so they can be routed
separately from operational logs. The event name is the audited action.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

from .context import get_correlation_id, get_language_id, get_translator_id


class AuditEventType(Enum):
    """Audited actions on language rules."""

    ADDED_LANGUAGE_RULE = "added_language_rule"
    UPDATED_LANGUAGE_RULE = "updated_language_rule"
    DELETED_LANGUAGE_RULE = "deleted_language_rule"
    IMPORTED_LANGUAGE_RULES = "imported_language_rules"
    EXPORTED_LANGUAGE_RULES = "exported_language_rules"


class AuditLogger:
    """Writes audit records for one component."""

    def __init__(self, component: str):
        self.component = component
        self.logger: BoundLogger = structlog.get_logger(f"audit.{component}")

    def rule_event(
        self,
        event_type: AuditEventType,
        rule_id: Any,
        translator_id: str | None = None,
        definition: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        """
        Record an action on a single rule.

        Args:
            event_type: Audited action
            rule_id: Identifier of the rule acted on
            translator_id: Translator responsible, defaults to the request context
            definition: Rule definition after the action, if it still exists
            **context: Extra fields (language_id, kind, keyword, ...)
        """
        record = self._base_record(translator_id, context)
        record["rule_id"] = rule_id
        if definition is not None:
            record["definition"] = definition
        self.logger.info(event_type.value, **record, **context)

    def batch_event(
        self,
        event_type: AuditEventType,
        count: int,
        translator_id: str | None = None,
        **context: Any,
    ) -> None:
        """Record a bulk import or export of ``count`` rules."""
        record = self._base_record(translator_id, context)
        record["count"] = count
        self.logger.info(event_type.value, **record, **context)

    def _base_record(self, translator_id: str | None, context: dict[str, Any]) -> dict[str, Any]:
        return {
            "audit": True,
            "component": self.component,
            "translator_id": translator_id or get_translator_id(),
            "language_id": context.pop("language_id", None) or get_language_id(),
            "correlation_id": get_correlation_id(),
            "recorded_at": datetime.now(UTC).isoformat(),
        }
