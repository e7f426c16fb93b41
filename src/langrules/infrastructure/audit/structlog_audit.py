"""Audit trail adapter writing rule changes as structured audit events."""

from langrules.application.ports import AuditTrail
from langrules.domain.rules.entities import LanguageRule
from langrules.shared.logging import AuditEventType, AuditLogger


class StructlogAuditTrail(AuditTrail):
    """Records translator actions on rules through the ``audit.language_rules`` logger."""

    def __init__(self) -> None:
        self._audit = AuditLogger("language_rules")

    def record_created(self, translator_id: str, rule: LanguageRule) -> None:
        self._record(AuditEventType.ADDED_LANGUAGE_RULE, translator_id, rule)

    def record_updated(self, translator_id: str, rule: LanguageRule) -> None:
        self._record(AuditEventType.UPDATED_LANGUAGE_RULE, translator_id, rule)

    def record_deleted(self, translator_id: str, rule: LanguageRule) -> None:
        self._record(AuditEventType.DELETED_LANGUAGE_RULE, translator_id, rule)

    def _record(self, event_type: AuditEventType, translator_id: str, rule: LanguageRule) -> None:
        deleted = event_type == AuditEventType.DELETED_LANGUAGE_RULE
        self._audit.rule_event(
            event_type,
            rule_id=rule.id,
            translator_id=translator_id,
            definition=None if deleted else rule.definition.to_dict(),
            language_id=rule.language_id,
            kind=rule.kind,
            keyword=rule.keyword,
        )
