"""Synchronization of language rules between systems.

Rules travel as language-tagged records::

    {"token": "count", "type": "number", "definition": {
        "multipart": True, "part1": "ends_in", "value1": "2,3,4",
        "operator": "and", "part2": "does_not_end_in", "value2": "12,13,14"}}

Import is idempotent (an identical definition is reused) and tolerant of
partial records and of rule types this system does not know.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from langrules.application.lifecycle import LanguageRuleService
from langrules.application.ports import LanguageRuleRepository
from langrules.domain.errors import DomainError, MalformedDefinitionError
from langrules.domain.rules.entities import LanguageRule
from langrules.domain.rules.registry import RuleKindRegistry
from langrules.domain.rules.value_objects import RuleDefinition
from langrules.shared.logging import (
    AuditEventType,
    AuditLogger,
    get_correlation_id,
    get_logger,
)

REQUIRED_FIELDS = ("token", "type", "definition")


class SyncCodec:
    """Converts rules to and from portable sync records."""

    def __init__(
        self,
        registry: RuleKindRegistry,
        repository: LanguageRuleRepository,
        lifecycle: LanguageRuleService,
    ) -> None:
        self._registry = registry
        self._repository = repository
        self._lifecycle = lifecycle
        self._logger = get_logger("application.sync")
        self._audit = AuditLogger("sync")

    def to_portable(self, rule: LanguageRule, token: Optional[str] = None) -> Dict[str, Any]:
        """
        Export a rule.

        With ``token`` the record is scoped to that interpolation token;
        without it the definition fields are merged with the rule keyword, the
        shape used in a language's full rule table.
        """
        if token:
            return {
                "token": token,
                "type": rule.kind,
                "keyword": rule.keyword,
                "definition": rule.definition.to_dict(),
            }
        return {**rule.definition.to_dict(), "keyword": rule.keyword}

    def from_sync_record(
        self,
        language_id: str,
        translator_id: Optional[str],
        record: Any,
    ) -> Optional[LanguageRule]:
        """
        Import one record, returning the existing or newly created rule.

        Returns None for entries that are not records, records missing required
        fields, and records naming an unknown rule type.
        """
        if not isinstance(record, Mapping):
            self._logger.debug(
                "sync_record_not_a_mapping",
                language_id=language_id,
                record_type=type(record).__name__,
                correlation_id=get_correlation_id(),
            )
            return None

        if not all(record.get(name) for name in REQUIRED_FIELDS):
            self._logger.debug(
                "sync_record_incomplete",
                language_id=language_id,
                fields=[str(name) for name in record],
                correlation_id=get_correlation_id(),
            )
            return None

        if not isinstance(record["type"], str):
            self._logger.info(
                "sync_record_invalid_type",
                language_id=language_id,
                type=repr(record["type"]),
                correlation_id=get_correlation_id(),
            )
            return None

        kind = self._registry.get(record["type"])
        if kind is None:
            self._logger.info(
                "sync_record_unsupported_type",
                language_id=language_id,
                type=record["type"],
                token=record["token"],
                correlation_id=get_correlation_id(),
            )
            return None

        if not isinstance(record["definition"], Mapping):
            raise MalformedDefinitionError(kind.keyword, "definition must be a mapping")
        definition = RuleDefinition(record["definition"])
        for existing in self._repository.find_all(language_id, kind.keyword):
            if existing.definition == definition:
                self._logger.debug(
                    "sync_record_matched_existing",
                    language_id=language_id,
                    rule_id=existing.id,
                    type=kind.keyword,
                    correlation_id=get_correlation_id(),
                )
                return existing

        rule = LanguageRule.create(
            rule_kind=kind,
            language_id=language_id,
            definition=definition,
            translator_id=translator_id,
            keyword=record.get("keyword"),
        )
        return self._lifecycle.create(rule)

    def import_records(
        self,
        language_id: str,
        translator_id: Optional[str],
        records: Iterable[Any],
    ) -> List[LanguageRule]:
        """
        Import a batch of records.

        A record whose definition cannot be stored is logged and skipped; its
        siblings are still imported.
        """
        imported: List[LanguageRule] = []
        skipped = 0
        for record in records:
            try:
                rule = self.from_sync_record(language_id, translator_id, record)
            except DomainError as e:
                skipped += 1
                self._logger.warning(
                    "sync_record_rejected",
                    language_id=language_id,
                    type=record.get("type"),
                    token=record.get("token"),
                    error=e.message,
                    correlation_id=get_correlation_id(),
                )
                continue
            if rule is None:
                skipped += 1
            else:
                imported.append(rule)

        self._audit.batch_event(
            AuditEventType.IMPORTED_LANGUAGE_RULES,
            count=len(imported),
            translator_id=translator_id,
            language_id=language_id,
            skipped=skipped,
        )
        return imported

    def import_payload(
        self,
        language_id: str,
        translator_id: Optional[str],
        payload: Mapping[str, Any],
    ) -> List[LanguageRule]:
        """Import the rules of a translation payload (``{"locale", "label", "rules"}``)."""
        return self.import_records(language_id, translator_id, payload.get("rules") or [])

    def export_kind(self, keyword: str, language_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Export a rule kind with its configuration and, for a language, its rules.

        Raises:
            UnknownRuleKindError: If ``keyword`` is not registered
        """
        kind = self._registry.resolve(keyword)
        exported: Dict[str, Any] = {"type": kind.keyword, **kind.config}
        if language_id:
            rules = self._repository.find_all(language_id, kind.keyword)
            exported["rules"] = [self.to_portable(rule) for rule in rules]
            self._audit.batch_event(
                AuditEventType.EXPORTED_LANGUAGE_RULES,
                count=len(rules),
                language_id=language_id,
                type=kind.keyword,
            )
        return exported
