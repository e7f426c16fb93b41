"""Rule lifecycle operations: create, update and destroy with audit."""

from typing import Optional

from langrules.application.cache import LanguageRuleCache
from langrules.application.errors import ValidationError
from langrules.application.ports import AuditTrail, LanguageRuleRepository
from langrules.domain.errors import ImmutableRuleKindError
from langrules.domain.rules.entities import LanguageRule
from langrules.shared.logging import get_logger, get_correlation_id


class LanguageRuleService:
    """
    Mutations of language rules.

    Every operation ends by invalidating the cache entry of the rule it
    touched, even when the mutation changed nothing.
    """

    def __init__(
        self,
        repository: LanguageRuleRepository,
        cache: LanguageRuleCache,
        audit: AuditTrail,
    ) -> None:
        """
        Initialize service with dependencies.

        Args:
            repository: Storage for rules
            cache: Cache facade to invalidate after writes
            audit: Audit trail for translator actions
        """
        self._repository = repository
        self._cache = cache
        self._audit = audit
        self._logger = get_logger("application.rule_lifecycle")

    def create(self, rule: LanguageRule) -> LanguageRule:
        """Persist a new rule without an audit record (administrative or sync)."""
        rule.rule_kind.validate(rule.definition)
        stored = self._repository.create(rule)
        self._cache.invalidate(stored.id)

        self._logger.info(
            "language_rule_created",
            rule_id=stored.id,
            language_id=stored.language_id,
            kind=stored.kind,
            keyword=stored.keyword,
            correlation_id=get_correlation_id(),
        )
        return stored

    def save_with_log(self, rule: LanguageRule, translator_id: Optional[str]) -> LanguageRule:
        """
        Create or update a rule on behalf of a translator.

        Additions and updates are audited before they are stored; an update is
        only audited when language, keyword or definition actually changed.

        Raises:
            ValidationError: If no translator is given or the rule is unknown
            ImmutableRuleKindError: If the rule's kind differs from the stored one
        """
        self._require_translator(translator_id)

        if not rule.is_persisted:
            authored = rule.with_translator(translator_id)
            authored.rule_kind.validate(authored.definition)
            self._audit.record_created(translator_id, authored)
            return self.create(authored)

        existing = self._repository.find_by_id(rule.id)
        if existing is None:
            raise ValidationError("id", f"language rule {rule.id} does not exist")
        if existing.kind != rule.kind:
            raise ImmutableRuleKindError(rule.id, existing.kind, rule.kind)
        rule.rule_kind.validate(rule.definition)

        changed = rule.has_changes(existing)
        if changed:
            rule = rule.with_translator(translator_id)
            self._audit.record_updated(translator_id, rule)

        self._repository.save(rule)
        self._cache.invalidate(rule.id)

        self._logger.info(
            "language_rule_saved",
            rule_id=rule.id,
            language_id=rule.language_id,
            kind=rule.kind,
            changed=changed,
            correlation_id=get_correlation_id(),
        )
        return rule

    def destroy_with_log(self, rule: LanguageRule, translator_id: Optional[str]) -> bool:
        """Delete a rule on behalf of a translator; the deletion is always audited."""
        self._require_translator(translator_id)

        self._audit.record_deleted(translator_id, rule)
        deleted = self._repository.delete(rule)
        self._cache.invalidate(rule.id)

        self._logger.info(
            "language_rule_destroyed",
            rule_id=rule.id,
            language_id=rule.language_id,
            kind=rule.kind,
            deleted=deleted,
            correlation_id=get_correlation_id(),
        )
        return deleted

    def _require_translator(self, translator_id: Optional[str]) -> None:
        if not translator_id or not str(translator_id).strip():
            raise ValidationError("translator_id", "a translator is required")
