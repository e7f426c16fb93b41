"""Language rule repository implementation.

This module implements the LanguageRuleRepository port in memory with
logging of every storage operation.
"""

from itertools import count
from typing import Dict, List, Optional, Tuple
import time

from langrules.application.ports import LanguageRuleRepository
from langrules.domain.rules.entities import LanguageRule, RuleIdentifier
from langrules.shared.logging import get_logger, get_correlation_id


class InMemoryLanguageRuleRepository(LanguageRuleRepository):
    """
    In-memory implementation of LanguageRuleRepository for tests, tools and
    embedding. Identifiers are assigned sequentially from 1.
    """

    def __init__(self) -> None:
        """Initialize in-memory language rule repository."""
        self._logger = get_logger("infrastructure.language_rule_repository")
        self._storage: Dict[RuleIdentifier, LanguageRule] = {}
        self._language_index: Dict[str, List[RuleIdentifier]] = {}  # language_id -> [rule_ids]
        self._ids = count(1)

        self._logger.info(
            "language_rule_repository_initialized",
            implementation="in_memory",
            correlation_id=get_correlation_id(),
        )

    def find_by_id(self, rule_id: RuleIdentifier) -> Optional[LanguageRule]:
        rule = self._storage.get(rule_id)
        if rule is None:
            self._logger.debug(
                "language_rule_repository_find_by_id_miss",
                rule_id=rule_id,
                correlation_id=get_correlation_id(),
            )
        return rule

    def find_all(self, language_id: str, kind: Optional[str] = None) -> List[LanguageRule]:
        rules = [self._storage[rule_id] for rule_id in self._language_index.get(language_id, [])]
        if kind is not None:
            rules = [rule for rule in rules if rule.kind == kind]
        return rules

    def find_one(
        self, language_id: str, keyword: str, kind: Optional[str] = None
    ) -> Optional[LanguageRule]:
        for rule in self.find_all(language_id, kind):
            if rule.keyword == keyword:
                return rule
        return None

    def create(self, rule: LanguageRule) -> LanguageRule:
        start_time = time.time()
        if rule.is_persisted:
            raise ValueError(f"Language rule {rule.id} is already persisted")

        stored = rule.with_id(next(self._ids))
        self._storage[stored.id] = stored
        self._language_index.setdefault(stored.language_id, []).append(stored.id)

        self._logger.info(
            "language_rule_repository_create_completed",
            rule_id=stored.id,
            language_id=stored.language_id,
            kind=stored.kind,
            keyword=stored.keyword,
            duration_ms=(time.time() - start_time) * 1000,
            storage_size=len(self._storage),
            correlation_id=get_correlation_id(),
        )
        return stored

    def save(self, rule: LanguageRule) -> bool:
        previous = self._storage.get(rule.id)
        if previous is None:
            self._logger.warning(
                "language_rule_repository_save_unknown",
                rule_id=rule.id,
                correlation_id=get_correlation_id(),
            )
            return False

        if previous.language_id != rule.language_id:
            self._unindex(previous)
            self._language_index.setdefault(rule.language_id, []).append(rule.id)
        self._storage[rule.id] = rule

        self._logger.info(
            "language_rule_repository_save_completed",
            rule_id=rule.id,
            language_id=rule.language_id,
            kind=rule.kind,
            correlation_id=get_correlation_id(),
        )
        return True

    def delete(self, rule: LanguageRule) -> bool:
        stored = self._storage.pop(rule.id, None)
        if stored is None:
            return False
        self._unindex(stored)

        self._logger.info(
            "language_rule_repository_delete_completed",
            rule_id=rule.id,
            language_id=stored.language_id,
            storage_size=len(self._storage),
            correlation_id=get_correlation_id(),
        )
        return True

    def stats(self) -> Dict[str, int]:
        """Rule counts per language, for monitoring."""
        return {language: len(ids) for language, ids in self._language_index.items()}

    def _unindex(self, rule: LanguageRule) -> None:
        ids = self._language_index.get(rule.language_id, [])
        if rule.id in ids:
            ids.remove(rule.id)
