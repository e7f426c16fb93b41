"""Cache facade memoizing rule lookups by identifier."""

from typing import Optional

from langrules.application.ports import CachePort, LanguageRuleRepository
from langrules.domain.rules.entities import LanguageRule, RuleIdentifier
from langrules.shared.logging import get_logger, get_correlation_id


class LanguageRuleCache:
    """
    Read-through cache of rules keyed by ``language_rule_[<id>]``.

    The facade never serves a value known to be stale past the next
    ``invalidate`` call; rule lifecycle operations invalidate unconditionally.
    """

    def __init__(self, cache: CachePort, repository: LanguageRuleRepository) -> None:
        self._cache = cache
        self._repository = repository
        self._logger = get_logger("application.rule_cache")

    @staticmethod
    def cache_key(rule_id: RuleIdentifier) -> str:
        return f"language_rule_[{rule_id}]"

    def fetch_by_id(self, rule_id: RuleIdentifier) -> Optional[LanguageRule]:
        """Return the cached rule, loading and caching it from storage on a miss."""
        key = self.cache_key(rule_id)
        rule = self._cache.get(key)
        if rule is not None:
            self._logger.debug(
                "language_rule_cache_hit",
                rule_id=rule_id,
                correlation_id=get_correlation_id(),
            )
            return rule

        rule = self._repository.find_by_id(rule_id)
        if rule is None:
            self._logger.debug(
                "language_rule_not_found",
                rule_id=rule_id,
                correlation_id=get_correlation_id(),
            )
            return None

        self._cache.put(key, rule)
        return rule

    def invalidate(self, rule_id: Optional[RuleIdentifier]) -> None:
        if rule_id is None:
            return
        self._cache.delete(self.cache_key(rule_id))
        self._logger.debug(
            "language_rule_cache_invalidated",
            rule_id=rule_id,
            correlation_id=get_correlation_id(),
        )
