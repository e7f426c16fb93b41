"""Application ports for the language rules context.

This module defines the contracts between the rule engine and the external
systems it collaborates with: rule storage, a keyed cache and an audit trail.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from langrules.domain.rules.entities import LanguageRule, RuleIdentifier


class LanguageRuleRepository(ABC):
    """Port for language rule persistence operations."""

    @abstractmethod
    def find_by_id(self, rule_id: RuleIdentifier) -> Optional[LanguageRule]:
        """
        Find a rule by its identifier.

        Returns:
            LanguageRule if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self, language_id: str, kind: Optional[str] = None) -> List[LanguageRule]:
        """
        Find all rules of a language, optionally restricted to one rule kind.

        Returns:
            Rules in creation order
        """
        pass

    @abstractmethod
    def find_one(
        self, language_id: str, keyword: str, kind: Optional[str] = None
    ) -> Optional[LanguageRule]:
        """
        Find the first rule of a language with the given rule keyword.

        Args:
            language_id: Language identifier
            keyword: Rule keyword (``one``, ``few``, ``ends_in``)
            kind: Optional type keyword restricting the lookup

        Returns:
            LanguageRule if found, None otherwise
        """
        pass

    @abstractmethod
    def create(self, rule: LanguageRule) -> LanguageRule:
        """
        Persist a new rule.

        Returns:
            The stored rule with its identity assigned
        """
        pass

    @abstractmethod
    def save(self, rule: LanguageRule) -> bool:
        """Persist changes to an existing rule. Returns False if it is unknown."""
        pass

    @abstractmethod
    def delete(self, rule: LanguageRule) -> bool:
        """Remove a rule. Returns False if it is unknown."""
        pass


class CachePort(ABC):
    """Port for a keyed cache."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the cached value or None."""
        pass

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store a value under ``key``."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Drop ``key`` if present."""
        pass


class AuditTrail(ABC):
    """Port recording who created, modified or deleted a rule."""

    @abstractmethod
    def record_created(self, translator_id: str, rule: LanguageRule) -> None:
        pass

    @abstractmethod
    def record_updated(self, translator_id: str, rule: LanguageRule) -> None:
        pass

    @abstractmethod
    def record_deleted(self, translator_id: str, rule: LanguageRule) -> None:
        pass
