"""Entities for the language rules context."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from langrules.domain.rules.kinds.base import RuleKind
from langrules.domain.rules.value_objects import RuleDefinition

RuleIdentifier = Union[int, str]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LanguageRule:
    """
    One language-scoped instance of a rule kind.

    The rule carries data only; ``rule_kind`` supplies the evaluation logic
    its type keyword selects. Mutators return new instances, so a rule read
    from storage or cache can be shared freely.

    Attributes:
        language_id: Language the rule applies to
        rule_kind: Behavior selected by the type keyword, fixed at creation
        definition: Parsed condition(s) interpreted by ``rule_kind``
        keyword: Name of the rule inside its language (``one``, ``few``)
        translator_id: Last translator who authored the rule
        id: Storage identity, ``None`` until persisted
    """

    language_id: str
    rule_kind: RuleKind = field(compare=False)
    definition: RuleDefinition
    keyword: str = ""
    translator_id: Optional[str] = None
    id: Optional[RuleIdentifier] = None
    created_at: datetime = field(default_factory=_now, compare=False)
    updated_at: datetime = field(default_factory=_now, compare=False)

    def __post_init__(self) -> None:
        if not self.language_id or not str(self.language_id).strip():
            raise ValueError("Language rule requires a language")
        if not isinstance(self.definition, RuleDefinition):
            object.__setattr__(self, "definition", RuleDefinition(self.definition))
        if not self.keyword:
            object.__setattr__(self, "keyword", self.rule_kind.keyword)

    @classmethod
    def create(
        cls,
        rule_kind: RuleKind,
        language_id: str,
        definition: Mapping[str, Any],
        translator_id: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> "LanguageRule":
        """Factory method for a new, unsaved rule."""
        return cls(
            language_id=language_id,
            rule_kind=rule_kind,
            definition=RuleDefinition(definition),
            keyword=keyword or rule_kind.keyword,
            translator_id=translator_id,
        )

    @property
    def kind(self) -> str:
        """Type keyword of the rule's kind."""
        return self.rule_kind.keyword

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def evaluate(self, value: Any) -> bool:
        return self.rule_kind.evaluate(self.definition, value)

    def description(self) -> str:
        return self.rule_kind.describe(self.definition)

    def token_description(self, token: str) -> str:
        return self.rule_kind.token_description(self.definition, token)

    def has_changes(self, other: "LanguageRule") -> bool:
        """Whether authored content differs from ``other``."""
        return (
            self.language_id != other.language_id
            or self.keyword != other.keyword
            or self.definition != other.definition
        )

    def with_definition(self, definition: Mapping[str, Any]) -> "LanguageRule":
        return replace(self, definition=RuleDefinition(definition))

    def with_keyword(self, keyword: str) -> "LanguageRule":
        return replace(self, keyword=keyword)

    def with_translator(self, translator_id: str) -> "LanguageRule":
        return replace(self, translator_id=translator_id, updated_at=_now())

    def with_id(self, rule_id: RuleIdentifier) -> "LanguageRule":
        return replace(self, id=rule_id)
