"""Registry mapping rule type keywords to rule kinds."""

from typing import Dict, Iterable, List, Optional, Tuple

from langrules.domain.errors import RuleKindNotImplementedError, UnknownRuleKindError
from langrules.domain.rules.kinds.base import RuleKind
from langrules.domain.rules.value_objects import Token


class RuleKindRegistry:
    """
    Explicit lookup table of rule kinds, built once at startup and injected
    into the transform engine and the sync codec.
    """

    def __init__(self, kinds: Iterable[RuleKind] = ()) -> None:
        self._kinds: Dict[str, RuleKind] = {}
        for kind in kinds:
            self.register(kind)

    def register(self, kind: RuleKind) -> RuleKind:
        """Add a kind; keywords must be present and unique."""
        if not kind.keyword:
            raise RuleKindNotImplementedError(kind.__class__.__name__, "keyword")
        if kind.keyword in self._kinds:
            raise ValueError(f"Duplicate rule kind keyword {kind.keyword}")
        self._kinds[kind.keyword] = kind
        return kind

    def resolve(self, keyword: str) -> RuleKind:
        """Return the kind for ``keyword`` or raise UnknownRuleKindError."""
        kind = self._kinds.get(keyword)
        if kind is None:
            raise UnknownRuleKindError(keyword)
        return kind

    def get(self, keyword: str) -> Optional[RuleKind]:
        return self._kinds.get(keyword)

    # Configuration collaborator contract
    kind_for_keyword = get

    def rule_kinds(self) -> List[RuleKind]:
        return list(self._kinds.values())

    def keywords(self) -> List[str]:
        return list(self._kinds)

    def options(self) -> List[Tuple[str, str]]:
        """``(label, keyword)`` pairs for building authoring forms."""
        return [(kind.dependency_label, kind.keyword) for kind in self._kinds.values()]

    def is_dependent(self, kind: RuleKind, token: Token) -> bool:
        return kind.is_dependent(token)

    def dependent_kinds(self, token: Token) -> List[RuleKind]:
        """Kinds relevant to ``token``, in registration order."""
        return [kind for kind in self._kinds.values() if kind.is_dependent(token)]

    def kind_for_token(self, token: Token) -> RuleKind:
        kinds = self.dependent_kinds(token)
        if not kinds:
            raise UnknownRuleKindError(token.dependency or token.suffix)
        return kinds[0]

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)
