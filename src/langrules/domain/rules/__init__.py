"""Language rules domain module.

Rules, the kinds that interpret them, and the registry that maps type
keywords to kinds.
"""

from .entities import LanguageRule
from .kinds import (
    BUILTIN_KINDS,
    OTHER,
    DateRuleKind,
    GenderListRuleKind,
    GenderRuleKind,
    ListRuleKind,
    NumericRuleKind,
    PartRuleKind,
    RuleKind,
    ValueRuleKind,
)
from .registry import RuleKindRegistry
from .value_objects import (
    RuleDefinition,
    Token,
    humanize_values,
    sanitize_values,
)

__all__ = [
    # Entities
    "LanguageRule",
    # Kinds
    "RuleKind",
    "PartRuleKind",
    "NumericRuleKind",
    "GenderRuleKind",
    "GenderListRuleKind",
    "ListRuleKind",
    "DateRuleKind",
    "ValueRuleKind",
    "BUILTIN_KINDS",
    "OTHER",
    "RuleKindRegistry",
    # Value Objects
    "RuleDefinition",
    "Token",
    "sanitize_values",
    "humanize_values",
]
