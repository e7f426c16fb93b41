"""Built-in rule kinds."""

from .base import OTHER, PartRuleKind, RuleKind
from .date import DateRuleKind
from .gender import GenderRuleKind
from .gender_list import GenderListRuleKind
from .list_size import ListRuleKind
from .numeric import NumericRuleKind
from .value import ValueRuleKind

# Registration order decides which kind a token routes to first
BUILTIN_KINDS = (
    NumericRuleKind,
    GenderRuleKind,
    GenderListRuleKind,
    ListRuleKind,
    DateRuleKind,
    ValueRuleKind,
)

__all__ = [
    "OTHER",
    "RuleKind",
    "PartRuleKind",
    "NumericRuleKind",
    "GenderRuleKind",
    "GenderListRuleKind",
    "ListRuleKind",
    "DateRuleKind",
    "ValueRuleKind",
    "BUILTIN_KINDS",
]
