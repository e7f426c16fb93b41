"""Rule kind contracts.

- RuleKind: the interface every rule kind implements. A kind is the behavior a
  rule's type keyword selects; rules only carry data.
- PartRuleKind: shared evaluation of ``part``/``value`` definitions, including
  two-part definitions joined by ``and``/``or``. Concrete kinds supply
  ``evaluate_part`` and the parts they understand.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from langrules.domain.errors import InvalidTransformFormError, MalformedDefinitionError
from langrules.domain.rules.value_objects import (
    RuleDefinition,
    Token,
    humanize_values,
    sanitize_values,
)

OTHER = "other"

OPERATORS = ("and", "or")


class RuleKind(ABC):
    """
    Behavior behind one rule type keyword.

    Attributes
    ----------
    keyword:  Dispatch key, also written as ``type`` on the wire.
    config:   Per-kind settings (``label``, ``object_method``,
              ``method_values``, ``token_suffixes``).
    """

    keyword: ClassVar[str] = ""

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        self.config: Dict[str, Any] = dict(config or {})

    @property
    @abstractmethod
    def dependency(self) -> str:
        """Semantic axis this kind classifies over (count, gender, ...)."""

    @property
    def dependency_label(self) -> str:
        return self.config.get("label") or self.dependency

    @property
    def suffixes(self) -> Tuple[str, ...]:
        return tuple(self.config.get("token_suffixes") or ())

    def is_dependent(self, token: Token) -> bool:
        """Whether ``token`` routes to this kind by dependency or suffix."""
        return token.dependency == self.dependency or token.suffix in self.suffixes

    @abstractmethod
    def evaluate(self, definition: RuleDefinition, value: Any) -> bool:
        """Classify ``value`` against ``definition``. Must not mutate either."""

    @abstractmethod
    def transform_params_to_options(
        self, params: Sequence[str], token: str = ""
    ) -> Dict[str, str]:
        """Parse label parameters into an ordered keyword -> value table."""

    def token_value(self, obj: Any) -> Any:
        """Extract the value this kind classifies from a runtime object."""
        method = self.config.get("object_method")
        if not method:
            return obj
        return read_attribute(obj, method)

    def validate(self, definition: RuleDefinition) -> None:
        """Raise MalformedDefinitionError if ``definition`` cannot be evaluated."""

    def describe(self, definition: RuleDefinition) -> str:
        return ", ".join(f"{key}: {value}" for key, value in definition.items())

    def token_description(self, definition: RuleDefinition, token: str) -> str:
        return f"if {token} {self.describe(definition)}"

    def keyword_options(self, params: Sequence[str], token: str = "") -> Dict[str, str]:
        """Parse ``keyword: value`` parameters, preserving declaration order."""
        options: Dict[str, str] = {}
        for param in params:
            key, separator, value = param.partition(":")
            if not separator or not key.strip():
                raise InvalidTransformFormError(
                    token or self.keyword, f"expected 'keyword: value', got {param!r}"
                )
            options[key.strip()] = value.strip()
        return options

    def positional_options(
        self,
        params: Sequence[str],
        forms: Mapping[int, Tuple[str, ...]],
        token: str = "",
    ) -> Dict[str, str]:
        """Map positional parameters onto the keywords registered for their count."""
        params = [param.strip() for param in params]
        if not params:
            raise InvalidTransformFormError(token or self.keyword, "no parameters")
        if is_keyword_param(params[0]):
            return self.keyword_options(params, token)
        keys = forms.get(len(params))
        if keys is None:
            raise InvalidTransformFormError(
                token or self.keyword,
                f"{self.keyword} labels take {sorted(forms)} parameters, got {len(params)}",
            )
        return dict(zip(keys, params))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keyword={self.keyword!r})"


class PartRuleKind(RuleKind):
    """Rule kind whose definitions are one or two ``part``/``value`` conditions."""

    parts: ClassVar[Tuple[str, ...]] = ()
    allowed_values: ClassVar[Tuple[str, ...]] = ()

    @abstractmethod
    def evaluate_part(self, part: str, values: List[str], subject: Any) -> bool:
        """Evaluate one condition against the extracted subject."""

    def evaluate(self, definition: RuleDefinition, value: Any) -> bool:
        subject = self.token_value(value)
        conditions = self.conditions(definition)
        results = [self.evaluate_part(part, values, subject) for part, values in conditions]
        if len(results) == 1:
            return results[0]
        if self.operator(definition) == "or":
            return results[0] or results[1]
        return results[0] and results[1]

    def conditions(self, definition: RuleDefinition) -> List[Tuple[str, List[str]]]:
        """Return the validated ``(part, values)`` pairs of a definition."""
        if definition.flag("multipart"):
            pairs = [("part1", "value1"), ("part2", "value2")]
        elif "part1" in definition:
            pairs = [("part1", "value1")]
        elif "part" in definition:
            pairs = [("part", "value")]
        else:
            # Older simple definitions spell the part as "operator"
            pairs = [("operator", "value")]

        conditions = []
        for part_key, value_key in pairs:
            part = definition.require(part_key, self.keyword).strip().lower()
            if part not in self.parts:
                raise MalformedDefinitionError(self.keyword, f"unknown part {part}")
            values = sanitize_values(definition.require(value_key, self.keyword))
            for value in values:
                if self.allowed_values and value not in self.allowed_values:
                    raise MalformedDefinitionError(self.keyword, f"unknown value {value}")
            conditions.append((part, values))
        return conditions

    def validate(self, definition: RuleDefinition) -> None:
        if len(self.conditions(definition)) > 1:
            self.operator(definition)

    def operator(self, definition: RuleDefinition) -> str:
        operator = str(definition.get("operator") or "and").strip().lower()
        if operator not in OPERATORS:
            raise MalformedDefinitionError(self.keyword, f"unknown operator {operator}")
        return operator

    def describe(self, definition: RuleDefinition) -> str:
        described = [
            f"{part.replace('_', ' ')} {humanize_values(', '.join(values))}"
            for part, values in self.conditions(definition)
        ]
        if len(described) == 1:
            return described[0]
        return f" {self.operator(definition)} ".join(described)


def is_keyword_param(param: str) -> bool:
    """Whether ``param`` is written ``keyword: value`` (``"10:00"`` is not)."""
    key, separator, _ = param.partition(":")
    return bool(separator) and key.strip().isidentifier()


def read_attribute(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping key, attribute or zero-argument method."""
    if isinstance(obj, Mapping):
        if name in obj:
            return obj[name]
        return obj.get(name)
    if hasattr(obj, name):
        attribute = getattr(obj, name)
        return attribute() if callable(attribute) else attribute
    return obj
