"""Value objects for the language rules context.

This module contains immutable value objects with validation and invariants.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union
import re

from langrules.domain.errors import MalformedDefinitionError

DefinitionValue = Union[str, bool, int, None]

TRUE_VALUES = (True, "true")


def sanitize_values(values: Optional[str]) -> List[str]:
    """Split a comma separated value list, trimming each element.

    >>> sanitize_values("2, 3,4")
    ['2', '3', '4']
    """
    if not values:
        return []
    return [value.strip() for value in str(values).split(",")]


def humanize_values(values: Optional[str]) -> str:
    """Re-join a comma separated value list with a single space after commas."""
    return ", ".join(sanitize_values(values))


def normalize_key(key: Any) -> str:
    """Normalize a definition key so string and symbol spellings coincide."""
    return str(key).strip().lstrip(":").lower()


class RuleDefinition(Mapping):
    """
    Parsed condition(s) a single rule encodes.

    Keys are normalized once at construction, so ``"Part1"``, ``":part1"`` and
    ``"part1"`` all address the same entry. Insertion order is preserved.
    Equality is plain mapping equality over normalized keys with values
    compared exactly (``True`` and ``"true"`` are different values).
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[Any, DefinitionValue]] = None) -> None:
        normalized: Dict[str, DefinitionValue] = {}
        for key, value in (data or {}).items():
            name = normalize_key(key)
            if name in normalized:
                raise MalformedDefinitionError("definition", f"duplicate key {name}")
            normalized[name] = value
        self._data = normalized

    def __getitem__(self, key: Any) -> DefinitionValue:
        return self._data[normalize_key(key)]

    def __contains__(self, key: object) -> bool:
        return normalize_key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RuleDefinition({self._data!r})"

    def require(self, key: str, kind: str = "rule") -> str:
        """Return a non-empty value as text or fail with MalformedDefinitionError."""
        value = self.get(key)
        if value is None or value == "":
            raise MalformedDefinitionError(kind, f"missing {key}")
        return str(value)

    def flag(self, key: str) -> bool:
        """Read a boolean that may have crossed a serialization boundary as text."""
        value = self.get(key)
        if isinstance(value, str):
            value = value.strip().lower()
        return value in TRUE_VALUES

    def to_dict(self) -> Dict[str, DefinitionValue]:
        return dict(self._data)


@dataclass(frozen=True)
class Token:
    """
    Interpolation token a rule is evaluated for.

    Attributes:
        name: Token name as written in the label (``"count"``, ``"user_count"``)
        dependency: Declared dependency axis (``"{count:number}"``), if any
    """

    name: str
    dependency: Optional[str] = None

    _pattern: ClassVar[re.Pattern[str]] = re.compile(r"^\{?\s*([\w]+)\s*(?::\s*([\w]+)\s*)?(?:\|\|.*)?\}?$")

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Token name is required")
        object.__setattr__(self, "name", self.name.strip())

    @classmethod
    def parse(cls, text: str) -> "Token":
        """Parse ``{name}``, ``{name:dependency}`` or ``name:dependency``."""
        match = cls._pattern.match(text.strip())
        if not match:
            raise ValueError(f"Invalid token format: {text}")
        return cls(name=match.group(1), dependency=match.group(2))

    @property
    def suffix(self) -> str:
        """Last underscore separated part of the name (``user_count`` -> ``count``)."""
        return self.name.split("_")[-1]

    def __str__(self) -> str:
        return self.name
