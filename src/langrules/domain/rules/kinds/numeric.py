"""Numeric rules: pluralization by count."""

from typing import Any, List

from langrules.domain.rules.kinds.base import OTHER, PartRuleKind


class NumericRuleKind(PartRuleKind):
    """
    Classifies integers by membership or by trailing digits.

    ``{"multipart": True, "part1": "ends_in", "value1": "2,3,4",
    "operator": "and", "part2": "does_not_end_in", "value2": "12,13,14"}``
    matches 2, 3, 4, 22, 103 but not 12 or 13.
    """

    keyword = "number"
    parts = ("is", "is_not", "ends_in", "does_not_end_in")

    FORMS = {
        1: (OTHER,),
        2: ("one", OTHER),
    }

    @property
    def dependency(self) -> str:
        return "number"

    def token_value(self, obj: Any) -> int:
        value = super().token_value(obj)
        if isinstance(value, bool):
            raise ValueError(f"Number rules cannot classify {value!r}")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"Number rules cannot classify fractional {value!r}")
            return int(value)
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            raise ValueError(f"Number rules cannot classify {value!r}")

    def evaluate_part(self, part: str, values: List[str], subject: int) -> bool:
        text = str(subject)
        if part == "is":
            return text in values
        if part == "is_not":
            return text not in values
        if part == "ends_in":
            return any(text.endswith(value) for value in values)
        # does_not_end_in
        return not any(text.endswith(value) for value in values)

    def transform_params_to_options(self, params, token=""):
        return self.positional_options(params, self.FORMS, token)
