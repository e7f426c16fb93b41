"""List rules: agreement with the number of listed items."""

from collections.abc import Sized
from typing import Any, List

from langrules.domain.rules.kinds.base import OTHER, PartRuleKind


class ListRuleKind(PartRuleKind):
    """Distinguishes a single listed item from several."""

    keyword = "list"
    parts = ("is", "is_not")
    allowed_values = ("one_element", "at_least_two_elements")

    FORMS = {
        1: (OTHER,),
        2: ("one_element", OTHER),
    }

    @property
    def dependency(self) -> str:
        return "list"

    def token_value(self, obj: Any) -> int:
        value = super().token_value(obj)
        if isinstance(value, (str, bytes)) or not isinstance(value, Sized):
            raise ValueError(f"List rules cannot classify {value!r}")
        return len(value)

    def evaluate_part(self, part: str, values: List[str], subject: int) -> bool:
        matched = any(
            subject == 1 if value == "one_element" else subject >= 2
            for value in values
        )
        return matched if part == "is" else not matched

    def transform_params_to_options(self, params, token=""):
        return self.positional_options(params, self.FORMS, token)
