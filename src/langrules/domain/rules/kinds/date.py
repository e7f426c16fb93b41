"""Date rules: tense agreement with a date relative to today."""

from datetime import date, datetime
from typing import Any, List

from langrules.domain.rules.kinds.base import OTHER, PartRuleKind


class DateRuleKind(PartRuleKind):
    """Classifies a date as past, present or future."""

    keyword = "date"
    parts = ("is", "is_not")
    allowed_values = ("past", "present", "future")

    FORMS = {
        1: (OTHER,),
        3: ("past", "present", "future"),
    }

    @property
    def dependency(self) -> str:
        return "date"

    def today(self) -> date:
        return date.today()

    def token_value(self, obj: Any) -> date:
        value = super().token_value(obj)
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return date.fromisoformat(value.strip()[:10])
            except ValueError:
                raise ValueError(f"Date rules cannot classify {value!r}")
        raise ValueError(f"Date rules cannot classify {value!r}")

    def tense(self, subject: date) -> str:
        today = self.today()
        if subject < today:
            return "past"
        if subject > today:
            return "future"
        return "present"

    def evaluate_part(self, part: str, values: List[str], subject: date) -> bool:
        matched = self.tense(subject) in values
        return matched if part == "is" else not matched

    def transform_params_to_options(self, params, token=""):
        return self.positional_options(params, self.FORMS, token)
