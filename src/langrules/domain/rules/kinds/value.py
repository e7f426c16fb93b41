"""Value rules: agreement with the spelling of the interpolated word."""

from typing import Any, List

from langrules.domain.rules.kinds.base import OTHER, PartRuleKind


class ValueRuleKind(PartRuleKind):
    """
    Compares the text of a value with literal strings, prefixes or suffixes.

    Used by languages whose surrounding words change with the first or last
    letters of the inserted word.
    """

    keyword = "value"
    parts = (
        "is",
        "is_not",
        "starts_with",
        "does_not_start_with",
        "ends_with",
        "does_not_end_with",
    )

    FORMS = {
        1: (OTHER,),
    }

    @property
    def dependency(self) -> str:
        return "value"

    def token_value(self, obj: Any) -> str:
        return str(super().token_value(obj))

    def evaluate_part(self, part: str, values: List[str], subject: str) -> bool:
        if part == "is":
            return subject in values
        if part == "is_not":
            return subject not in values
        if part == "starts_with":
            return subject.startswith(tuple(values))
        if part == "does_not_start_with":
            return not subject.startswith(tuple(values))
        if part == "ends_with":
            return subject.endswith(tuple(values))
        # does_not_end_with
        return not subject.endswith(tuple(values))

    def transform_params_to_options(self, params, token=""):
        return self.positional_options(params, self.FORMS, token)
