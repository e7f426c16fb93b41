"""Gender rules: grammatical agreement with a person-like object."""

from typing import Any, List

from langrules.domain.rules.kinds.base import OTHER, PartRuleKind, is_keyword_param

GENDERS = ("male", "female", "neutral", "unknown")


class GenderRuleKind(PartRuleKind):
    """
    Compares an object's gender with the genders named by the definition.

    The object's gender is read through ``object_method`` and compared with the
    value configured for each gender in ``method_values``, so an application
    storing ``"m"``/``"f"`` only needs configuration, not a new kind.
    """

    keyword = "gender"
    parts = ("is", "is_not")
    allowed_values = GENDERS

    FORMS = {
        1: (OTHER,),
        3: ("male", "female", OTHER),
    }

    @property
    def dependency(self) -> str:
        return "gender"

    def method_value(self, gender: str) -> Any:
        return (self.config.get("method_values") or {}).get(gender, gender)

    def evaluate_part(self, part: str, values: List[str], subject: Any) -> bool:
        matched = any(subject == self.method_value(value) for value in values)
        return matched if part == "is" else not matched

    def transform_params_to_options(self, params, token=""):
        params = [param.strip() for param in params]
        if len(params) == 2 and not is_keyword_param(params[0]):
            # {user || he, she} reads "he/she" for anyone else
            return {"male": params[0], "female": params[1], OTHER: f"{params[0]}/{params[1]}"}
        return self.positional_options(params, self.FORMS, token)
