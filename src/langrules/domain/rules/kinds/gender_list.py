"""Gender list rules: agreement with a list of person-like objects."""

from collections.abc import Sized
from typing import Any, List

from langrules.domain.rules.kinds.base import OTHER, PartRuleKind, read_attribute


class GenderListRuleKind(PartRuleKind):
    """Classifies a list by its size and the genders of its members."""

    keyword = "gender_list"
    parts = ("is", "is_not")
    allowed_values = (
        "one_element",
        "one_male",
        "one_female",
        "one_unknown",
        "at_least_two",
        "all_male",
        "all_female",
        "mixed",
    )

    FORMS = {
        1: (OTHER,),
        2: ("one_element", OTHER),
        4: ("one_male", "one_female", "one_unknown", OTHER),
    }

    @property
    def dependency(self) -> str:
        return "gender_list"

    def token_value(self, obj: Any) -> List[Any]:
        if isinstance(obj, (str, bytes)) or not isinstance(obj, Sized):
            raise ValueError(f"Gender list rules cannot classify {obj!r}")
        method = self.config.get("object_method")
        method_values = self.config.get("method_values") or {}
        reverse = {stored: gender for gender, stored in method_values.items()}
        genders = []
        for member in obj:
            gender = read_attribute(member, method) if method else member
            genders.append(reverse.get(gender, gender))
        return genders

    def classify(self, value: str, genders: List[Any]) -> bool:
        if value == "one_element":
            return len(genders) == 1
        if value in ("one_male", "one_female", "one_unknown"):
            return len(genders) == 1 and genders[0] == value[len("one_"):]
        if value == "at_least_two":
            return len(genders) >= 2
        if value == "all_male":
            return bool(genders) and all(gender == "male" for gender in genders)
        if value == "all_female":
            return bool(genders) and all(gender == "female" for gender in genders)
        # mixed
        return len(genders) >= 2 and len(set(genders)) > 1

    def evaluate_part(self, part: str, values: List[str], subject: List[Any]) -> bool:
        matched = any(self.classify(value, subject) for value in values)
        return matched if part == "is" else not matched

    def transform_params_to_options(self, params, token=""):
        return self.positional_options(params, self.FORMS, token)
