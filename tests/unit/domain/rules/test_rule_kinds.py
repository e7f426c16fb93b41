"""Tests for the built-in rule kinds."""

from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from langrules.domain.errors import InvalidTransformFormError, MalformedDefinitionError
from langrules.domain.rules.kinds import (
    DateRuleKind,
    GenderListRuleKind,
    GenderRuleKind,
    ListRuleKind,
    NumericRuleKind,
    RuleKind,
    ValueRuleKind,
)
from langrules.domain.rules.value_objects import RuleDefinition, Token


def definition(**values) -> RuleDefinition:
    return RuleDefinition(values)


class TestRuleKindContract:
    """The abstract contract cannot be instantiated without overrides."""

    def test_abstract_kind_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            RuleKind()

    def test_incomplete_kind_cannot_be_instantiated(self):
        class Incomplete(RuleKind):
            keyword = "incomplete"

            @property
            def dependency(self):
                return "incomplete"

        with pytest.raises(TypeError):
            Incomplete()

    def test_dependency_label_defaults_to_dependency(self):
        assert NumericRuleKind().dependency_label == "number"
        assert NumericRuleKind({"label": "Number"}).dependency_label == "Number"

    def test_is_dependent_by_declared_dependency_or_suffix(self):
        kind = NumericRuleKind({"token_suffixes": ["count"]})

        assert kind.is_dependent(Token("total", dependency="number"))
        assert kind.is_dependent(Token("user_count"))
        assert not kind.is_dependent(Token("user"))


class TestNumericRuleKind:
    """Numeric pluralization rules."""

    @pytest.fixture
    def kind(self) -> NumericRuleKind:
        return NumericRuleKind()

    @pytest.fixture
    def few(self, few_definition) -> RuleDefinition:
        return RuleDefinition(few_definition)

    @pytest.mark.parametrize("value", [2, 3, 4, 22, 103, 1004])
    def test_few_matches(self, kind, few, value):
        assert kind.evaluate(few, value) is True

    @pytest.mark.parametrize("value", [1, 5, 11, 12, 13, 14, 112, 0])
    def test_few_does_not_match(self, kind, few, value):
        assert kind.evaluate(few, value) is False

    def test_is_and_is_not(self, kind):
        assert kind.evaluate(definition(part="is", value="1"), 1)
        assert not kind.evaluate(definition(part="is", value="1"), 21)
        assert kind.evaluate(definition(part="is_not", value="0, 1"), 2)

    def test_or_operator(self, kind):
        rule = definition(
            multipart="true", part1="is", value1="0", operator="or", part2="ends_in", value2="5"
        )

        assert kind.evaluate(rule, 0)
        assert kind.evaluate(rule, 25)
        assert not kind.evaluate(rule, 7)

    def test_numeric_strings_and_whole_floats_are_coerced(self, kind):
        rule = definition(part="is", value="3")

        assert kind.evaluate(rule, "3")
        assert kind.evaluate(rule, 3.0)

    @pytest.mark.parametrize("value", [1.5, 3.7, float("nan"), float("inf"), "1.5"])
    def test_fractional_counts_fail(self, kind, value):
        with pytest.raises(ValueError):
            kind.evaluate(definition(part="is", value="1"), value)

    def test_non_numeric_value_fails(self, kind):
        with pytest.raises(ValueError):
            kind.evaluate(definition(part="is", value="1"), "many")

    def test_unknown_part_is_malformed(self, kind):
        with pytest.raises(MalformedDefinitionError):
            kind.evaluate(definition(part="between", value="1"), 1)

    def test_unknown_operator_is_malformed(self, kind):
        rule = definition(
            multipart=True, part1="is", value1="1", operator="xor", part2="is", value2="2"
        )
        with pytest.raises(MalformedDefinitionError):
            kind.evaluate(rule, 1)

    def test_missing_second_part_is_malformed(self, kind):
        with pytest.raises(MalformedDefinitionError):
            kind.evaluate(definition(multipart=True, part1="is", value1="1"), 1)

    def test_evaluate_does_not_mutate_definition(self, kind, few):
        before = few.to_dict()
        kind.evaluate(few, 3)

        assert few.to_dict() == before

    def test_describe(self, kind, few):
        assert kind.describe(few) == "ends in 2, 3, 4 and does not end in 12, 13, 14"
        assert kind.token_description(few, "count").startswith("if count ends in")

    def test_positional_params(self, kind):
        assert kind.transform_params_to_options(["messages"]) == {"other": "messages"}
        assert kind.transform_params_to_options(["message", "messages"]) == {
            "one": "message",
            "other": "messages",
        }

    def test_keyword_params_preserve_order(self, kind):
        options = kind.transform_params_to_options(
            ["few: сообщения", "one: сообщение", "other: сообщений"]
        )

        assert list(options) == ["few", "one", "other"]
        assert options["one"] == "сообщение"

    def test_colons_inside_positional_values(self, kind):
        assert kind.transform_params_to_options(["at 1:00", "at 2:00"]) == {
            "one": "at 1:00",
            "other": "at 2:00",
        }
        assert kind.transform_params_to_options(["10:00"]) == {"other": "10:00"}

    def test_too_many_positional_params(self, kind):
        with pytest.raises(InvalidTransformFormError):
            kind.transform_params_to_options(["a", "b", "c"], token="count")

    def test_no_params(self, kind):
        with pytest.raises(InvalidTransformFormError):
            kind.transform_params_to_options([], token="count")


class TestGenderRuleKind:
    """Gender agreement rules."""

    @pytest.fixture
    def kind(self) -> GenderRuleKind:
        return GenderRuleKind(
            {"object_method": "gender", "method_values": {"male": "m", "female": "f"}}
        )

    def test_reads_gender_through_object_method(self, kind):
        user = SimpleNamespace(gender="f")

        assert kind.evaluate(definition(part="is", value="female"), user)
        assert not kind.evaluate(definition(part="is", value="male"), user)

    def test_reads_gender_from_mapping(self, kind):
        assert kind.evaluate(definition(part="is_not", value="female"), {"gender": "m"})

    def test_legacy_operator_form(self, kind):
        assert kind.evaluate(definition(operator="is", value="male"), {"gender": "m"})

    def test_unknown_gender_value_is_malformed(self, kind):
        with pytest.raises(MalformedDefinitionError):
            kind.evaluate(definition(part="is", value="robot"), {"gender": "m"})

    def test_two_params_build_combined_other(self, kind):
        assert kind.transform_params_to_options(["he", "she"]) == {
            "male": "he",
            "female": "she",
            "other": "he/she",
        }

    def test_two_params_with_colons(self, kind):
        assert kind.transform_params_to_options(["male: at 9:00", "female: at 10:00"]) == {
            "male": "at 9:00",
            "female": "at 10:00",
        }
        assert kind.transform_params_to_options(["him at 9:00", "her at 9:00"])["other"] == (
            "him at 9:00/her at 9:00"
        )

    def test_three_params(self, kind):
        assert kind.transform_params_to_options(["he", "she", "they"]) == {
            "male": "he",
            "female": "she",
            "other": "they",
        }


class TestGenderListRuleKind:
    """Gender list agreement rules."""

    @pytest.fixture
    def kind(self) -> GenderListRuleKind:
        return GenderListRuleKind({"object_method": "gender"})

    def people(self, *genders):
        return [{"gender": gender} for gender in genders]

    def test_one_element(self, kind):
        assert kind.evaluate(definition(part="is", value="one_element"), self.people("male"))
        assert kind.evaluate(definition(part="is", value="one_female"), self.people("female"))
        assert not kind.evaluate(definition(part="is", value="one_male"), self.people("female"))

    def test_all_and_mixed(self, kind):
        assert kind.evaluate(definition(part="is", value="all_male"), self.people("male", "male"))
        assert kind.evaluate(definition(part="is", value="mixed"), self.people("male", "female"))
        assert not kind.evaluate(definition(part="is", value="mixed"), self.people("male"))

    def test_at_least_two(self, kind):
        assert kind.evaluate(definition(part="is", value="at_least_two"), self.people("male", "female"))
        assert kind.evaluate(definition(part="is_not", value="at_least_two"), self.people("male"))

    def test_non_list_value_fails(self, kind):
        with pytest.raises(ValueError):
            kind.evaluate(definition(part="is", value="one_element"), "male")


class TestListRuleKind:
    """List size rules."""

    @pytest.fixture
    def kind(self) -> ListRuleKind:
        return ListRuleKind()

    def test_one_element(self, kind):
        assert kind.evaluate(definition(part="is", value="one_element"), ["a"])
        assert not kind.evaluate(definition(part="is", value="one_element"), ["a", "b"])

    def test_at_least_two_elements(self, kind):
        assert kind.evaluate(definition(part="is", value="at_least_two_elements"), ("a", "b", "c"))

    def test_unknown_value_is_malformed(self, kind):
        with pytest.raises(MalformedDefinitionError):
            kind.evaluate(definition(part="is", value="three"), ["a"])


class TestDateRuleKind:
    """Date tense rules."""

    @pytest.fixture
    def kind(self) -> DateRuleKind:
        return DateRuleKind()

    def test_tenses(self, kind):
        today = date.today()

        assert kind.evaluate(definition(part="is", value="past"), today - timedelta(days=3))
        assert kind.evaluate(definition(part="is", value="present"), today)
        assert kind.evaluate(definition(part="is", value="future"), today + timedelta(days=1))

    def test_accepts_datetimes_and_iso_strings(self, kind):
        assert kind.evaluate(definition(part="is", value="past"), datetime(2001, 1, 1, 12, 0))
        assert kind.evaluate(definition(part="is_not", value="future"), "2001-01-01")

    def test_invalid_value_fails(self, kind):
        with pytest.raises(ValueError):
            kind.evaluate(definition(part="is", value="past"), "yesterday")


class TestValueRuleKind:
    """Spelling based rules."""

    @pytest.fixture
    def kind(self) -> ValueRuleKind:
        return ValueRuleKind()

    def test_prefixes_and_suffixes(self, kind):
        assert kind.evaluate(definition(part="starts_with", value="a, e, i, o, u"), "apple")
        assert kind.evaluate(definition(part="does_not_start_with", value="a, e"), "pear")
        assert kind.evaluate(definition(part="ends_with", value="s"), "apples")
        assert kind.evaluate(definition(part="does_not_end_with", value="s"), "apple")

    def test_exact_values(self, kind):
        assert kind.evaluate(definition(part="is", value="Moscow, Kyiv"), "Kyiv")
        assert kind.evaluate(definition(part="is_not", value="Moscow"), "Kyiv")

    def test_only_other_is_positional(self, kind):
        with pytest.raises(InvalidTransformFormError):
            kind.transform_params_to_options(["a", "b"], token="city")
