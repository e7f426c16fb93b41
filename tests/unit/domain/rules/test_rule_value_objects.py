"""Tests for language rule value objects."""

import pytest

from langrules.domain.errors import MalformedDefinitionError
from langrules.domain.rules.value_objects import (
    RuleDefinition,
    Token,
    humanize_values,
    sanitize_values,
)


class TestValueLists:
    """Comma separated value lists used inside definitions."""

    def test_sanitize_trims_each_element(self):
        assert sanitize_values("2, 3,4") == ["2", "3", "4"]

    def test_sanitize_empty_input(self):
        assert sanitize_values("") == []
        assert sanitize_values(None) == []

    def test_humanize_normalizes_spacing(self):
        assert humanize_values("2, 3,4") == "2, 3, 4"

    def test_humanize_of_sanitized_list_round_trips(self):
        sanitized = sanitize_values("2, 3,4")
        assert humanize_values(",".join(sanitized)) == "2, 3, 4"


class TestRuleDefinition:
    """Normalized-key definition mapping."""

    def test_keys_are_indifferent_to_symbol_and_case(self):
        definition = RuleDefinition({":Part1": "is", "value1": "1"})

        assert definition["part1"] == "is"
        assert definition[":part1"] == "is"
        assert definition["PART1"] == "is"
        assert "Value1" in definition
        assert list(definition) == ["part1", "value1"]

    def test_preserves_declaration_order(self):
        definition = RuleDefinition({"value2": "b", "part1": "is", "value1": "a"})

        assert list(definition.keys()) == ["value2", "part1", "value1"]

    def test_duplicate_keys_after_normalization_are_rejected(self):
        with pytest.raises(MalformedDefinitionError):
            RuleDefinition({"part": "is", ":part": "is_not"})

    def test_equality_ignores_key_spelling(self):
        assert RuleDefinition({":part": "is", "value": "1"}) == {"part": "is", "value": "1"}

    def test_equality_is_exact_on_values(self):
        assert RuleDefinition({"multipart": True}) != RuleDefinition({"multipart": "true"})

    def test_flag_accepts_boolean_or_text(self):
        assert RuleDefinition({"multipart": True}).flag("multipart")
        assert RuleDefinition({"multipart": "true"}).flag("multipart")
        assert not RuleDefinition({"multipart": "false"}).flag("multipart")
        assert not RuleDefinition({}).flag("multipart")

    def test_require_reports_missing_key(self):
        with pytest.raises(MalformedDefinitionError) as exc_info:
            RuleDefinition({"part": "is"}).require("value", "number")

        assert exc_info.value.kind == "number"
        assert "value" in exc_info.value.reason

    def test_to_dict_returns_normalized_copy(self):
        definition = RuleDefinition({":part": "is"})
        data = definition.to_dict()
        data["part"] = "is_not"

        assert definition["part"] == "is"


class TestToken:
    """Interpolation tokens."""

    def test_suffix_is_last_name_part(self):
        assert Token("user_count").suffix == "count"
        assert Token("count").suffix == "count"

    @pytest.mark.parametrize(
        "text, name, dependency",
        [
            ("{count}", "count", None),
            ("{count:number}", "count", "number"),
            ("actor:gender", "actor", "gender"),
            ("{count || message, messages}", "count", None),
        ],
    )
    def test_parse(self, text, name, dependency):
        token = Token.parse(text)

        assert token.name == name
        assert token.dependency == dependency

    def test_name_is_required(self):
        with pytest.raises(ValueError):
            Token("  ")
