"""Test configuration and shared fixtures."""

import pytest

from langrules.application.cache import LanguageRuleCache
from langrules.application.lifecycle import LanguageRuleService
from langrules.application.sync import SyncCodec
from langrules.application.transform import TransformEngine
from langrules.domain.rules import LanguageRule, RuleKindRegistry
from langrules.infrastructure.repositories.language_rule_repository import (
    InMemoryLanguageRuleRepository,
)
from langrules.infrastructure.rules_config import build_registry
from tests.fakes import FakeAuditTrail, FakeCache


@pytest.fixture
def language_id() -> str:
    """Language used by most tests."""
    return "ru"


@pytest.fixture
def translator_id() -> str:
    """Valid translator ID for tests."""
    return "translator_42"


@pytest.fixture
def registry() -> RuleKindRegistry:
    """Registry built from the packaged rules_engine.yml."""
    return build_registry()


@pytest.fixture
def repository() -> InMemoryLanguageRuleRepository:
    return InMemoryLanguageRuleRepository()


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def audit() -> FakeAuditTrail:
    return FakeAuditTrail()


@pytest.fixture
def rule_cache(fake_cache, repository) -> LanguageRuleCache:
    return LanguageRuleCache(fake_cache, repository)


@pytest.fixture
def rules(repository, rule_cache, audit) -> LanguageRuleService:
    return LanguageRuleService(repository, rule_cache, audit)


@pytest.fixture
def engine(registry, repository) -> TransformEngine:
    return TransformEngine(registry, repository)


@pytest.fixture
def codec(registry, repository, rules) -> SyncCodec:
    return SyncCodec(registry, repository, rules)


@pytest.fixture
def few_definition() -> dict:
    """Russian 'few' form: ends in 2, 3, 4 but not 12, 13, 14."""
    return {
        "multipart": True,
        "part1": "ends_in",
        "value1": "2,3,4",
        "operator": "and",
        "part2": "does_not_end_in",
        "value2": "12,13,14",
    }


@pytest.fixture
def russian_rules(registry, rules, language_id, few_definition) -> dict[str, LanguageRule]:
    """Persisted Russian numeric rules keyed by rule keyword."""
    number = registry.resolve("number")
    definitions = {
        "one": {
            "multipart": True,
            "part1": "ends_in",
            "value1": "1",
            "operator": "and",
            "part2": "does_not_end_in",
            "value2": "11",
        },
        "ends_in": few_definition,
        "does_not_end_in": {"part1": "ends_in", "value1": "12,13,14"},
    }
    return {
        keyword: rules.create(LanguageRule.create(number, language_id, definition, keyword=keyword))
        for keyword, definition in definitions.items()
    }
