"""
Composition root where all rule engine dependencies are wired together.
"""

from dataclasses import dataclass
from typing import Optional

from langrules.application.cache import LanguageRuleCache
from langrules.application.config import Config, get_config
from langrules.application.lifecycle import LanguageRuleService
from langrules.application.ports import AuditTrail, CachePort, LanguageRuleRepository
from langrules.application.sync import SyncCodec
from langrules.application.transform import TransformEngine
from langrules.domain.rules.registry import RuleKindRegistry
from langrules.infrastructure.audit.structlog_audit import StructlogAuditTrail
from langrules.infrastructure.cache.memory_cache import InMemoryCache
from langrules.infrastructure.repositories.language_rule_repository import (
    InMemoryLanguageRuleRepository,
)
from langrules.infrastructure.rules_config import build_registry
from langrules.shared.logging import configure_logging


@dataclass(frozen=True)
class RuleEngine:
    """Wired rule engine components."""

    config: Config
    registry: RuleKindRegistry
    repository: LanguageRuleRepository
    cache: LanguageRuleCache
    rules: LanguageRuleService
    transform: TransformEngine
    sync: SyncCodec


def bootstrap_logging(config: Config) -> None:
    """Configure structured logging from application configuration."""
    configure_logging(
        environment=config.ENVIRONMENT.value,
        log_level=config.LOG_LEVEL,
        json_logs=config.json_logs,
        include_caller_info=True,
    )


def bootstrap_engine(
    config: Optional[Config] = None,
    registry: Optional[RuleKindRegistry] = None,
    repository: Optional[LanguageRuleRepository] = None,
    cache: Optional[CachePort] = None,
    audit: Optional[AuditTrail] = None,
) -> RuleEngine:
    """
    Build the rule engine, defaulting every collaborator to the in-memory
    adapters.

    Args:
        config: Configuration, the global one when omitted
        registry: Rule kinds, loaded from ``RULES_CONFIG_PATH`` when omitted
        repository: Rule storage
        cache: Keyed cache backing the rule cache facade
        audit: Audit trail for translator actions

    Returns:
        Wired RuleEngine
    """
    config = config or get_config()
    registry = registry or build_registry(config.RULES_CONFIG_PATH)
    repository = repository or InMemoryLanguageRuleRepository()
    rule_cache = LanguageRuleCache(
        cache or InMemoryCache(default_ttl_seconds=config.CACHE_TTL_SECONDS),
        repository,
    )
    rules = LanguageRuleService(repository, rule_cache, audit or StructlogAuditTrail())

    return RuleEngine(
        config=config,
        registry=registry,
        repository=repository,
        cache=rule_cache,
        rules=rules,
        transform=TransformEngine(registry, repository),
        sync=SyncCodec(registry, repository, rules),
    )
