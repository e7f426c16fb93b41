"""Rule kind configuration loaded from YAML."""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from langrules.domain.errors import UnknownRuleKindError
from langrules.domain.rules.kinds import BUILTIN_KINDS
from langrules.domain.rules.registry import RuleKindRegistry
from langrules.shared.logging import get_logger

DEFAULT_RULES_CONFIG = Path(__file__).with_name("rules_engine.yml")

KIND_CLASSES = {kind_class.keyword: kind_class for kind_class in BUILTIN_KINDS}


def load_rules_config(source: Union[str, Path, Mapping[str, Any], None] = None) -> Dict[str, Any]:
    """
    Read the ``rules_engine`` section.

    Args:
        source: YAML text, a path to a YAML file, an already parsed mapping,
            or None for the packaged defaults

    Returns:
        Mapping of kind keyword -> kind settings, in file order
    """
    if source is None:
        source = DEFAULT_RULES_CONFIG

    if isinstance(source, Mapping):
        data = source
    elif isinstance(source, Path) or os.path.isfile(source):
        with open(source, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    else:
        data = yaml.safe_load(source)

    if not isinstance(data, Mapping):
        raise ValueError("Rules configuration must be a mapping")

    section = data.get("rules_engine", data)
    if not isinstance(section, Mapping):
        raise ValueError("rules_engine section must be a mapping")
    return {str(keyword): dict(settings or {}) for keyword, settings in section.items()}


def build_registry(source: Union[str, Path, Mapping[str, Any], None] = None) -> RuleKindRegistry:
    """
    Build a registry holding one configured kind per configuration entry.

    Entries with ``enabled: false`` are left out.

    Raises:
        UnknownRuleKindError: If the configuration names a kind that has no implementation
    """
    registry = RuleKindRegistry()
    for keyword, settings in load_rules_config(source).items():
        if settings.pop("enabled", True) is False:
            continue
        kind_class = KIND_CLASSES.get(keyword)
        if kind_class is None:
            raise UnknownRuleKindError(keyword)
        registry.register(kind_class(settings))

    get_logger("infrastructure.rules_config").info(
        "rule_kinds_loaded", keywords=registry.keywords()
    )
    return registry
