"""Transform engine: selects the phrase variant matching a runtime value."""

from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from langrules.application.ports import LanguageRuleRepository
from langrules.domain.errors import (
    InvalidTransformFormError,
    NoRuleMatchedError,
    UnknownRuleNameError,
)
from langrules.domain.rules.entities import LanguageRule
from langrules.domain.rules.kinds.base import OTHER
from langrules.domain.rules.registry import RuleKindRegistry
from langrules.domain.rules.value_objects import Token
from langrules.shared.logging import get_logger, get_correlation_id


class TransformEngine:
    """
    Evaluates a language's rules against a value and picks the labeled option
    of the first rule that matches.

    Options are tried in declaration order, so a narrow exception listed before
    a broad rule wins over it. ``other`` is never looked up as a rule; it is
    the fallback when nothing matched.
    """

    def __init__(self, registry: RuleKindRegistry, repository: LanguageRuleRepository) -> None:
        self._registry = registry
        self._repository = repository
        self._logger = get_logger("application.transform")

    def transform(
        self,
        token: Union[str, Token],
        value: Any,
        options: Mapping[str, Any],
        language_id: str,
        kind: Optional[str] = None,
    ) -> Any:
        """
        Return the option selected for ``value``.

        Args:
            token: Interpolation token, used in error messages
            value: Runtime object being classified
            options: Ordered rule keyword -> option value table
            language_id: Target language
            kind: Optional type keyword restricting rule lookups

        Raises:
            InvalidTransformFormError: If ``options`` is empty
            UnknownRuleNameError: If an option names a rule the language lacks
            NoRuleMatchedError: If nothing matched and there is no ``other``
        """
        token_name = str(token)
        if not options:
            raise InvalidTransformFormError(token_name)

        for keyword in options:
            if keyword == OTHER:
                continue

            rule = self.rule_for_keyword_and_language(keyword, language_id, kind)
            if rule is None:
                raise UnknownRuleNameError(token_name, keyword, language_id)

            if rule.evaluate(value):
                self._logger.debug(
                    "transform_rule_matched",
                    token=token_name,
                    keyword=keyword,
                    rule_id=rule.id,
                    language_id=language_id,
                    correlation_id=get_correlation_id(),
                )
                return options[keyword]

        if OTHER in options:
            self._logger.debug(
                "transform_fallback_to_other",
                token=token_name,
                language_id=language_id,
                correlation_id=get_correlation_id(),
            )
            return options[OTHER]

        raise NoRuleMatchedError(token_name, options, value, language_id)

    def transform_params(
        self,
        token: Union[str, Token],
        value: Any,
        params: Sequence[str],
        language_id: str,
    ) -> Any:
        """
        Transform using raw label parameters (``{count || message, messages}``).

        The token's kind is found through its declared dependency or suffix and
        parses the parameters into options.
        """
        if isinstance(token, str):
            token = Token.parse(token)
        if not params:
            raise InvalidTransformFormError(token.name)

        kind = self._registry.kind_for_token(token)
        options = kind.transform_params_to_options(params, token.name)
        return self.transform(token, value, options, language_id, kind=kind.keyword)

    def rule_for_keyword_and_language(
        self, keyword: str, language_id: str, kind: Optional[str] = None
    ) -> Optional[LanguageRule]:
        return self._repository.find_one(language_id, keyword, kind)

    def rules_for_language(self, language_id: str) -> List[LanguageRule]:
        return self._repository.find_all(language_id)

    def kind_options(self) -> List[Tuple[str, str]]:
        return self._registry.options()
