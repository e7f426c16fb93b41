"""Domain errors for the language rule engine."""

from typing import Any, Mapping, Optional


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class RuleKindNotImplementedError(DomainError):
    """Raised when a rule kind is registered without a required member."""

    def __init__(self, kind: str, member: str) -> None:
        message = f"Rule kind {kind} must implement {member}"
        super().__init__(message)
        self.kind = kind
        self.member = member


class UnknownRuleKindError(DomainError):
    """Raised when a keyword has no registered rule kind."""

    def __init__(self, keyword: str) -> None:
        super().__init__(f"Unknown rule kind {keyword}")
        self.keyword = keyword


class InvalidTransformFormError(DomainError):
    """Raised when a transform token is used without any options."""

    def __init__(self, token: str, reason: Optional[str] = None) -> None:
        message = f"Invalid form for token {token}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.token = token
        self.reason = reason


class UnknownRuleNameError(DomainError):
    """Raised when an option names a rule that does not exist in the language."""

    def __init__(self, token: str, keyword: str, language_id: str) -> None:
        message = (
            f"Invalid rule name {keyword} for transform token {token} "
            f"in language {language_id}"
        )
        super().__init__(message)
        self.token = token
        self.keyword = keyword
        self.language_id = language_id


class NoRuleMatchedError(DomainError):
    """Raised when no rule matched and the options carry no `other` fallback."""

    def __init__(
        self,
        token: str,
        options: Mapping[str, Any],
        value: Any,
        language_id: str,
    ) -> None:
        message = (
            f"No rules matched for transform token {token} : {dict(options)!r} : "
            f"{value!r} in language {language_id}"
        )
        super().__init__(message)
        self.token = token
        self.options = dict(options)
        self.value = value
        self.language_id = language_id


class MalformedDefinitionError(DomainError):
    """Raised when a rule definition cannot be interpreted by its kind."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"Malformed {kind} rule definition: {reason}")
        self.kind = kind
        self.reason = reason


class ImmutableRuleKindError(DomainError):
    """Raised when a persisted rule would change its kind."""

    def __init__(self, rule_id: Any, from_kind: str, to_kind: str) -> None:
        message = f"Rule {rule_id} cannot change kind from {from_kind} to {to_kind}"
        super().__init__(message)
        self.rule_id = rule_id
        self.from_kind = from_kind
        self.to_kind = to_kind
