"""Application layer errors for the rule engine."""


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize application error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class ValidationError(ApplicationError):
    """Raised when input validation fails."""

    def __init__(self, field: str, message: str) -> None:
        """
        Initialize validation error.

        Args:
            field: Field name that failed validation
            message: Error message
        """
        super().__init__(f"{field}: {message}")
        self.field = field
        self.validation_message = message
