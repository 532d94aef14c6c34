"""Domain-specific exceptions. No infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when domain validation rules are violated."""


class InvalidIdentifierError(DomainValidationError):
    """Raised when a query is neither a DID nor a syntactically valid handle."""
