"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class IdentityNotFoundError(ApplicationError):
    """Raised when a handle does not resolve or the directory has no log for the DID."""


class UnsupportedDidMethodError(ApplicationError):
    """Raised for DIDs other than did:plc. Only PLC identities have an operation log."""


class DirectoryUnavailableError(ApplicationError):
    """Raised when the PLC directory cannot be reached or answers with an unexpected status."""


class InvalidAuditLogError(ApplicationError):
    """Raised when the directory returns an audit log that does not match the expected schema."""
