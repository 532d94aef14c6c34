"""Domain validators. Identifier syntax checks."""

from plc_history.domain.validators.identifier_validator import (
    is_did,
    is_handle,
    is_plc_did,
    normalize_query,
    validate_plc_did,
    validate_query,
)

__all__ = [
    "is_did",
    "is_handle",
    "is_plc_did",
    "normalize_query",
    "validate_plc_did",
    "validate_query",
]
