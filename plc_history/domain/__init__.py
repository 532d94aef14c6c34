"""Domain layer: models, history builder, schemas, validators, exceptions. Pure business logic only."""

from plc_history.domain.exceptions import (
    DomainError,
    DomainValidationError,
    InvalidIdentifierError,
)
from plc_history.domain.history import build_operation_history
from plc_history.domain.models import DiffEvent, IdentityState, LogEntry
from plc_history.domain.schemas import (
    OperationGroupResponse,
    OperationHistoryResponse,
    parse_audit_log,
)
from plc_history.domain.validators import validate_plc_did, validate_query

__all__ = [
    "DiffEvent",
    "DomainError",
    "DomainValidationError",
    "IdentityState",
    "InvalidIdentifierError",
    "LogEntry",
    "OperationGroupResponse",
    "OperationHistoryResponse",
    "build_operation_history",
    "parse_audit_log",
    "validate_plc_did",
    "validate_query",
]
