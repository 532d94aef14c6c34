"""Domain schemas. Audit log parsing and response shapes."""

from plc_history.domain.schemas.history import (
    OperationGroupResponse,
    OperationHistoryResponse,
)
from plc_history.domain.schemas.log_entry import (
    IndexedEntrySchema,
    parse_audit_log,
)

__all__ = [
    "IndexedEntrySchema",
    "OperationGroupResponse",
    "OperationHistoryResponse",
    "parse_audit_log",
]
