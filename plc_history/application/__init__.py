# Application layer: services that orchestrate domain and infrastructure.

from plc_history.application.directory import HandleResolverPort, PlcDirectory
from plc_history.application.exceptions import (
    ApplicationError,
    DirectoryUnavailableError,
    IdentityNotFoundError,
    InvalidAuditLogError,
    UnsupportedDidMethodError,
)
from plc_history.application.history_service import (
    OperationHistory,
    OperationHistoryService,
    group_history,
)

__all__ = [
    "ApplicationError",
    "DirectoryUnavailableError",
    "HandleResolverPort",
    "IdentityNotFoundError",
    "InvalidAuditLogError",
    "OperationHistory",
    "OperationHistoryService",
    "PlcDirectory",
    "UnsupportedDidMethodError",
    "group_history",
]
