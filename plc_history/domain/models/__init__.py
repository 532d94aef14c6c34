"""Domain models. Pure business entities."""

from plc_history.domain.models.diff import (
    BaseDiffEvent,
    DiffEvent,
    HandleAdded,
    HandleChanged,
    HandleRemoved,
    IdentityCreated,
    IdentityTombstoned,
    RotationKeyAdded,
    RotationKeyRemoved,
    ServiceAdded,
    ServiceChanged,
    ServiceRemoved,
    VerificationMethodAdded,
    VerificationMethodChanged,
    VerificationMethodRemoved,
)
from plc_history.domain.models.operation import (
    GenesisOperation,
    IdentityState,
    LogEntry,
    Operation,
    Service,
    StateOperation,
    TombstoneOperation,
    UnknownOperation,
)

__all__ = [
    "BaseDiffEvent",
    "DiffEvent",
    "GenesisOperation",
    "HandleAdded",
    "HandleChanged",
    "HandleRemoved",
    "IdentityCreated",
    "IdentityState",
    "IdentityTombstoned",
    "LogEntry",
    "Operation",
    "RotationKeyAdded",
    "RotationKeyRemoved",
    "Service",
    "ServiceAdded",
    "ServiceChanged",
    "ServiceRemoved",
    "StateOperation",
    "TombstoneOperation",
    "UnknownOperation",
    "VerificationMethodAdded",
    "VerificationMethodChanged",
    "VerificationMethodRemoved",
]
