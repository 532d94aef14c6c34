"""Domain model for PLC audit log entries. Pure business semantics, no parsing or transport."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional, Union

ATPROTO_VERIFICATION_METHOD = "atproto"
ATPROTO_PDS_SERVICE_ID = "atproto_pds"
ATPROTO_PDS_SERVICE_TYPE = "AtprotoPersonalDataServer"
AT_URI_PREFIX = "at://"


@dataclass(frozen=True)
class Service:
    """A DID document service entry."""

    type: str
    endpoint: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "endpoint": self.endpoint}


@dataclass(frozen=True)
class GenesisOperation:
    """Legacy `create` operation. Narrower shape than a state operation."""

    signing_key: str
    recovery_key: str
    handle: str
    service: str
    prev: Optional[str] = None
    sig: str = ""

    type = "create"


@dataclass(frozen=True)
class StateOperation:
    """`plc_operation`: full replacement snapshot of the DID document state."""

    rotation_keys: tuple[str, ...]
    verification_methods: Mapping[str, str]
    also_known_as: tuple[str, ...]
    services: Mapping[str, Service]
    prev: Optional[str] = None
    sig: str = ""

    type = "plc_operation"


@dataclass(frozen=True)
class TombstoneOperation:
    """`plc_tombstone`: the identity is retired. Carries no state."""

    prev: str
    sig: str = ""

    type = "plc_tombstone"


@dataclass(frozen=True)
class UnknownOperation:
    """Any operation tag this model does not know. Kept so consumers can skip it explicitly."""

    type: Any
    payload: Mapping[str, Any] = field(default_factory=dict)


Operation = Union[GenesisOperation, StateOperation, TombstoneOperation, UnknownOperation]


@dataclass(frozen=True, eq=False)
class LogEntry:
    """
    One row of the append-only audit log.
    Compared and hashed by identity: the entry object itself is the correlation key.
    """

    did: str
    operation: Operation
    cid: str
    nullified: bool
    created_at: str


@dataclass(frozen=True)
class IdentityState:
    """Canonical full state of a DID document, as diffed between log entries."""

    rotation_keys: tuple[str, ...]
    verification_methods: Mapping[str, str]
    also_known_as: tuple[str, ...]
    services: Mapping[str, Service]

    @classmethod
    def from_operation(cls, op: Operation) -> Optional["IdentityState"]:
        """
        Canonicalize an operation into full state.
        Genesis operations are widened to the state-operation shape; tombstones
        and unknown operations have no state and return None.
        """
        if isinstance(op, GenesisOperation):
            return cls(
                rotation_keys=(op.recovery_key, op.signing_key),
                verification_methods=MappingProxyType({ATPROTO_VERIFICATION_METHOD: op.signing_key}),
                also_known_as=(f"{AT_URI_PREFIX}{op.handle}",),
                services=MappingProxyType(
                    {
                        ATPROTO_PDS_SERVICE_ID: Service(
                            type=ATPROTO_PDS_SERVICE_TYPE,
                            endpoint=op.service,
                        )
                    }
                ),
            )
        if isinstance(op, StateOperation):
            return cls(
                rotation_keys=tuple(op.rotation_keys),
                verification_methods=op.verification_methods,
                also_known_as=tuple(op.also_known_as),
                services=op.services,
            )
        return None
