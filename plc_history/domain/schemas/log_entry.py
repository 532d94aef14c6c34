"""Pydantic schemas for the PLC directory audit log. Strict validation, converts to domain entries."""

from types import MappingProxyType
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from plc_history.domain.models.operation import (
    GenesisOperation,
    LogEntry,
    Operation,
    Service,
    StateOperation,
    TombstoneOperation,
    UnknownOperation,
)

KNOWN_OPERATION_TYPES = frozenset({"create", "plc_operation", "plc_tombstone"})
UNKNOWN_TAG = "unknown"


# ---------------------------------------------------------------------------
# Operation schemas
# ---------------------------------------------------------------------------

class ServiceSchema(BaseModel):
    """Service entry as it appears in a plc_operation."""

    model_config = ConfigDict(extra="ignore")

    type: str
    endpoint: str


class CreateOperationSchema(BaseModel):
    """Legacy genesis operation (`create`)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: Literal["create"]
    signing_key: str = Field(..., alias="signingKey")
    recovery_key: str = Field(..., alias="recoveryKey")
    handle: str
    service: str
    prev: Optional[str] = None
    sig: str = ""

    def to_domain(self) -> GenesisOperation:
        return GenesisOperation(
            signing_key=self.signing_key,
            recovery_key=self.recovery_key,
            handle=self.handle,
            service=self.service,
            prev=self.prev,
            sig=self.sig,
        )


class PlcOperationSchema(BaseModel):
    """Full-state operation (`plc_operation`)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: Literal["plc_operation"]
    rotation_keys: List[str] = Field(..., alias="rotationKeys")
    verification_methods: Dict[str, str] = Field(..., alias="verificationMethods")
    also_known_as: List[str] = Field(..., alias="alsoKnownAs")
    services: Dict[str, ServiceSchema]
    prev: Optional[str] = None
    sig: str = ""

    def to_domain(self) -> StateOperation:
        return StateOperation(
            rotation_keys=tuple(self.rotation_keys),
            verification_methods=MappingProxyType(dict(self.verification_methods)),
            also_known_as=tuple(self.also_known_as),
            services=MappingProxyType(
                {sid: Service(type=svc.type, endpoint=svc.endpoint) for sid, svc in self.services.items()}
            ),
            prev=self.prev,
            sig=self.sig,
        )


class TombstoneOperationSchema(BaseModel):
    """Identity retirement (`plc_tombstone`)."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["plc_tombstone"]
    prev: str
    sig: str = ""

    def to_domain(self) -> TombstoneOperation:
        return TombstoneOperation(prev=self.prev, sig=self.sig)


class UnknownOperationSchema(BaseModel):
    """Any other operation tag. Payload is kept verbatim."""

    model_config = ConfigDict(extra="allow")

    # Raw tag as sent; may be missing or not a string.
    type: Any = None

    def to_domain(self) -> UnknownOperation:
        return UnknownOperation(type=self.type, payload=MappingProxyType(dict(self.model_extra or {})))


def _operation_tag(value: Any) -> str:
    """Route known tags to their schema; everything else parses as unknown."""
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    if isinstance(tag, str) and tag in KNOWN_OPERATION_TYPES:
        return tag
    return UNKNOWN_TAG


OperationSchema = Annotated[
    Union[
        Annotated[CreateOperationSchema, Tag("create")],
        Annotated[PlcOperationSchema, Tag("plc_operation")],
        Annotated[TombstoneOperationSchema, Tag("plc_tombstone")],
        Annotated[UnknownOperationSchema, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(_operation_tag),
]


# ---------------------------------------------------------------------------
# Log entry schema
# ---------------------------------------------------------------------------

class IndexedEntrySchema(BaseModel):
    """One audit log row as returned by `GET /{did}/log/audit`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    did: str
    operation: OperationSchema
    cid: str
    nullified: bool = False
    created_at: str = Field(..., alias="createdAt")

    def to_domain(self) -> LogEntry:
        op: Operation = self.operation.to_domain()
        return LogEntry(
            did=self.did,
            operation=op,
            cid=self.cid,
            nullified=self.nullified,
            created_at=self.created_at,
        )


_audit_log_adapter = TypeAdapter(List[IndexedEntrySchema])


def parse_audit_log(payload: Any) -> list[LogEntry]:
    """
    Validate a decoded audit log (JSON array) and convert it to domain entries in input order.
    Raises pydantic.ValidationError on structural violations.
    """
    return [row.to_domain() for row in _audit_log_adapter.validate_python(payload)]
