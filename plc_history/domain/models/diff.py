"""Diff events produced by the operation history builder. Immutable value objects."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Union

from plc_history.domain.models.operation import LogEntry, Service


@dataclass(frozen=True)
class BaseDiffEvent:
    """
    Shared properties for diff events: the originating log entry and its timestamp.
    Subclasses add the variant payload and set the `type` discriminant.
    """

    type: ClassVar[str]

    orig: LogEntry
    at: str

    def _payload(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in ("orig", "at")}

    def to_dict(self) -> dict[str, Any]:
        """Structured representation for JSON responses. The entry is reduced to cid and nullified."""
        return {
            "type": self.type,
            "at": self.at,
            "cid": self.orig.cid,
            "nullified": self.orig.nullified,
            **self._payload(),
        }


@dataclass(frozen=True)
class IdentityCreated(BaseDiffEvent):
    """First state of an identity. Holds read-only mappings, so it is not hashable."""

    type: ClassVar[str] = "identity_created"

    __hash__ = None  # type: ignore[assignment]

    rotation_keys: tuple[str, ...]
    verification_methods: Mapping[str, str]
    also_known_as: tuple[str, ...]
    services: Mapping[str, Service]

    def _payload(self) -> dict[str, Any]:
        return {
            "rotation_keys": list(self.rotation_keys),
            "verification_methods": dict(self.verification_methods),
            "also_known_as": list(self.also_known_as),
            "services": {sid: svc.to_dict() for sid, svc in self.services.items()},
        }


@dataclass(frozen=True)
class IdentityTombstoned(BaseDiffEvent):
    type: ClassVar[str] = "identity_tombstoned"


@dataclass(frozen=True)
class RotationKeyAdded(BaseDiffEvent):
    type: ClassVar[str] = "rotation_key_added"

    rotation_key: str


@dataclass(frozen=True)
class RotationKeyRemoved(BaseDiffEvent):
    type: ClassVar[str] = "rotation_key_removed"

    rotation_key: str


@dataclass(frozen=True)
class VerificationMethodAdded(BaseDiffEvent):
    type: ClassVar[str] = "verification_method_added"

    method_id: str
    method_key: str


@dataclass(frozen=True)
class VerificationMethodRemoved(BaseDiffEvent):
    type: ClassVar[str] = "verification_method_removed"

    method_id: str
    method_key: str


@dataclass(frozen=True)
class VerificationMethodChanged(BaseDiffEvent):
    type: ClassVar[str] = "verification_method_changed"

    method_id: str
    prev_method_key: str
    next_method_key: str


@dataclass(frozen=True)
class HandleAdded(BaseDiffEvent):
    type: ClassVar[str] = "handle_added"

    handle: str


@dataclass(frozen=True)
class HandleRemoved(BaseDiffEvent):
    type: ClassVar[str] = "handle_removed"

    handle: str


@dataclass(frozen=True)
class HandleChanged(BaseDiffEvent):
    type: ClassVar[str] = "handle_changed"

    prev_handle: str
    next_handle: str


@dataclass(frozen=True)
class ServiceAdded(BaseDiffEvent):
    type: ClassVar[str] = "service_added"

    service_id: str
    service_type: str
    service_endpoint: str


@dataclass(frozen=True)
class ServiceRemoved(BaseDiffEvent):
    type: ClassVar[str] = "service_removed"

    service_id: str
    service_type: str
    service_endpoint: str


@dataclass(frozen=True)
class ServiceChanged(BaseDiffEvent):
    type: ClassVar[str] = "service_changed"

    service_id: str
    prev_service_type: str
    next_service_type: str
    prev_service_endpoint: str
    next_service_endpoint: str


DiffEvent = Union[
    IdentityCreated,
    IdentityTombstoned,
    RotationKeyAdded,
    RotationKeyRemoved,
    VerificationMethodAdded,
    VerificationMethodRemoved,
    VerificationMethodChanged,
    HandleAdded,
    HandleRemoved,
    HandleChanged,
    ServiceAdded,
    ServiceRemoved,
    ServiceChanged,
]
