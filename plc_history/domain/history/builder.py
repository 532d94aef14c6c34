"""Operation history builder: turns an oldest-first PLC audit log into diff events. Pure, no I/O."""

import logging
from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import Optional

from plc_history.core.collections import deep_equal, difference
from plc_history.domain.models.diff import (
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
    StateOperation,
    TombstoneOperation,
)

logger = logging.getLogger(__name__)


def find_last_matching(
    entries: Sequence[LogEntry],
    predicate: Callable[[LogEntry], bool],
    start: Optional[int] = None,
) -> Optional[LogEntry]:
    """Scan backward from start (default: last index) and return the first entry matching predicate."""
    index = len(entries) - 1 if start is None else start
    while index >= 0:
        entry = entries[index]
        if predicate(entry):
            return entry
        index -= 1
    return None


def _identity_created(entry: LogEntry, state: IdentityState) -> IdentityCreated:
    return IdentityCreated(
        orig=entry,
        at=entry.created_at,
        rotation_keys=tuple(state.rotation_keys),
        verification_methods=MappingProxyType(dict(state.verification_methods)),
        also_known_as=tuple(state.also_known_as),
        services=MappingProxyType(dict(state.services)),
    )


def _diff_rotation_keys(entry: LogEntry, old: IdentityState, new: IdentityState) -> list[DiffEvent]:
    events: list[DiffEvent] = []
    for key in difference(new.rotation_keys, old.rotation_keys):
        events.append(RotationKeyAdded(orig=entry, at=entry.created_at, rotation_key=key))
    for key in difference(old.rotation_keys, new.rotation_keys):
        events.append(RotationKeyRemoved(orig=entry, at=entry.created_at, rotation_key=key))
    return events


def _diff_verification_methods(entry: LogEntry, old: IdentityState, new: IdentityState) -> list[DiffEvent]:
    events: list[DiffEvent] = []
    old_methods = old.verification_methods
    new_methods = new.verification_methods

    for method_id, key in new_methods.items():
        if method_id not in old_methods:
            events.append(
                VerificationMethodAdded(
                    orig=entry,
                    at=entry.created_at,
                    method_id=method_id,
                    method_key=key,
                )
            )
        elif key != old_methods[method_id]:
            events.append(
                VerificationMethodChanged(
                    orig=entry,
                    at=entry.created_at,
                    method_id=method_id,
                    prev_method_key=old_methods[method_id],
                    next_method_key=key,
                )
            )

    for method_id, key in old_methods.items():
        if method_id not in new_methods:
            events.append(
                VerificationMethodRemoved(
                    orig=entry,
                    at=entry.created_at,
                    method_id=method_id,
                    method_key=key,
                )
            )
    return events


def _diff_handles(entry: LogEntry, old: IdentityState, new: IdentityState) -> list[DiffEvent]:
    old_aliases = old.also_known_as
    new_aliases = new.also_known_as

    # A one-for-one swap is a rename, not a remove plus an add.
    if len(old_aliases) == 1 and len(new_aliases) == 1:
        if old_aliases[0] == new_aliases[0]:
            return []
        return [
            HandleChanged(
                orig=entry,
                at=entry.created_at,
                prev_handle=old_aliases[0],
                next_handle=new_aliases[0],
            )
        ]

    events: list[DiffEvent] = []
    for handle in difference(new_aliases, old_aliases):
        events.append(HandleAdded(orig=entry, at=entry.created_at, handle=handle))
    for handle in difference(old_aliases, new_aliases):
        events.append(HandleRemoved(orig=entry, at=entry.created_at, handle=handle))
    return events


def _diff_services(entry: LogEntry, old: IdentityState, new: IdentityState) -> list[DiffEvent]:
    events: list[DiffEvent] = []
    old_services = old.services
    new_services = new.services

    for service_id, service in new_services.items():
        if service_id not in old_services:
            events.append(
                ServiceAdded(
                    orig=entry,
                    at=entry.created_at,
                    service_id=service_id,
                    service_type=service.type,
                    service_endpoint=service.endpoint,
                )
            )
        elif not deep_equal(service, old_services[service_id]):
            previous = old_services[service_id]
            events.append(
                ServiceChanged(
                    orig=entry,
                    at=entry.created_at,
                    service_id=service_id,
                    prev_service_type=previous.type,
                    next_service_type=service.type,
                    prev_service_endpoint=previous.endpoint,
                    next_service_endpoint=service.endpoint,
                )
            )

    for service_id, service in old_services.items():
        if service_id not in new_services:
            events.append(
                ServiceRemoved(
                    orig=entry,
                    at=entry.created_at,
                    service_id=service_id,
                    service_type=service.type,
                    service_endpoint=service.endpoint,
                )
            )
    return events


def diff_states(entry: LogEntry, old: IdentityState, new: IdentityState) -> list[DiffEvent]:
    """
    All changes from old to new, attributed to entry.
    Order: rotation keys, verification methods, handles, services.
    """
    return [
        *_diff_rotation_keys(entry, old, new),
        *_diff_verification_methods(entry, old, new),
        *_diff_handles(entry, old, new),
        *_diff_services(entry, old, new),
    ]


def _history_for_state_operation(
    entries: Sequence[LogEntry],
    index: int,
    entry: LogEntry,
    op: StateOperation,
) -> list[DiffEvent]:
    new_state = IdentityState.from_operation(op)
    previous = find_last_matching(entries, lambda candidate: not candidate.nullified, index - 1)

    # No surviving predecessor: this operation is the baseline.
    if previous is None:
        return [_identity_created(entry, new_state)]

    old_state = IdentityState.from_operation(previous.operation)
    if old_state is None:
        logger.debug(
            "history_entry_skipped",
            extra={"cid": entry.cid, "previous_type": previous.operation.type},
        )
        return []

    return diff_states(entry, old_state, new_state)


def build_operation_history(entries: Sequence[LogEntry]) -> list[DiffEvent]:
    """
    Build the diff timeline for an oldest-first audit log.

    Each entry is compared with its nearest non-nullified predecessor. Nullified
    entries still produce their own events but never serve as a baseline. State
    operations following a tombstone, and operations with an unknown type, yield
    no events. Never raises for well-formed entries and never mutates its input.
    """
    history: list[DiffEvent] = []

    for index, entry in enumerate(entries):
        op = entry.operation

        if isinstance(op, GenesisOperation):
            history.append(_identity_created(entry, IdentityState.from_operation(op)))
        elif isinstance(op, StateOperation):
            history.extend(_history_for_state_operation(entries, index, entry, op))
        elif isinstance(op, TombstoneOperation):
            history.append(IdentityTombstoned(orig=entry, at=entry.created_at))
        else:
            logger.debug(
                "history_entry_unknown_operation",
                extra={"cid": entry.cid, "operation_type": getattr(op, "type", None)},
            )

    return history
