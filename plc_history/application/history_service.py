"""Operation history application service. Orchestrates resolve, fetch, parse, diff and grouping."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pydantic import ValidationError

from plc_history.application.directory import HandleResolverPort, PlcDirectory
from plc_history.application.exceptions import (
    ApplicationError,
    IdentityNotFoundError,
    InvalidAuditLogError,
    UnsupportedDidMethodError,
)
from plc_history.core.collections import group_by
from plc_history.domain.history import build_operation_history
from plc_history.domain.models.diff import DiffEvent
from plc_history.domain.models.operation import AT_URI_PREFIX, LogEntry
from plc_history.domain.schemas.history import OperationGroupResponse, OperationHistoryResponse
from plc_history.domain.schemas.log_entry import parse_audit_log
from plc_history.domain.validators.identifier_validator import (
    PLC_DID_PREFIX,
    is_did,
    validate_plc_did,
    validate_query,
)


@dataclass(frozen=True)
class OperationHistory:
    """Grouped history for one DID: (entry, diff events) pairs, newest entry first."""

    did: str
    handle: Optional[str]
    operations: list[tuple[LogEntry, list[DiffEvent]]] = field(default_factory=list)

    def to_response(self) -> OperationHistoryResponse:
        return OperationHistoryResponse(
            did=self.did,
            handle=self.handle,
            operations=[
                OperationGroupResponse(
                    cid=entry.cid,
                    created_at=entry.created_at,
                    nullified=entry.nullified,
                    diffs=[diff.to_dict() for diff in diffs],
                )
                for entry, diffs in self.operations
            ],
        )


def group_history(history: list[DiffEvent]) -> list[tuple[LogEntry, list[DiffEvent]]]:
    """Newest-first (entry, events) pairs; events keep their in-entry category order."""
    groups = group_by(history, lambda diff, _index: diff.orig)
    return list(reversed(list(groups.items())))


def _handle_from_document(document: dict) -> Optional[str]:
    aliases = document.get("alsoKnownAs")
    if not isinstance(aliases, list):
        return None
    for alias in aliases:
        if isinstance(alias, str) and alias.startswith(AT_URI_PREFIX):
            return alias[len(AT_URI_PREFIX):]
    return None


class OperationHistoryService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI.
    Directory errors propagate as application exceptions; the current handle lookup is best-effort.
    """

    def __init__(
        self,
        directory: PlcDirectory,
        handle_resolver: HandleResolverPort,
        logger: logging.Logger,
    ) -> None:
        self._directory = directory
        self._handle_resolver = handle_resolver
        self._logger = logger

    async def resolve_did(self, query: str) -> str:
        """
        Turn a DID or handle (optionally '@'-prefixed) into a did:plc identifier.
        Raises InvalidIdentifierError, IdentityNotFoundError or UnsupportedDidMethodError.
        """
        normalized = validate_query(query)

        if is_did(normalized):
            did = normalized
        else:
            did = await self._handle_resolver.resolve(normalized)
            if did is None:
                raise IdentityNotFoundError(f"Could not resolve handle: {normalized}")
            self._logger.info("handle_resolved", extra={"handle": normalized, "did": did})

        # Only PLC identities have an operation log.
        if not did.startswith(PLC_DID_PREFIX):
            raise UnsupportedDidMethodError(f"Only did:plc identities have operation logs, got {did}")
        validate_plc_did(did)
        return did

    async def _current_handle(self, did: str) -> Optional[str]:
        try:
            document = await self._directory.fetch_did_document(did)
        except ApplicationError as e:
            self._logger.warning("did_document_unavailable", extra={"did": did, "error": e.message})
            return None
        return _handle_from_document(document)

    async def get_history(self, query: str) -> OperationHistory:
        """Single entry point: resolve, fetch audit log, build diff history, group newest-first."""
        did = await self.resolve_did(query)

        raw_log = await self._directory.fetch_audit_log(did)
        try:
            entries = parse_audit_log(raw_log)
        except ValidationError as e:
            self._logger.error(
                "audit_log_invalid",
                extra={"did": did, "error_count": e.error_count()},
            )
            raise InvalidAuditLogError(f"Audit log for {did} does not match the expected schema") from e

        history = build_operation_history(entries)
        self._logger.info(
            "history_built",
            extra={"did": did, "entry_count": len(entries), "event_count": len(history)},
        )

        handle = await self._current_handle(did)
        return OperationHistory(did=did, handle=handle, operations=group_history(history))
