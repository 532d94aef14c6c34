"""Pydantic response schemas for the operation history API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class OperationGroupResponse(BaseModel):
    """Diff events of one log entry. Entries are listed newest-first."""

    cid: str
    created_at: str
    nullified: bool
    diffs: List[Dict[str, Any]] = Field(default_factory=list)


class OperationHistoryResponse(BaseModel):
    """Operation history of one DID, grouped by originating log entry."""

    did: str
    handle: Optional[str] = None
    operations: List[OperationGroupResponse] = Field(default_factory=list)
