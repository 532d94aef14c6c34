"""Operation history API router: GET /plc/{query}/history."""

from typing import Annotated

from fastapi import APIRouter, Depends

from plc_history.api.dependencies import get_history_service
from plc_history.application.history_service import OperationHistoryService
from plc_history.domain.schemas.history import OperationHistoryResponse

router = APIRouter()


@router.get("/{query}/history", response_model=OperationHistoryResponse)
async def get_operation_history(
    query: str,
    history_service: Annotated[OperationHistoryService, Depends(get_history_service)],
) -> OperationHistoryResponse:
    """Operation history for a DID or handle, grouped by log entry, newest first. Errors map in app handlers."""
    history = await history_service.get_history(query)
    return history.to_response()
