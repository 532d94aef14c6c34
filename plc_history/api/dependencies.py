"""FastAPI dependency injection: PLC directory client, handle resolver, OperationHistoryService, correlation_id."""

import logging
from typing import Annotated

from fastapi import Depends, Request

from plc_history.application.history_service import OperationHistoryService
from plc_history.config.settings import get_settings
from plc_history.infrastructure.identity.handle_resolver import HandleResolver
from plc_history.infrastructure.plc_directory.client import PlcDirectoryClient

_directory_client: PlcDirectoryClient | None = None
_handle_resolver: HandleResolver | None = None


def get_directory_client() -> PlcDirectoryClient:
    """Return singleton PLC directory client."""
    global _directory_client
    if _directory_client is None:
        settings = get_settings()
        _directory_client = PlcDirectoryClient(
            base_url=settings.plc_directory_url,
            timeout=settings.http_timeout_seconds,
        )
    return _directory_client


def get_handle_resolver() -> HandleResolver:
    """Return singleton handle resolver."""
    global _handle_resolver
    if _handle_resolver is None:
        _handle_resolver = HandleResolver(timeout=get_settings().http_timeout_seconds)
    return _handle_resolver


async def close_clients() -> None:
    """Close singleton HTTP clients (application shutdown)."""
    global _directory_client, _handle_resolver
    if _directory_client is not None:
        await _directory_client.aclose()
        _directory_client = None
    if _handle_resolver is not None:
        await _handle_resolver.aclose()
        _handle_resolver = None


async def get_history_service(
    directory: Annotated[PlcDirectoryClient, Depends(get_directory_client)],
    handle_resolver: Annotated[HandleResolver, Depends(get_handle_resolver)],
) -> OperationHistoryService:
    """Build OperationHistoryService with injected directory, resolver, logger."""
    logger = logging.getLogger("plc_history.application.history_service")
    return OperationHistoryService(
        directory=directory,
        handle_resolver=handle_resolver,
        logger=logger,
    )


def get_correlation_id(request: Request) -> str:
    """Extract correlation_id from request.state (set by middleware)."""
    return getattr(request.state, "correlation_id", "") or ""
