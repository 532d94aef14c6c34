"""Async HTTP client for a PLC directory server. Raises application exceptions, never HTTP ones."""

import logging
from typing import Any

import httpx

from plc_history.application.exceptions import DirectoryUnavailableError, IdentityNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_URL = "https://plc.directory"
DEFAULT_TIMEOUT_SECONDS = 10.0


class PlcDirectoryClient:
    """
    Reads DID documents and audit logs from a PLC directory.
    The underlying httpx.AsyncClient may be injected (tests, shared pools); otherwise one is owned.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_DIRECTORY_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def _get_json(self, path: str, did: str) -> Any:
        url = f"{self._base_url}/{path}"
        try:
            response = await self._client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            logger.error("plc_directory_unreachable", extra={"did": did, "error": str(e)})
            raise DirectoryUnavailableError(f"PLC directory request failed: {e}") from e

        if response.status_code in (404, 410):
            raise IdentityNotFoundError(f"DID not found in PLC directory: {did}")
        if response.status_code != 200:
            logger.error(
                "plc_directory_bad_status",
                extra={"did": did, "status_code": response.status_code},
            )
            raise DirectoryUnavailableError(
                f"PLC directory returned HTTP {response.status_code} for {did}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise DirectoryUnavailableError(f"PLC directory returned invalid JSON for {did}") from e

    async def fetch_audit_log(self, did: str) -> list[Any]:
        """GET /{did}/log/audit. Returns the decoded JSON array, oldest entry first."""
        payload = await self._get_json(f"{did}/log/audit", did)
        if not isinstance(payload, list):
            raise DirectoryUnavailableError(f"PLC directory returned a non-list audit log for {did}")
        return payload

    async def fetch_did_document(self, did: str) -> dict[str, Any]:
        """GET /{did}. Returns the decoded DID document."""
        payload = await self._get_json(did, did)
        if not isinstance(payload, dict):
            raise DirectoryUnavailableError(f"PLC directory returned a malformed DID document for {did}")
        return payload

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
