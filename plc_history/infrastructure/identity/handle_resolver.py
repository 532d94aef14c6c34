"""Handle -> DID resolution over HTTPS (/.well-known/atproto-did). DNS TXT lookup is not implemented."""

import logging

import httpx

from plc_history.domain.validators.identifier_validator import is_did

logger = logging.getLogger(__name__)

WELL_KNOWN_PATH = "/.well-known/atproto-did"
DEFAULT_TIMEOUT_SECONDS = 5.0


class HandleResolver:
    """Resolves an atproto handle to a DID. Returns None when the handle does not resolve."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def resolve(self, handle: str) -> str | None:
        url = f"https://{handle}{WELL_KNOWN_PATH}"
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            logger.info("handle_resolution_failed", extra={"handle": handle, "error": str(e)})
            return None

        if response.status_code != 200:
            logger.info(
                "handle_resolution_failed",
                extra={"handle": handle, "status_code": response.status_code},
            )
            return None

        did = response.text.strip()
        if not is_did(did):
            logger.info("handle_resolution_invalid_did", extra={"handle": handle})
            return None
        return did

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
