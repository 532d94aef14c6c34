"""Handle resolver tests: well-known lookup, failures resolve to None."""

import httpx
import pytest

from plc_history.infrastructure.identity.handle_resolver import HandleResolver

DID = "did:plc:ewvi7nxzyoun6zhxrhs64oiz"


def _resolver(handler) -> HandleResolver:
    return HandleResolver(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_resolve_reads_well_known_did():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://alice.test/.well-known/atproto-did"
        return httpx.Response(200, text=f"{DID}\n")

    assert await _resolver(handler).resolve("alice.test") == DID


@pytest.mark.asyncio
async def test_resolve_returns_none_on_404():
    assert await _resolver(lambda request: httpx.Response(404)).resolve("alice.test") is None


@pytest.mark.asyncio
async def test_resolve_returns_none_on_non_did_body():
    assert await _resolver(lambda request: httpx.Response(200, text="hello")).resolve("alice.test") is None


@pytest.mark.asyncio
async def test_resolve_returns_none_on_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    assert await _resolver(handler).resolve("alice.test") is None
