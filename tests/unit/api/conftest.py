"""Fixtures for API unit tests: in-memory PLC directory, static handle resolver, AsyncClient."""

import pytest
from httpx import ASGITransport, AsyncClient

from plc_history.application.exceptions import IdentityNotFoundError
from plc_history.main import app

DID = "did:plc:ewvi7nxzyoun6zhxrhs64oiz"


class FakeDirectory:
    """In-memory PLC directory for unit tests."""

    def __init__(self, logs: dict[str, list], documents: dict[str, dict] | None = None):
        self._logs = logs
        self._documents = documents or {}
        self.error: Exception | None = None

    async def fetch_audit_log(self, did: str) -> list:
        if self.error is not None:
            raise self.error
        if did not in self._logs:
            raise IdentityNotFoundError(f"DID not found in PLC directory: {did}")
        return self._logs[did]

    async def fetch_did_document(self, did: str) -> dict:
        if did not in self._documents:
            raise IdentityNotFoundError(f"DID not found in PLC directory: {did}")
        return self._documents[did]


class StaticHandleResolver:
    """Resolves handles from a fixed table."""

    def __init__(self, table: dict[str, str]):
        self._table = table

    async def resolve(self, handle: str):
        return self._table.get(handle)


@pytest.fixture
def fake_directory(raw_audit_log):
    return FakeDirectory(
        logs={DID: raw_audit_log},
        documents={DID: {"id": DID, "alsoKnownAs": ["at://alice.example.com"]}},
    )


@pytest.fixture
def handle_resolver():
    return StaticHandleResolver({"alice.example.com": DID, "web.example.com": "did:web:web.example.com"})


@pytest.fixture
def app_with_overrides(fake_directory, handle_resolver):
    """App with directory client and handle resolver overridden for testing."""
    from plc_history.api import dependencies

    app.dependency_overrides[dependencies.get_directory_client] = lambda: fake_directory
    app.dependency_overrides[dependencies.get_handle_resolver] = lambda: handle_resolver
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
