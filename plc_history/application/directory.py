"""Directory and resolver protocols. Application layer depends on these; infrastructure implements them."""

from typing import Any, Optional, Protocol


class PlcDirectory(Protocol):
    """Read access to a PLC directory server."""

    async def fetch_audit_log(self, did: str) -> list[Any]:
        """Return the raw audit log for did, oldest entry first."""
        ...

    async def fetch_did_document(self, did: str) -> dict[str, Any]:
        """Return the current DID document for did."""
        ...


class HandleResolverPort(Protocol):
    """Maps an atproto handle to its DID."""

    async def resolve(self, handle: str) -> Optional[str]:
        """Return the DID for handle, or None if it does not resolve."""
        ...
