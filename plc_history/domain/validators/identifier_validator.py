"""Validators for DID and handle syntax. Pure functions, no resolution or network access."""

import re

from plc_history.domain.exceptions import InvalidIdentifierError

PLC_DID_PREFIX = "did:plc:"
HANDLE_MAX_LENGTH = 253

_DID_RE = re.compile(r"^did:[a-z]+:[a-zA-Z0-9._:%-]*[a-zA-Z0-9._-]$")
_PLC_DID_RE = re.compile(r"^did:plc:[a-z2-7]{24}$")
_HANDLE_RE = re.compile(
    r"^([a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$"
)


def normalize_query(query: str) -> str:
    """Strip surrounding whitespace and a single leading '@' (as typed before a handle)."""
    query = query.strip()
    if query.startswith("@"):
        query = query[1:]
    return query


def is_did(value: str) -> bool:
    return bool(_DID_RE.match(value))


def is_plc_did(value: str) -> bool:
    """did:plc identifiers are 24 characters of lowercase base32 after the prefix."""
    return bool(_PLC_DID_RE.match(value))


def is_handle(value: str) -> bool:
    """atproto handle syntax: dot-separated DNS labels, TLD must start with a letter."""
    return len(value) <= HANDLE_MAX_LENGTH and bool(_HANDLE_RE.match(value))


def validate_query(query: str) -> str:
    """Normalize and validate a lookup query. Raises InvalidIdentifierError if it is neither DID nor handle."""
    normalized = normalize_query(query)
    if not normalized:
        raise InvalidIdentifierError("query must not be empty")
    if not (is_did(normalized) or is_handle(normalized)):
        raise InvalidIdentifierError(f"'{normalized}' is not a valid DID or handle")
    return normalized


def validate_plc_did(value: str) -> None:
    """Raises InvalidIdentifierError unless value is a well-formed did:plc identifier."""
    if not is_plc_did(value):
        raise InvalidIdentifierError(f"'{value}' is not a valid did:plc identifier")
