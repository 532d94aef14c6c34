"""Shared fixtures: builders for PLC operations, log entries and raw audit log rows."""

from types import MappingProxyType

import pytest

from plc_history.domain.models.operation import (
    GenesisOperation,
    LogEntry,
    Service,
    StateOperation,
    TombstoneOperation,
)

DID = "did:plc:ewvi7nxzyoun6zhxrhs64oiz"
PDS = "https://bsky.social"


def _state_op(
    rotation_keys=("did:key:rot1", "did:key:rot2"),
    verification_methods=None,
    also_known_as=("at://alice.test",),
    services=None,
    prev="bafyprev",
):
    if verification_methods is None:
        verification_methods = {"atproto": "did:key:sig1"}
    if services is None:
        services = {"atproto_pds": ("AtprotoPersonalDataServer", PDS)}
    return StateOperation(
        rotation_keys=tuple(rotation_keys),
        verification_methods=MappingProxyType(dict(verification_methods)),
        also_known_as=tuple(also_known_as),
        services=MappingProxyType(
            {sid: Service(type=stype, endpoint=endpoint) for sid, (stype, endpoint) in services.items()}
        ),
        prev=prev,
        sig="sig",
    )


@pytest.fixture
def state_op():
    """Factory for StateOperation. Services are given as {id: (type, endpoint)}."""
    return _state_op


@pytest.fixture
def genesis_op():
    def _make(handle="alice.test", signing_key="did:key:sig1", recovery_key="did:key:rec1", service=PDS):
        return GenesisOperation(
            signing_key=signing_key,
            recovery_key=recovery_key,
            handle=handle,
            service=service,
        )

    return _make


@pytest.fixture
def tombstone_op():
    return lambda prev="bafyprev": TombstoneOperation(prev=prev, sig="sig")


@pytest.fixture
def make_entry():
    """Factory for LogEntry; cid defaults to a per-call counter so entries are distinguishable."""
    counter = {"n": 0}

    def _make(operation, nullified=False, created_at=None, cid=None):
        counter["n"] += 1
        n = counter["n"]
        return LogEntry(
            did=DID,
            operation=operation,
            cid=cid or f"bafycid{n}",
            nullified=nullified,
            created_at=created_at or f"2024-01-{n:02d}T00:00:00.000Z",
        )

    return _make


@pytest.fixture
def raw_audit_log():
    """A directory-shaped audit log: genesis, handle rename, nullified fork, PDS migration."""
    return [
        {
            "did": DID,
            "operation": {
                "type": "create",
                "signingKey": "did:key:sig1",
                "recoveryKey": "did:key:rec1",
                "handle": "alice.test",
                "service": PDS,
                "prev": None,
                "sig": "s0",
            },
            "cid": "bafy0",
            "nullified": False,
            "createdAt": "2023-04-01T00:00:00.000Z",
        },
        {
            "did": DID,
            "operation": {
                "type": "plc_operation",
                "rotationKeys": ["did:key:rec1", "did:key:sig1"],
                "verificationMethods": {"atproto": "did:key:sig1"},
                "alsoKnownAs": ["at://alice.example.com"],
                "services": {
                    "atproto_pds": {"type": "AtprotoPersonalDataServer", "endpoint": PDS},
                },
                "prev": "bafy0",
                "sig": "s1",
            },
            "cid": "bafy1",
            "nullified": False,
            "createdAt": "2023-05-01T00:00:00.000Z",
        },
        {
            "did": DID,
            "operation": {
                "type": "plc_operation",
                "rotationKeys": ["did:key:attacker"],
                "verificationMethods": {"atproto": "did:key:attacker"},
                "alsoKnownAs": ["at://alice.example.com"],
                "services": {
                    "atproto_pds": {"type": "AtprotoPersonalDataServer", "endpoint": PDS},
                },
                "prev": "bafy1",
                "sig": "s2",
            },
            "cid": "bafy2",
            "nullified": True,
            "createdAt": "2023-06-01T00:00:00.000Z",
        },
        {
            "did": DID,
            "operation": {
                "type": "plc_operation",
                "rotationKeys": ["did:key:rec1", "did:key:sig1"],
                "verificationMethods": {"atproto": "did:key:sig1"},
                "alsoKnownAs": ["at://alice.example.com"],
                "services": {
                    "atproto_pds": {
                        "type": "AtprotoPersonalDataServer",
                        "endpoint": "https://pds.example.com",
                    },
                },
                "prev": "bafy1",
                "sig": "s3",
            },
            "cid": "bafy3",
            "nullified": False,
            "createdAt": "2023-06-02T00:00:00.000Z",
        },
    ]
