from __future__ import annotations

import logging

from eth_utils import keccak, to_bytes

from .validation import validate_address

logger = logging.getLogger(__name__)


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 digest (the EVM `keccak256`, not NIST SHA3-256).
    """
    return keccak(primitive=data)


def compute_schema_uid(*, schema: str, resolver: str, revocable: bool) -> str:
    """
    Compute the EAS SchemaRegistry UID of a schema.

    uid = keccak256(abi.encodePacked(string schema, address resolver, bool revocable))

    Args:
        schema: EAS schema string, exactly as registered
        resolver: Resolver contract address (the null address when unused)
        revocable: Whether attestations of the schema can be revoked

    Returns:
        0x-prefixed lowercase hex of the 32-byte UID
    """
    validate_address(resolver, name="resolver")

    data = (
        schema.encode("utf-8")
        + to_bytes(hexstr=resolver)
        + (b"\x01" if revocable else b"\x00")
    )
    uid = "0x" + keccak256(data).hex()
    logger.debug("Computed schema UID %s for %r", uid, schema)
    return uid
