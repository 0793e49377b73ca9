"""Integra EAS schema and network constants."""

from typing import Final

# ---------------------------------------------------------------------------
# EVM constants
# ---------------------------------------------------------------------------
ZERO_ADDRESS: Final[str] = "0x0000000000000000000000000000000000000000"

ADDRESS_SIZE: Final[int] = 20
BYTES32_SIZE: Final[int] = 32
MAX_UINT256: Final[int] = 2**256 - 1

POLYGON_CHAIN_ID: Final[int] = 137


# ---------------------------------------------------------------------------
# EAS constants (Polygon Mainnet)
# ---------------------------------------------------------------------------
POLYGON_EAS_ADDR: Final[str] = "0x5E634ef5355f45A855d02D66eCD687b1502AF790"
POLYGON_SCHEMA_REGISTRY_ADDR: Final[str] = "0x7876EEF51A891E737AF8ba5A5E0f0Fd29073D5a7"
POLYGON_EIP712_PROXY_ADDR: Final[str] = "0x4be71865917C7907ccA531270181D9B7dD4f2733"
POLYGON_INDEXER_ADDR: Final[str] = "0x12d0f50Eb2d67b14293bdDA2C248358f3dfE5308"
POLYGON_EXPLORER_URL: Final[str] = "https://polygon.easscan.org"


# ---------------------------------------------------------------------------
# Integra schemas
# ---------------------------------------------------------------------------
# The registry hashes the schema string into the schema UID: any edit here yields
# a different, non-interoperable schema. Record shapes in `models` must follow.

# Used by Layer 3 resolvers (MultiParty, Ownership, Shares)
ACCESS_CAPABILITY_NAME: Final[str] = "Integra Access Capability"
ACCESS_CAPABILITY_DESCRIPTION: Final[str] = (
    "Grants capabilities for document token operations"
)
ACCESS_CAPABILITY_SCHEMA_STR: Final[str] = (
    "bytes32 documentHash, uint256 tokenId, uint256 capabilities, "
    "string verifiedIdentity, string verificationMethod, uint256 verificationDate, "
    "string contractRole, string legalEntityType, string notes"
)
ACCESS_CAPABILITY_REVOCABLE: Final[bool] = True

# Used by Layer 3 resolvers (trust graph)
TRUST_CREDENTIAL_NAME: Final[str] = "Integra Trust Credential"
TRUST_CREDENTIAL_DESCRIPTION: Final[str] = (
    "Trust credential issued upon document completion"
)
TRUST_CREDENTIAL_SCHEMA_STR: Final[str] = "bytes32 credentialHash"
TRUST_CREDENTIAL_REVOCABLE: Final[bool] = False

# Used by IntegraSignalV6; payment details stay encrypted off-chain
PAYMENT_PAYLOAD_NAME: Final[str] = "Integra Payment Payload"
PAYMENT_PAYLOAD_DESCRIPTION: Final[str] = (
    "Attestation for encrypted payment payload hash"
)
PAYMENT_PAYLOAD_SCHEMA_STR: Final[str] = "bytes32 payloadHash"
PAYMENT_PAYLOAD_REVOCABLE: Final[bool] = False
