"""Copy of the Integra ``Capabilities.sol`` library bit positions."""

from typing import Final

# ---------------------------------------------------------------------------
# Capability Flags
# ---------------------------------------------------------------------------
# Bit positions (0 = LSB, 7 = MSB) of the `capabilities` uint256 field.

# ⚠️ Positions are embedded in published attestations and in the on-chain library.
# New capabilities take the next unused bit; existing bits are never reassigned.

CLAIM_TOKEN: Final[int] = 0  # claim reserved tokens
TRANSFER_TOKEN: Final[int] = 1
REQUEST_PAYMENT: Final[int] = 2
APPROVE_PAYMENT: Final[int] = 3
UPDATE_METADATA: Final[int] = 4
DELEGATE_RIGHTS: Final[int] = 5  # delegate to others
REVOKE_ACCESS: Final[int] = 6  # revoke others' access
ADMIN: Final[int] = 7  # full admin rights
