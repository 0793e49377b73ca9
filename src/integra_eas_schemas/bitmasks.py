from typing import Final

from . import flags

# Capabilities (granted by Layer 3 resolvers through Access Capability attestations)
MASK_CLAIM_TOKEN: Final[int] = 1 << flags.CLAIM_TOKEN
MASK_TRANSFER_TOKEN: Final[int] = 1 << flags.TRANSFER_TOKEN
MASK_REQUEST_PAYMENT: Final[int] = 1 << flags.REQUEST_PAYMENT
MASK_APPROVE_PAYMENT: Final[int] = 1 << flags.APPROVE_PAYMENT
MASK_UPDATE_METADATA: Final[int] = 1 << flags.UPDATE_METADATA
MASK_DELEGATE_RIGHTS: Final[int] = 1 << flags.DELEGATE_RIGHTS
MASK_REVOKE_ACCESS: Final[int] = 1 << flags.REVOKE_ACCESS
MASK_ADMIN: Final[int] = 1 << flags.ADMIN

MASK_ALL: Final[int] = (
    MASK_CLAIM_TOKEN
    | MASK_TRANSFER_TOKEN
    | MASK_REQUEST_PAYMENT
    | MASK_APPROVE_PAYMENT
    | MASK_UPDATE_METADATA
    | MASK_DELEGATE_RIGHTS
    | MASK_REVOKE_ACCESS
    | MASK_ADMIN
)


def combine_capabilities(*caps: int) -> int:
    """Combine capability masks into a single mask (0 when called without arguments)."""
    mask = 0
    for cap in caps:
        mask |= cap
    return mask


def has_capability(capabilities: int, capability: int) -> bool:
    """
    Return True if every bit of `capability` is set in `capabilities`.

    Note: a zero `capability` is always satisfied.
    """
    return (capabilities & capability) == capability
