import re

from eth_utils import decode_hex, is_checksum_address, is_hex, is_hex_address

from . import constants as const
from .errors import InvalidAddressError, InvalidRecordFieldError

_HTTPS_URL_RE = re.compile(r"^https://[^\s/]+(/[^\s]*)?$")


def is_uint256(value: object) -> bool:
    """Return True if `value` is an integer in the range [0, 2**256 - 1], False otherwise."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= const.MAX_UINT256
    )


def is_https_url(value: object) -> bool:
    return isinstance(value, str) and _HTTPS_URL_RE.match(value) is not None


def validate_address(value: object, *, name: str) -> str:
    """
    Validate an EVM address and return it unchanged.

    The null address is accepted as-is; any other address must be EIP-55 checksummed.
    """
    if (
        not isinstance(value, str)
        or not value.startswith("0x")
        or not is_hex_address(value)
    ):
        raise InvalidAddressError(f"{name} is not a 20-byte hex address: {value!r}")
    if value != const.ZERO_ADDRESS and not is_checksum_address(value):
        raise InvalidAddressError(f"{name} is not EIP-55 checksummed: {value!r}")
    return value


def coerce_bytes32(value: object, *, name: str) -> bytes:
    """
    Coerce a bytes32 value given as raw bytes or as 0x-prefixed hex into `bytes`.
    """
    if isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    elif isinstance(value, str):
        if not value.startswith(("0x", "0X")):
            raise InvalidRecordFieldError(f"{name} hex string must be 0x-prefixed")
        if not is_hex(value):
            raise InvalidRecordFieldError(f"{name} is not valid hex")
        try:
            data = decode_hex(value[2:])
        except ValueError as e:
            raise InvalidRecordFieldError(f"{name} is not valid hex") from e
    else:
        raise InvalidRecordFieldError(f"{name} must be bytes or a 0x-prefixed hex string")

    if len(data) != const.BYTES32_SIZE:
        raise InvalidRecordFieldError(
            f"{name} must be {const.BYTES32_SIZE} bytes, got {len(data)}"
        )
    return data
