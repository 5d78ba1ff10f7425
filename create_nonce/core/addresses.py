"""Conversion between address representations."""

from __future__ import annotations

from eth_utils import is_hex_address, to_canonical_address, to_checksum_address

from create_nonce.address.constants import ADDRESS_SIZE
from create_nonce.core.types import Address
from create_nonce.errors import InvalidAddress


def to_address(value: str | bytes) -> Address:
    """Normalize a hex string or raw bytes into a 20-byte Address.

    Hex strings may omit the 0x prefix and use any letter case; checksums are
    not enforced.
    """
    if isinstance(value, bytes | bytearray):
        if len(value) != ADDRESS_SIZE:
            raise InvalidAddress(value, f"expected {ADDRESS_SIZE} bytes, got {len(value)}")
        return Address(bytes(value))

    if not isinstance(value, str):
        raise InvalidAddress(value, f"unsupported type {type(value).__name__}")

    text = value.strip()
    if not text.lower().startswith("0x"):
        text = "0x" + text
    if not is_hex_address(text):
        raise InvalidAddress(value, f"expected {ADDRESS_SIZE * 2} hex characters")
    return Address(to_canonical_address(text.lower()))


def to_checksum(address: Address) -> str:
    """EIP-55 mixed-case hex form, for display."""
    return to_checksum_address(address)
