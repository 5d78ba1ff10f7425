"""Core types and address helpers."""

from create_nonce.core.addresses import to_address, to_checksum
from create_nonce.core.types import Address, Nonce

__all__ = [
    "Address",
    "Nonce",
    "to_address",
    "to_checksum",
]
