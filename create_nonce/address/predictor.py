"""CREATE contract address prediction.

The address of a contract deployed with CREATE is the low 20 bytes of
keccak256(rlp([deployer, nonce])). Only the two-item list shape is ever
needed here, so the RLP is written out directly rather than through a
general encoder:

    list_prefix | 0x94 | deployer (20 bytes) | nonce

where the nonce is 0x80 for zero, the byte itself for 1..127, and otherwise
a 0x80 + width length prefix followed by the big-endian bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import keccak

from create_nonce.address.constants import (
    ADDRESS_PREFIX,
    ADDRESS_SIZE,
    EMPTY_STRING,
    LIST_OFFSET,
    MAX_NONCE,
    MAX_NONCE_BYTES,
    SINGLE_BYTE_MAX,
    STRING_OFFSET,
)
from create_nonce.core.types import Address, Nonce
from create_nonce.errors import InvalidAddress


@dataclass(frozen=True)
class DeploymentRecord:
    """Address a deployer produces (or would produce) at a given nonce."""

    deployer: Address
    nonce: Nonce
    address: Address


def nonce_width(nonce: int) -> int:
    """Number of big-endian bytes used for the nonce, capped at MAX_NONCE_BYTES."""
    return min(max((nonce.bit_length() + 7) // 8, 1), MAX_NONCE_BYTES)


def encode_nonce(nonce: int) -> bytes:
    """RLP-encode a nonce as an integer.

    Nonces above MAX_NONCE are not rejected: they are masked to their low
    MAX_NONCE_BYTES bytes and produce a wrong (but well-formed) encoding.
    """
    if nonce == 0:
        return bytes([EMPTY_STRING])
    if nonce <= SINGLE_BYTE_MAX:
        return bytes([nonce])

    width = nonce_width(nonce)
    return bytes([STRING_OFFSET + width]) + (nonce & MAX_NONCE).to_bytes(width, "big")


def create_preimage(deployer: Address, nonce: int) -> bytes:
    """The exact bytes hashed by CREATE for (deployer, nonce)."""
    if len(deployer) != ADDRESS_SIZE:
        raise InvalidAddress(deployer, f"expected {ADDRESS_SIZE} bytes, got {len(deployer)}")
    payload = bytes([ADDRESS_PREFIX]) + deployer + encode_nonce(nonce)
    return bytes([LIST_OFFSET + len(payload)]) + payload


def compute_create_address(deployer: Address, nonce: int) -> Address:
    """Address of the contract `deployer` creates with CREATE at `nonce`."""
    return Address(keccak(create_preimage(deployer, nonce))[-ADDRESS_SIZE:])


def predict_deployments(deployer: Address, start: int = 0, count: int = 1) -> list[DeploymentRecord]:
    """Predicted addresses for `count` consecutive nonces starting at `start`."""
    if start < 0 or count < 0:
        raise ValueError(f"start and count must be non-negative, got start={start} count={count}")
    return [
        DeploymentRecord(
            deployer=deployer,
            nonce=Nonce(nonce),
            address=compute_create_address(deployer, nonce),
        )
        for nonce in range(start, start + count)
    ]
