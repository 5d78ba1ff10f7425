"""Code-existence oracles queried by the nonce prober."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from create_nonce.address.predictor import compute_create_address
from create_nonce.core.addresses import to_checksum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from web3 import Web3
    from web3.types import BlockIdentifier

    from create_nonce.core.types import Address


class CodeOracle(Protocol):
    """Read-only view answering whether an address currently holds code."""

    def has_code(self, address: Address) -> bool: ...


class InMemoryCodeOracle:
    """Set-backed oracle for tests and offline simulation.

    Tracks the number of queries so callers can account for probe cost.
    """

    def __init__(self, deployed: Iterable[Address] = ()) -> None:
        self._deployed: set[Address] = set(deployed)
        self.queries = 0

    def has_code(self, address: Address) -> bool:
        self.queries += 1
        return address in self._deployed

    def deploy(self, address: Address) -> None:
        self._deployed.add(address)

    def deploy_from(self, deployer: Address, count: int, start: int = 0) -> list[Address]:
        """Mark the CREATE addresses for nonces start..start+count-1 as holding code."""
        addresses = [compute_create_address(deployer, n) for n in range(start, start + count)]
        self._deployed.update(addresses)
        return addresses

    def destroy(self, address: Address) -> None:
        self._deployed.discard(address)

    def __len__(self) -> int:
        return len(self._deployed)


class Web3CodeOracle:
    """Oracle backed by eth_getCode on a web3 connection."""

    def __init__(self, w3: Web3, block_identifier: BlockIdentifier = "latest") -> None:
        self._w3 = w3
        self._block_identifier = block_identifier

    @classmethod
    def from_rpc_url(
        cls, rpc_url: str, block_identifier: BlockIdentifier = "latest"
    ) -> Web3CodeOracle:
        from web3 import Web3

        return cls(Web3(Web3.HTTPProvider(rpc_url)), block_identifier)

    @property
    def block_identifier(self) -> BlockIdentifier:
        return self._block_identifier

    def has_code(self, address: Address) -> bool:
        code = self._w3.eth.get_code(to_checksum(address), self._block_identifier)
        return len(code) > 0
