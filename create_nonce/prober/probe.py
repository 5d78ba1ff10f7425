"""Nonce inference by probing predicted CREATE addresses.

An account that has deployed k contracts with CREATE has code at
f(deployer, 0) .. f(deployer, k-1) and none at f(deployer, k). Scanning
upward from nonce 0 and stopping at the first empty address recovers k.
The scan costs one oracle query per deployment, so callers should bound it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import count
from typing import TYPE_CHECKING

from create_nonce.address.predictor import compute_create_address
from create_nonce.config import ProberConfig
from create_nonce.core.types import Address, Nonce
from create_nonce.errors import NonceLimitExceeded

if TYPE_CHECKING:
    from create_nonce.prober.oracle import CodeOracle

# Called after each query with (nonce, address, has_code)
type ProbeObserver = Callable[[int, Address, bool], None]


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a nonce probe.

    When `exceeded` is set the budget ran out and `nonce` is only a lower
    bound: the next nonce that would have been probed.
    """

    deployer: Address
    nonce: Nonce
    probes: int
    exceeded: bool = False

    @property
    def found(self) -> bool:
        return not self.exceeded

    def to_dict(self) -> dict[str, object]:
        return {
            "deployer": "0x" + self.deployer.hex(),
            "nonce": self.nonce,
            "probes": self.probes,
            "exceeded": self.exceeded,
        }


def probe_nonce(
    deployer: Address,
    oracle: CodeOracle,
    limit: int | None,
    start: int = 0,
    on_probe: ProbeObserver | None = None,
) -> ProbeResult:
    """Scan nonces upward from `start` until a predicted address has no code.

    At most `limit` oracle queries are made; `None` removes the bound.
    Oracle errors propagate unchanged.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")

    nonces = count(start) if limit is None else range(start, start + limit)
    probes = 0
    for nonce in nonces:
        address = compute_create_address(deployer, nonce)
        has_code = oracle.has_code(address)
        probes += 1
        if on_probe is not None:
            on_probe(nonce, address, has_code)
        if not has_code:
            return ProbeResult(deployer=deployer, nonce=Nonce(nonce), probes=probes)

    return ProbeResult(
        deployer=deployer, nonce=Nonce(start + probes), probes=probes, exceeded=True
    )


def infer_nonce(deployer: Address, oracle: CodeOracle) -> Nonce:
    """Current nonce of `deployer`: the first nonce whose address holds no code.

    Unbounded: does not return while the oracle keeps reporting code.
    """
    return probe_nonce(deployer, oracle, limit=None).nonce


class NonceProber:
    """Oracle bound to a probe budget."""

    def __init__(self, oracle: CodeOracle, config: ProberConfig | None = None) -> None:
        self._oracle = oracle
        self._config = config or ProberConfig()

    @property
    def oracle(self) -> CodeOracle:
        return self._oracle

    @property
    def config(self) -> ProberConfig:
        return self._config

    def infer(
        self, deployer: Address, limit: int | None = None, on_probe: ProbeObserver | None = None
    ) -> ProbeResult:
        """Bounded probe using `limit`, falling back to the configured step limit."""
        budget = limit if limit is not None else self._config.step_limit
        return probe_nonce(deployer, self._oracle, budget, on_probe=on_probe)

    def next_address(self, deployer: Address, limit: int | None = None) -> Address:
        """Address the deployer's next CREATE will produce."""
        result = self.infer(deployer, limit)
        if result.exceeded:
            raise NonceLimitExceeded(result)
        return compute_create_address(deployer, result.nonce)
