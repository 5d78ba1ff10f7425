"""Nonce inference over a code-existence oracle."""

from create_nonce.prober.oracle import CodeOracle, InMemoryCodeOracle, Web3CodeOracle
from create_nonce.prober.probe import NonceProber, ProbeResult, infer_nonce, probe_nonce

__all__ = [
    "CodeOracle",
    "InMemoryCodeOracle",
    "NonceProber",
    "ProbeResult",
    "Web3CodeOracle",
    "infer_nonce",
    "probe_nonce",
]
