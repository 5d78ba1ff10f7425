"""CREATE contract address prediction and nonce inference."""

from create_nonce.address.predictor import (
    DeploymentRecord,
    compute_create_address,
    create_preimage,
    encode_nonce,
    predict_deployments,
)
from create_nonce.config import ProberConfig
from create_nonce.core.addresses import to_address, to_checksum
from create_nonce.core.types import Address, Nonce
from create_nonce.errors import InvalidAddress, NonceLimitExceeded
from create_nonce.prober.oracle import CodeOracle, InMemoryCodeOracle, Web3CodeOracle
from create_nonce.prober.probe import NonceProber, ProbeResult, infer_nonce, probe_nonce

__all__ = [
    "Address",
    "CodeOracle",
    "DeploymentRecord",
    "InMemoryCodeOracle",
    "InvalidAddress",
    "Nonce",
    "NonceLimitExceeded",
    "NonceProber",
    "ProbeResult",
    "ProberConfig",
    "Web3CodeOracle",
    "compute_create_address",
    "create_preimage",
    "encode_nonce",
    "infer_nonce",
    "predict_deployments",
    "probe_nonce",
    "to_address",
    "to_checksum",
]
