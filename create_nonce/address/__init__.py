from create_nonce.address.predictor import (
    DeploymentRecord,
    compute_create_address,
    create_preimage,
    encode_nonce,
    predict_deployments,
)

__all__ = [
    "DeploymentRecord",
    "compute_create_address",
    "create_preimage",
    "encode_nonce",
    "predict_deployments",
]
