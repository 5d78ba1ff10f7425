"""FastAPI service exposing address prediction and nonce inference."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from create_nonce.address.predictor import compute_create_address, predict_deployments
from create_nonce.config import ProberConfig
from create_nonce.core.addresses import to_address, to_checksum
from create_nonce.errors import InvalidAddress
from create_nonce.prober.probe import NonceProber

if TYPE_CHECKING:
    from create_nonce.core.types import Address
    from create_nonce.prober.oracle import CodeOracle

MAX_DEPLOYMENTS_PER_REQUEST = 1000


class AddressResponse(BaseModel):
    deployer: str
    nonce: int
    address: str


class ProbeResponse(BaseModel):
    deployer: str
    nonce: int
    probes: int
    exceeded: bool
    next_address: str | None


def _parse_deployer(value: str) -> Address:
    try:
        return to_address(value)
    except InvalidAddress as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def create_app(oracle: CodeOracle | None = None, config: ProberConfig | None = None) -> FastAPI:
    app = FastAPI(title="CREATE Address API")
    prober = NonceProber(oracle, config or ProberConfig()) if oracle is not None else None

    @app.get("/api/address/{deployer}/{nonce}")
    async def get_address(deployer: str, nonce: int) -> AddressResponse:
        if nonce < 0:
            raise HTTPException(status_code=400, detail="nonce must be non-negative")
        sender = _parse_deployer(deployer)
        return AddressResponse(
            deployer=to_checksum(sender),
            nonce=nonce,
            address=to_checksum(compute_create_address(sender, nonce)),
        )

    @app.get("/api/deployments/{deployer}")
    async def get_deployments(deployer: str, start: int = 0, count: int = 10) -> list[AddressResponse]:
        if start < 0 or count < 0:
            raise HTTPException(status_code=400, detail="start and count must be non-negative")
        if count > MAX_DEPLOYMENTS_PER_REQUEST:
            raise HTTPException(
                status_code=400,
                detail=f"count must be at most {MAX_DEPLOYMENTS_PER_REQUEST}",
            )
        sender = _parse_deployer(deployer)
        return [
            AddressResponse(
                deployer=to_checksum(record.deployer),
                nonce=record.nonce,
                address=to_checksum(record.address),
            )
            for record in predict_deployments(sender, start, count)
        ]

    # Sync handler: oracle queries block, so FastAPI runs this in its threadpool
    @app.get("/api/nonce/{deployer}")
    def get_nonce(deployer: str, limit: int | None = None) -> ProbeResponse:
        if prober is None:
            raise HTTPException(status_code=503, detail="No code oracle configured")
        if limit is not None and limit < 0:
            raise HTTPException(status_code=400, detail="limit must be non-negative")
        sender = _parse_deployer(deployer)
        # Clients may lower the configured budget, never raise it
        step_limit = prober.config.step_limit
        if limit is not None and step_limit is not None:
            limit = min(limit, step_limit)
        result = prober.infer(sender, limit)
        next_address = (
            None if result.exceeded else to_checksum(compute_create_address(sender, result.nonce))
        )
        return ProbeResponse(
            deployer=to_checksum(sender),
            nonce=result.nonce,
            probes=result.probes,
            exceeded=result.exceeded,
            next_address=next_address,
        )

    return app


def run_server(
    config: ProberConfig, host: str = "127.0.0.1", port: int = 8000
) -> None:
    import uvicorn

    from create_nonce.prober.oracle import Web3CodeOracle

    oracle = None
    if config.rpc_url is not None:
        oracle = Web3CodeOracle.from_rpc_url(config.rpc_url, config.block_identifier)

    app = create_app(oracle, config)
    print(f"Starting CREATE address server at http://{host}:{port}")
    if oracle is None:
        print("No --rpc-url given: nonce inference disabled")
    else:
        print(f"Probing via: {config.rpc_url} (block {config.block_identifier})")
    uvicorn.run(app, host=host, port=port)
