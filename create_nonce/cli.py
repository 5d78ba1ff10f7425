"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from create_nonce.address.predictor import (
    compute_create_address,
    create_preimage,
    predict_deployments,
)
from create_nonce.config import ProberConfig
from create_nonce.core.addresses import to_address, to_checksum
from create_nonce.errors import InvalidAddress


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _block_identifier(value: str) -> str | int:
    return int(value) if value.isdigit() else value


def _load_config(args: argparse.Namespace) -> ProberConfig:
    config = ProberConfig.from_toml(args.config) if args.config is not None else ProberConfig()
    overrides: dict[str, object] = {}
    if getattr(args, "rpc_url", None) is not None:
        overrides["rpc_url"] = args.rpc_url
    if getattr(args, "limit", None) is not None:
        overrides["step_limit"] = args.limit
    if getattr(args, "block", None) is not None:
        overrides["block_identifier"] = args.block
    return replace(config, **overrides) if overrides else config


def cmd_address(args: argparse.Namespace) -> int:
    deployer = to_address(args.deployer)
    address = compute_create_address(deployer, args.nonce)
    if args.verbose:
        print(f"preimage: 0x{create_preimage(deployer, args.nonce).hex()}")
    print(to_checksum(address))
    return 0


def cmd_range(args: argparse.Namespace) -> int:
    deployer = to_address(args.deployer)
    for record in predict_deployments(deployer, args.start, args.count):
        print(f"{record.nonce:>10}  {to_checksum(record.address)}")
    return 0


def cmd_infer(args: argparse.Namespace) -> int:
    from create_nonce.prober.oracle import Web3CodeOracle
    from create_nonce.prober.probe import NonceProber

    config = _load_config(args)
    is_valid, errors = config.validate()
    if not is_valid:
        for error in errors:
            print(f"[config] {error}", file=sys.stderr)
        return 2
    if config.rpc_url is None:
        print("[config] an RPC URL is required (--rpc-url or [prober] rpc_url)", file=sys.stderr)
        return 2

    deployer = to_address(args.deployer)
    oracle = Web3CodeOracle.from_rpc_url(config.rpc_url, config.block_identifier)
    prober = NonceProber(oracle, config)

    def report(nonce: int, address: bytes, has_code: bool) -> None:
        marker = "[CONTRACT]" if has_code else "[EMPTY]"
        print(f"  nonce {nonce}: {to_checksum(address)} {marker}")

    result = prober.infer(deployer, on_probe=report if args.verbose else None)

    if result.exceeded:
        print(
            f"[{to_checksum(deployer)}] nonce >= {result.nonce} "
            f"(limit of {result.probes} probes reached)"
        )
        return 1

    next_address = compute_create_address(deployer, result.nonce)
    print(f"[{to_checksum(deployer)}] nonce={result.nonce} probes={result.probes}")
    print(f"next CREATE address: {to_checksum(next_address)}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from create_nonce.server import run_server

    run_server(_load_config(args), host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-nonce",
        description="Predict CREATE contract addresses and infer deployer nonces",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    address = subparsers.add_parser("address", help="Predict the address for one nonce")
    address.add_argument("deployer", help="Deployer address (hex)")
    address.add_argument("nonce", type=_non_negative_int, help="Deployer nonce")
    address.add_argument("-v", "--verbose", action="store_true", help="Also print the hash preimage")
    address.set_defaults(func=cmd_address)

    range_ = subparsers.add_parser("range", help="Predict addresses for consecutive nonces")
    range_.add_argument("deployer", help="Deployer address (hex)")
    range_.add_argument(
        "--start", type=_non_negative_int, default=0, help="First nonce (default: 0)"
    )
    range_.add_argument(
        "--count", type=_non_negative_int, default=10, help="Number of nonces (default: 10)"
    )
    range_.set_defaults(func=cmd_range)

    for name, help_, func in (
        ("infer", "Infer a deployer's nonce from on-chain code", cmd_infer),
        ("serve", "Start the HTTP API", cmd_serve),
    ):
        sub = subparsers.add_parser(name, help=help_)
        sub.add_argument("--config", type=Path, help="Path to TOML configuration file")
        sub.add_argument("--rpc-url", help="JSON-RPC endpoint used for eth_getCode")
        sub.add_argument("--limit", type=int, help="Maximum number of probes")
        sub.add_argument(
            "--block",
            type=_block_identifier,
            help="Block number or tag to read code at (default: latest)",
        )
        sub.set_defaults(func=func)

    subparsers.choices["infer"].add_argument("deployer", help="Deployer address (hex)")
    subparsers.choices["infer"].add_argument(
        "-v", "--verbose", action="store_true", help="Print every probed address"
    )
    subparsers.choices["serve"].add_argument("--host", default="127.0.0.1", help="Bind address")
    subparsers.choices["serve"].add_argument(
        "--port", type=int, default=8000, help="Port (default: 8000)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except InvalidAddress as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
