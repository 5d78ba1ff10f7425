"""Prober configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_STEP_LIMIT = 10_000


@dataclass(frozen=True)
class ProberConfig:
    """Configuration for nonce probing against a live chain."""

    # Probe budget (oracle queries per inference); None scans without bound
    step_limit: int | None = DEFAULT_STEP_LIMIT

    # Chain access
    rpc_url: str | None = None
    block_identifier: str | int = "latest"

    def validate(self) -> tuple[bool, list[str]]:
        errors: list[str] = []

        if self.step_limit is not None and self.step_limit < 0:
            errors.append(f"step_limit={self.step_limit} must be non-negative")

        if isinstance(self.block_identifier, int):
            if self.block_identifier < 0:
                errors.append(f"block_identifier={self.block_identifier} must be non-negative")
        elif self.block_identifier not in ("latest", "earliest", "pending", "safe", "finalized"):
            errors.append(f"block_identifier={self.block_identifier!r} is not a known block tag")

        return (len(errors) == 0, errors)

    def to_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_toml(cls, path: Path) -> ProberConfig:
        import tomllib

        with path.open("rb") as f:
            data = tomllib.load(f)

        section = data.get("prober", {})
        # TOML has no null
        if section.get("unbounded", False):
            step_limit = None
        else:
            step_limit = section.get("step_limit", DEFAULT_STEP_LIMIT)

        return cls(
            step_limit=step_limit,
            rpc_url=section.get("rpc_url"),
            block_identifier=section.get("block_identifier", "latest"),
        )
