"""Exceptions raised by create_nonce."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from create_nonce.prober.probe import ProbeResult


class InvalidAddress(ValueError):
    """Value cannot be interpreted as a 20-byte address."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid address {value!r}: {reason}")


class NonceLimitExceeded(Exception):
    """Bounded nonce probe ran out of budget before finding a gap."""

    def __init__(self, result: ProbeResult) -> None:
        self.result = result
        super().__init__(
            f"No code gap found for 0x{result.deployer.hex()} within {result.probes} probes "
            f"(nonce >= {result.nonce})"
        )
