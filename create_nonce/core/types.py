"""Core type aliases for address prediction and nonce probing."""

from typing import NewType

# Ethereum address - 20 raw bytes
Address = NewType("Address", bytes)

# Account nonce - number of CREATE deployments made so far
Nonce = NewType("Nonce", int)
