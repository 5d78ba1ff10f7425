"""Shared pytest fixtures for create_nonce tests."""

import pytest

from create_nonce.core.addresses import to_address
from create_nonce.core.types import Address
from create_nonce.prober.oracle import InMemoryCodeOracle

# Deployer with widely published CREATE addresses for nonces 0-3
REFERENCE_DEPLOYER = "0x6ac7ea33f8831ea9dcc53393aaa88b25a785dbf0"


@pytest.fixture
def deployer() -> Address:
    return to_address(REFERENCE_DEPLOYER)


@pytest.fixture
def oracle() -> InMemoryCodeOracle:
    """Create an empty chain state."""
    return InMemoryCodeOracle()
