"""Tests for CREATE address prediction."""

import pytest
import rlp
from eth_utils import keccak
from hypothesis import given, settings
from hypothesis import strategies as st

from create_nonce.address.constants import MAX_NONCE
from create_nonce.address.predictor import (
    DeploymentRecord,
    compute_create_address,
    create_preimage,
    encode_nonce,
    nonce_width,
    predict_deployments,
)
from create_nonce.core.addresses import to_address
from create_nonce.core.types import Address
from create_nonce.errors import InvalidAddress

BOUNDARY_NONCES = [0, 1, 127, 128, 255, 256, 65535, 65536, 16777215, 16777216, MAX_NONCE]

# Published CREATE addresses for deployer 0x6ac7...dbf0
KNOWN_ADDRESSES = [
    (0, "0xcd234a471b72ba2f1ccf0a70fcaba648a5eecd8d"),
    (1, "0x343c43a37d37dff08ae8c4a11544c718abb4fcf8"),
    (2, "0xf778b86fa74e846c4f0a1fbd1335fe81c00a0c91"),
    (3, "0xfffd933a0bc612844eaf0c6fe3e5b8e9b6c1d19c"),
]

addresses = st.binary(min_size=20, max_size=20).map(Address)
nonces = st.integers(min_value=0, max_value=MAX_NONCE)


def reference_create_address(deployer: bytes, nonce: int) -> bytes:
    """Independent derivation through the generic RLP encoder."""
    return keccak(rlp.encode([deployer, nonce]))[12:]


class TestKnownAddresses:
    @pytest.mark.parametrize(("nonce", "expected"), KNOWN_ADDRESSES)
    def test_matches_published_address(self, deployer: Address, nonce: int, expected: str) -> None:
        assert compute_create_address(deployer, nonce) == to_address(expected)

    def test_result_is_20_bytes(self, deployer: Address) -> None:
        assert len(compute_create_address(deployer, 12345)) == 20


class TestEncodeNonce:
    def test_zero_is_empty_string(self) -> None:
        """Integer zero encodes as the RLP empty string, not 0x00."""
        assert encode_nonce(0) == b"\x80"

    @pytest.mark.parametrize("nonce", [1, 0x42, 127])
    def test_small_values_self_encode(self, nonce: int) -> None:
        assert encode_nonce(nonce) == bytes([nonce])

    @pytest.mark.parametrize(
        ("nonce", "expected"),
        [
            (128, b"\x81\x80"),
            (255, b"\x81\xff"),
            (256, b"\x82\x01\x00"),
            (65535, b"\x82\xff\xff"),
            (65536, b"\x83\x01\x00\x00"),
            (16777215, b"\x83\xff\xff\xff"),
            (16777216, b"\x84\x01\x00\x00\x00"),
            (MAX_NONCE, b"\x84\xff\xff\xff\xff"),
        ],
    )
    def test_length_prefixed_values(self, nonce: int, expected: bytes) -> None:
        assert encode_nonce(nonce) == expected

    @pytest.mark.parametrize("nonce", BOUNDARY_NONCES)
    def test_matches_rlp(self, nonce: int) -> None:
        assert encode_nonce(nonce) == rlp.encode(nonce)

    def test_oversized_nonce_is_truncated_not_rejected(self) -> None:
        """Nonces past 4 bytes are out of contract and silently masked."""
        assert encode_nonce(MAX_NONCE + 1) == b"\x84\x00\x00\x00\x00"
        assert encode_nonce(MAX_NONCE + 1) != rlp.encode(MAX_NONCE + 1)


class TestNonceWidth:
    @pytest.mark.parametrize(
        ("nonce", "width"),
        [(0, 1), (255, 1), (256, 2), (65536, 3), (16777216, 4), (MAX_NONCE, 4), (2**40, 4)],
    )
    def test_width(self, nonce: int, width: int) -> None:
        assert nonce_width(nonce) == width


class TestCreatePreimage:
    def test_zero_nonce_layout(self, deployer: Address) -> None:
        preimage = create_preimage(deployer, 0)
        assert preimage == b"\xd6\x94" + deployer + b"\x80"

    def test_single_byte_nonce_layout(self, deployer: Address) -> None:
        preimage = create_preimage(deployer, 127)
        assert preimage == b"\xd6\x94" + deployer + b"\x7f"

    @pytest.mark.parametrize(
        ("nonce", "list_prefix", "nonce_bytes"),
        [
            (128, 0xD7, b"\x81\x80"),
            (256, 0xD8, b"\x82\x01\x00"),
            (65536, 0xD9, b"\x83\x01\x00\x00"),
            (16777216, 0xDA, b"\x84\x01\x00\x00\x00"),
        ],
    )
    def test_multi_byte_nonce_layout(
        self, deployer: Address, nonce: int, list_prefix: int, nonce_bytes: bytes
    ) -> None:
        preimage = create_preimage(deployer, nonce)
        assert preimage == bytes([list_prefix, 0x94]) + deployer + nonce_bytes

    def test_one_extra_byte_across_127_128(self, deployer: Address) -> None:
        assert len(create_preimage(deployer, 128)) == len(create_preimage(deployer, 127)) + 1

    @pytest.mark.parametrize("nonce", BOUNDARY_NONCES)
    def test_matches_rlp_list(self, deployer: Address, nonce: int) -> None:
        assert create_preimage(deployer, nonce) == rlp.encode([deployer, nonce])


class TestDeployerLength:
    @pytest.mark.parametrize("size", [0, 19, 21, 32])
    def test_wrong_length_rejected(self, size: int) -> None:
        deployer = Address(b"\x01" * size)
        with pytest.raises(InvalidAddress, match=f"got {size}"):
            create_preimage(deployer, 1)
        with pytest.raises(InvalidAddress):
            compute_create_address(deployer, 1)


class TestComputeCreateAddress:
    @pytest.mark.parametrize("nonce", BOUNDARY_NONCES)
    def test_boundaries_match_reference(self, deployer: Address, nonce: int) -> None:
        assert compute_create_address(deployer, nonce) == reference_create_address(deployer, nonce)

    def test_zero_nonce_hashes_empty_string_branch(self, deployer: Address) -> None:
        expected = keccak(b"\xd6\x94" + deployer + b"\x80")[12:]
        assert compute_create_address(deployer, 0) == expected

    @given(deployer=addresses, nonce=nonces)
    @settings(max_examples=200)
    def test_matches_reference_implementation(self, deployer: Address, nonce: int) -> None:
        assert compute_create_address(deployer, nonce) == reference_create_address(deployer, nonce)

    @given(deployer=addresses, nonce=nonces)
    @settings(max_examples=50)
    def test_is_deterministic(self, deployer: Address, nonce: int) -> None:
        assert compute_create_address(deployer, nonce) == compute_create_address(deployer, nonce)


class TestPredictDeployments:
    def test_consecutive_nonces(self, deployer: Address) -> None:
        records = predict_deployments(deployer, start=0, count=4)

        assert [r.nonce for r in records] == [0, 1, 2, 3]
        assert [r.address for r in records] == [to_address(a) for _, a in KNOWN_ADDRESSES]
        assert all(r.deployer == deployer for r in records)

    def test_offset_start(self, deployer: Address) -> None:
        records = predict_deployments(deployer, start=127, count=2)

        assert records == [
            DeploymentRecord(deployer, 127, compute_create_address(deployer, 127)),
            DeploymentRecord(deployer, 128, compute_create_address(deployer, 128)),
        ]

    def test_zero_count_is_empty(self, deployer: Address) -> None:
        assert predict_deployments(deployer, count=0) == []

    def test_negative_arguments_rejected(self, deployer: Address) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            predict_deployments(deployer, start=-1)
        with pytest.raises(ValueError, match="non-negative"):
            predict_deployments(deployer, count=-1)
