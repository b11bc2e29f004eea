from __future__ import annotations

import pytest

from erc20_transfer.chain import is_valid_address, to_checksum_address, to_eth_address

from ..fakes import CALLER_ADDRESS, COMPRESSED_PUBLIC_KEY, GENERATOR_X, GENERATOR_Y, PUBLIC_KEY

EIP55_VECTORS = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]


class TestChecksum:
    @pytest.mark.parametrize("address", EIP55_VECTORS)
    def test_checksum_vectors(self, address):
        assert to_checksum_address(address.lower()) == address
        assert is_valid_address(address)

    @pytest.mark.parametrize("address", EIP55_VECTORS)
    def test_single_case_is_accepted(self, address):
        assert is_valid_address(address.lower())
        assert is_valid_address("0x" + address[2:].upper())

    def test_wrong_checksum_is_rejected(self):
        assert not is_valid_address("0x5aaEb6053F3E94C9b9A09f33669435E7Ef1BeAed")

    @pytest.mark.parametrize(
        "value",
        ["", "0x", "not-an-address", "5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed", "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAe", None, 42],
    )
    def test_malformed_addresses(self, value):
        assert not is_valid_address(value)

    def test_checksum_requires_hex_address(self):
        with pytest.raises(ValueError):
            to_checksum_address("0xnothex")


class TestPublicKeyDerivation:
    def test_uncompressed_key(self):
        assert to_eth_address(PUBLIC_KEY) == CALLER_ADDRESS

    def test_compressed_key(self):
        assert to_eth_address(COMPRESSED_PUBLIC_KEY) == CALLER_ADDRESS

    def test_raw_xy_key_without_prefix(self):
        assert to_eth_address(GENERATOR_X + GENERATOR_Y) == CALLER_ADDRESS

    def test_bytes_key(self):
        assert to_eth_address(bytes.fromhex(PUBLIC_KEY[2:])) == CALLER_ADDRESS

    @pytest.mark.parametrize("key", ["0x1234", "zz", "0x04" + "00" * 64, "0x" + "0" * 131])
    def test_invalid_keys(self, key):
        with pytest.raises(ValueError):
            to_eth_address(key)
