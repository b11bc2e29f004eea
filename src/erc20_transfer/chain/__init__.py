"""Chain-facing helpers: addresses, amounts and contract calls."""

from erc20_transfer.chain.abi import ERC20_TRANSFER_ABI
from erc20_transfer.chain.address import is_valid_address, keccak256, to_checksum_address, to_eth_address
from erc20_transfer.chain.amounts import format_units, is_valid_amount, parse_decimal, parse_token_amount
from erc20_transfer.chain.calls import ChainClient, ContractCall

__all__ = [
    "ERC20_TRANSFER_ABI",
    "ChainClient",
    "ContractCall",
    "format_units",
    "is_valid_address",
    "is_valid_amount",
    "keccak256",
    "parse_decimal",
    "parse_token_amount",
    "to_checksum_address",
    "to_eth_address",
]
