"""The ERC-20 transfer tool and its execution contexts."""

from erc20_transfer.tools.context import DelegationContext
from erc20_transfer.tools.schema import schema_from_model
from erc20_transfer.tools.transfer import ERC20TransferTool

__all__ = [
    "DelegationContext",
    "ERC20TransferTool",
    "schema_from_model",
]
