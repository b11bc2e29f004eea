"""Contract call descriptors and the chain collaborator contract."""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from erc20_transfer.chain.abi import ERC20_TRANSFER_ABI


@dataclass(frozen=True)
class ContractCall:
    """Everything the chain collaborator needs to sign and broadcast one call."""

    contract_address: str
    function_name: str
    args: tuple[Any, ...]
    public_key: str
    caller_address: str
    abi: list[dict[str, Any]] = field(default_factory=lambda: list(ERC20_TRANSFER_ABI))
    rpc_url: str | None = None
    chain_id: int | None = None

    @classmethod
    def erc20_transfer(
        cls,
        *,
        token_address: str,
        to: str,
        units: int,
        public_key: str,
        caller_address: str,
        rpc_url: str | None = None,
        chain_id: int | None = None,
    ) -> ContractCall:
        return cls(
            contract_address=token_address,
            function_name="transfer",
            args=(to, units),
            public_key=public_key,
            caller_address=caller_address,
            rpc_url=rpc_url,
            chain_id=chain_id,
        )

    def describe(self) -> dict[str, Any]:
        return {
            "contract_address": self.contract_address,
            "function_name": self.function_name,
            "args": [str(arg) for arg in self.args],
            "caller_address": self.caller_address,
            "rpc_url": self.rpc_url,
            "chain_id": self.chain_id,
        }


@runtime_checkable
class ChainClient(Protocol):
    """Signs with the delegated key, broadcasts, and returns the transaction hash.

    Gas, nonces, timeouts and cancellation belong to the implementation.
    May be sync or async.
    """

    def contract_call(self, call: ContractCall) -> str | Awaitable[str]: ...
