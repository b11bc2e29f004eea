"""Tool parameter model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class ToolParameters(BaseModel):
    """Transfer an ERC-20 token from the delegator's wallet to a recipient."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: str = Field(description="Recipient account address.")
    amount: str = Field(description="Human token amount as a decimal string, e.g. '12.5'.")
    token_address: str = Field(alias="tokenAddress", description="ERC-20 contract address.")
    rpc_url: str | None = Field(default=None, alias="rpcUrl", description="JSON-RPC endpoint to submit through.")
    chain_id: StrictInt | None = Field(default=None, alias="chainId", description="Target chain id.")

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
