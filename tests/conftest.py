from __future__ import annotations

import logging

import pytest

from erc20_transfer import DelegationContext, ERC20TransferTool, ToolParameters

from .fakes import PUBLIC_KEY, RECIPIENT, TOKEN_ADDRESS, FakeChainClient, RecordingPolicy


@pytest.fixture
def params() -> ToolParameters:
    return ToolParameters(
        to=RECIPIENT,
        amount="1.5",
        token_address=TOKEN_ADDRESS,
        rpc_url="https://mainnet.base.org",
        chain_id=8453,
    )


@pytest.fixture
def chain() -> FakeChainClient:
    return FakeChainClient()


@pytest.fixture
def tool(chain: FakeChainClient) -> ERC20TransferTool:
    return ERC20TransferTool(chain)


@pytest.fixture
def delegation() -> DelegationContext:
    return DelegationContext(public_key=PUBLIC_KEY)


@pytest.fixture
def policy() -> RecordingPolicy:
    return RecordingPolicy()


@pytest.fixture
def events(caplog):
    caplog.set_level(logging.DEBUG, logger="erc20_transfer")

    def _events() -> list[dict]:
        return [record.event for record in caplog.records if hasattr(record, "event")]

    return _events
