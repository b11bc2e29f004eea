from __future__ import annotations

import pytest

from erc20_transfer import (
    PACKAGE_NAME,
    SEND_LIMIT_POLICY_NAME,
    ERC20TransferTool,
    ErrorKind,
    PolicyBinding,
    TransferError,
)

from ..fakes import RECIPIENT, TOKEN_ADDRESS, FakeChainClient


class TestConfiguration:
    def test_defaults(self, tool):
        assert tool.token_decimals == 6
        assert tool.package_name == PACKAGE_NAME
        assert list(tool.supported_policies) == [SEND_LIMIT_POLICY_NAME]

    @pytest.mark.parametrize("decimals", [-1, 256, 6.0, True])
    def test_rejects_bad_decimals(self, decimals):
        with pytest.raises(TransferError) as exc_info:
            ERC20TransferTool(FakeChainClient(), token_decimals=decimals)
        assert exc_info.value.kind == ErrorKind.CONFIG

    def test_rejects_chain_without_contract_call(self):
        with pytest.raises(TransferError) as exc_info:
            ERC20TransferTool(object())
        assert exc_info.value.kind == ErrorKind.CONFIG

    def test_custom_bindings(self):
        binding = PolicyBinding("custom-limit", {"to": "recipient"})
        tool = ERC20TransferTool(FakeChainClient(), bindings=[binding])
        assert list(tool.supported_policies) == ["custom-limit"]


class TestSchema:
    def test_schema_uses_wire_names(self, tool):
        schema = tool.schema()
        assert schema["type"] == "function"
        assert schema["function"]["name"] == "erc20_transfer"
        assert schema["function"]["description"].startswith("Transfer an ERC-20 token")
        parameters = schema["function"]["parameters"]
        assert set(parameters["properties"]) == {"to", "amount", "tokenAddress", "rpcUrl", "chainId"}
        assert set(parameters["required"]) == {"to", "amount", "tokenAddress"}


class TestPolicyInputs:
    def test_inputs_per_bound_policy(self, tool):
        inputs = tool.policy_inputs({"to": RECIPIENT, "amount": "4", "tokenAddress": TOKEN_ADDRESS})
        assert inputs == {SEND_LIMIT_POLICY_NAME: {"to": RECIPIENT, "amount": "4"}}

    def test_inputs_require_well_formed_parameters(self, tool):
        with pytest.raises(TransferError) as exc_info:
            tool.policy_inputs({"to": RECIPIENT})
        assert exc_info.value.kind == ErrorKind.INVALID_AMOUNT
