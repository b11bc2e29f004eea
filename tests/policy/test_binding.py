from __future__ import annotations

import pytest

from erc20_transfer import SEND_LIMIT_BINDING, SEND_LIMIT_POLICY_NAME, ErrorKind, PolicyBinding, TransferError
from erc20_transfer.policy import supported_policies


class TestPolicyBinding:
    def test_send_limit_binding_maps_to_and_amount(self, params):
        assert SEND_LIMIT_BINDING.policy_name == SEND_LIMIT_POLICY_NAME
        assert SEND_LIMIT_BINDING.policy_inputs(params) == {"to": params.to, "amount": "1.5"}

    def test_aliases_resolve_to_fields(self, params):
        binding = PolicyBinding("token-allowlist", {"tokenAddress": "token", "chain_id": "chain"})
        assert binding.policy_inputs(params) == {"token": params.token_address, "chain": 8453}

    def test_unknown_parameter_is_config_error(self):
        with pytest.raises(TransferError) as exc_info:
            PolicyBinding("p", {"recipient": "to"})
        assert exc_info.value.kind == ErrorKind.CONFIG

    def test_empty_policy_name_is_config_error(self):
        with pytest.raises(TransferError) as exc_info:
            PolicyBinding("  ")
        assert exc_info.value.kind == ErrorKind.CONFIG

    def test_duplicate_bindings(self):
        with pytest.raises(TransferError) as exc_info:
            supported_policies([SEND_LIMIT_BINDING, SEND_LIMIT_BINDING])
        assert exc_info.value.kind == ErrorKind.CONFIG
