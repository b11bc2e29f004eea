"""erc20_transfer public API."""

from erc20_transfer.__about__ import DEFAULT_TOKEN_DECIMALS, MAX_TRANSFER_AMOUNT, PACKAGE_NAME, SEND_LIMIT_POLICY_NAME
from erc20_transfer.chain import ChainClient, ContractCall
from erc20_transfer.core import (
    ErrorKind,
    ErrorPayload,
    ExecuteResult,
    PrecheckResult,
    TransferError,
    instrument_erc20_transfer,
)
from erc20_transfer.core.params import ToolParameters
from erc20_transfer.core.validation import ValidationOutcome, validate
from erc20_transfer.policy import (
    SEND_LIMIT_BINDING,
    CommitParams,
    PoliciesContext,
    PolicyBinding,
    PolicyCapability,
    PolicyCommitCoordinator,
    PolicyEvaluationResult,
)
from erc20_transfer.tools import DelegationContext, ERC20TransferTool

__all__ = [
    "DEFAULT_TOKEN_DECIMALS",
    "MAX_TRANSFER_AMOUNT",
    "PACKAGE_NAME",
    "SEND_LIMIT_BINDING",
    "SEND_LIMIT_POLICY_NAME",
    "ChainClient",
    "CommitParams",
    "ContractCall",
    "DelegationContext",
    "ERC20TransferTool",
    "ErrorKind",
    "ErrorPayload",
    "ExecuteResult",
    "PoliciesContext",
    "PolicyBinding",
    "PolicyCapability",
    "PolicyCommitCoordinator",
    "PolicyEvaluationResult",
    "PrecheckResult",
    "ToolParameters",
    "TransferError",
    "ValidationOutcome",
    "instrument_erc20_transfer",
    "validate",
]
