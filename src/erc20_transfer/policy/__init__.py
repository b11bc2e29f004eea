"""Policy binding and commit coordination."""

from erc20_transfer.policy.binding import SEND_LIMIT_BINDING, PolicyBinding, supported_policies
from erc20_transfer.policy.commit import PolicyCommitCoordinator
from erc20_transfer.policy.types import (
    CommitParams,
    PoliciesContext,
    PolicyCapability,
    PolicyEvaluationResult,
)

__all__ = [
    "SEND_LIMIT_BINDING",
    "CommitParams",
    "PoliciesContext",
    "PolicyBinding",
    "PolicyCapability",
    "PolicyCommitCoordinator",
    "PolicyEvaluationResult",
    "supported_policies",
]
