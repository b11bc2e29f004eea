"""Post-transfer commit of the rate-limit policy's bookkeeping."""

from __future__ import annotations

from erc20_transfer.__about__ import SEND_LIMIT_POLICY_NAME
from erc20_transfer.core.effects import EffectOutcome, best_effort
from erc20_transfer.core.telemetry import event, span
from erc20_transfer.policy.types import CommitParams, PoliciesContext, PolicyCapability, PolicyEvaluationResult


class PolicyCommitCoordinator:
    """Commit the gating policy once a transfer has been submitted.

    A transfer that has been broadcast cannot be undone, so nothing here is
    allowed to fail the execution: a missing policy is skipped and a failing
    commit is logged.
    """

    def __init__(self, policy_name: str = SEND_LIMIT_POLICY_NAME) -> None:
        self.policy_name = policy_name

    async def commit(self, policies: PoliciesContext, *, tx_hash: str | None = None) -> EffectOutcome:
        capability = policies.get(self.policy_name)
        if capability is None:
            event(
                "commit",
                "skipped",
                policy=self.policy_name,
                available=policies.names,
                tx_hash=tx_hash,
            )
            return EffectOutcome.skipped()

        with span("erc20_transfer.commit", policy=self.policy_name):
            return await best_effort(
                "commit",
                lambda: self._invoke(capability),
                policy=self.policy_name,
                tx_hash=tx_hash,
            )

    @staticmethod
    def _invoke(capability: PolicyCapability):
        result = capability.result
        if isinstance(result, PolicyEvaluationResult):
            params = result.commit_params()
        else:
            params = CommitParams.model_validate(result)
        return capability.commit(params)
