"""ERC-20 transfer tool: precheck and execute stages."""

from __future__ import annotations

import inspect
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from erc20_transfer.__about__ import DEFAULT_TOKEN_DECIMALS, PACKAGE_NAME
from erc20_transfer.chain.address import to_eth_address
from erc20_transfer.chain.amounts import format_units, parse_token_amount
from erc20_transfer.chain.calls import ChainClient, ContractCall
from erc20_transfer.core.errors import ErrorKind, TransferError
from erc20_transfer.core.params import ToolParameters
from erc20_transfer.core.results import ErrorPayload, ExecuteResult, ExecuteSuccess, PrecheckResult, PrecheckSuccess
from erc20_transfer.core.telemetry import event, span
from erc20_transfer.core.validation import validate
from erc20_transfer.policy.binding import SEND_LIMIT_BINDING, PolicyBinding, supported_policies
from erc20_transfer.policy.commit import PolicyCommitCoordinator
from erc20_transfer.policy.types import PoliciesContext
from erc20_transfer.tools.context import DelegationContext
from erc20_transfer.tools.schema import schema_from_model

ParamsInput = ToolParameters | Mapping[str, Any]


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class ERC20TransferTool:
    """Transfer ERC-20 tokens with a delegated signer, gated by a send-limit policy."""

    name = "erc20_transfer"

    def __init__(
        self,
        chain: ChainClient,
        *,
        token_decimals: int = DEFAULT_TOKEN_DECIMALS,
        bindings: Sequence[PolicyBinding] | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if not callable(getattr(chain, "contract_call", None)):
            raise TransferError(ErrorKind.CONFIG, "chain must provide a contract_call(call) method")
        if isinstance(token_decimals, bool) or not isinstance(token_decimals, int) or not 0 <= token_decimals <= 255:
            raise TransferError(ErrorKind.CONFIG, "token_decimals must be an integer in 0..255")

        self._chain = chain
        self.token_decimals = token_decimals
        self.supported_policies = supported_policies(bindings if bindings is not None else [SEND_LIMIT_BINDING])
        # Commit follows the first bound policy, which is the rate limiter by default.
        commit_policy = next(iter(self.supported_policies), SEND_LIMIT_BINDING.policy_name)
        self._committer = PolicyCommitCoordinator(commit_policy)
        self._clock = clock or _epoch_ms

    @property
    def package_name(self) -> str:
        return PACKAGE_NAME

    def schema(self) -> dict[str, Any]:
        return schema_from_model(ToolParameters, name=self.name)

    def policy_inputs(self, params: ParamsInput) -> dict[str, dict[str, Any]]:
        """Inputs the host feeds each bound policy's evaluation, keyed by policy name."""
        outcome = validate(params)
        if outcome.params is None:
            raise outcome.error
        return {name: binding.policy_inputs(outcome.params) for name, binding in self.supported_policies.items()}

    def precheck(self, params: ParamsInput) -> PrecheckResult:
        """Validate parameters without touching the chain, signer or policies."""
        with span("erc20_transfer.precheck"):
            outcome = validate(params)
            if outcome.error is not None:
                event("precheck", "rejected", level="warn", kind=outcome.error.kind.value, error=outcome.error.message)
                return PrecheckResult.fail(ErrorPayload.from_error(outcome.error))

            result = PrecheckResult.succeed(PrecheckSuccess())
            event("precheck", "passed", params=outcome.params.as_dict())
            return result

    async def execute(
        self,
        params: ParamsInput,
        delegation: DelegationContext,
        policies: PoliciesContext | None = None,
    ) -> ExecuteResult:
        """Submit the transfer, then commit policy bookkeeping.

        Never raises: every failure before or during submission comes back as
        a failure result. Once a hash is returned the result is a success,
        whatever happens to the policy commit.
        """
        policies = policies or PoliciesContext()
        with span("erc20_transfer.execute"):
            try:
                tx_hash, parsed = await self._submit(params, delegation)
            except TransferError as error:
                event("execute", "failed", level="error", kind=error.kind.value, error=error.message)
                return ExecuteResult.fail(ErrorPayload.from_error(error))

            event(
                "execute",
                "submitted",
                tx_hash=tx_hash,
                to=parsed.to,
                amount=parsed.amount,
                token_address=parsed.token_address,
            )
            await self._committer.commit(policies, tx_hash=tx_hash)

            return ExecuteResult.succeed(
                ExecuteSuccess(
                    tx_hash=tx_hash,
                    to=parsed.to,
                    amount=parsed.amount,
                    token_address=parsed.token_address,
                    timestamp=self._clock(),
                )
            )

    async def _submit(self, params: ParamsInput, delegation: DelegationContext) -> tuple[str, ToolParameters]:
        outcome = validate(params)
        if outcome.error is not None:
            raise outcome.error
        parsed = outcome.params

        public_key = delegation.public_key if delegation is not None else None
        if not public_key:
            raise TransferError(ErrorKind.DELEGATION_UNAVAILABLE, "PKP public key not available from delegation context")
        try:
            caller_address = to_eth_address(public_key)
        except (ValueError, TypeError) as exc:
            raise TransferError(
                ErrorKind.DELEGATION_UNAVAILABLE,
                f"Delegated public key is not a valid secp256k1 key: {exc}",
                cause=exc,
            ) from exc

        try:
            units = parse_token_amount(parsed.amount, self.token_decimals)
        except ValueError as exc:
            raise TransferError(ErrorKind.INVALID_AMOUNT, str(exc), cause=exc) from exc

        call = ContractCall.erc20_transfer(
            token_address=parsed.token_address,
            to=parsed.to,
            units=units,
            public_key=public_key,
            caller_address=caller_address,
            rpc_url=parsed.rpc_url,
            chain_id=parsed.chain_id,
        )
        event(
            "execute",
            "submitting",
            level="debug",
            decimals=self.token_decimals,
            amount=format_units(units, self.token_decimals),
            **call.describe(),
        )

        try:
            tx_hash = self._chain.contract_call(call)
            if inspect.isawaitable(tx_hash):
                tx_hash = await tx_hash
        except Exception as exc:
            raise TransferError(ErrorKind.SUBMISSION, str(exc) or exc.__class__.__name__, cause=exc) from exc
        if not isinstance(tx_hash, str) or not tx_hash:
            raise TransferError(ErrorKind.SUBMISSION, "Chain client returned no transaction hash")
        return tx_hash, parsed
