"""Declarative binding between tool parameters and policy inputs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from erc20_transfer.__about__ import SEND_LIMIT_POLICY_NAME
from erc20_transfer.core.errors import ErrorKind, TransferError
from erc20_transfer.core.params import ToolParameters


def _tool_field(name: str) -> str | None:
    for field_name, info in ToolParameters.model_fields.items():
        if name in (field_name, info.alias):
            return field_name
    return None


@dataclass(frozen=True)
class PolicyBinding:
    """Which policy participates in this tool and how parameters feed it.

    parameter_mappings: tool parameter name (snake_case or alias) -> policy input name.
    The policy is expected to expose an evaluation phase run by the host
    before execute, and a commit phase run after a successful transfer.
    """

    policy_name: str
    parameter_mappings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.policy_name.strip():
            raise TransferError(ErrorKind.CONFIG, "Policy binding needs a policy name.")
        unknown = [name for name in self.parameter_mappings if _tool_field(name) is None]
        if unknown:
            raise TransferError(
                ErrorKind.CONFIG,
                f"Policy '{self.policy_name}' maps unknown tool parameters: {', '.join(sorted(unknown))}.",
            )

    def policy_inputs(self, params: ToolParameters) -> dict[str, Any]:
        inputs: dict[str, Any] = {}
        for tool_param, policy_input in self.parameter_mappings.items():
            field_name = _tool_field(tool_param)
            inputs[policy_input] = getattr(params, field_name)
        return inputs


SEND_LIMIT_BINDING = PolicyBinding(
    policy_name=SEND_LIMIT_POLICY_NAME,
    parameter_mappings={"to": "to", "amount": "amount"},
)


def supported_policies(bindings: Iterable[PolicyBinding]) -> dict[str, PolicyBinding]:
    """Index bindings by policy name, rejecting duplicates."""
    supported: dict[str, PolicyBinding] = {}
    for binding in bindings:
        if binding.policy_name in supported:
            raise TransferError(ErrorKind.CONFIG, f"Duplicate policy binding: {binding.policy_name}")
        supported[binding.policy_name] = binding
    return supported
