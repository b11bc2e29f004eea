"""Policy collaborator datatypes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CommitParams(BaseModel):
    """Counters a rate-limit policy reported at evaluation, forwarded to its commit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True, extra="ignore")

    # Values are passed through untouched; their meaning belongs to the policy.
    current_count: Any = Field(alias="currentCount")
    max_sends: Any = Field(alias="maxSends")
    remaining_sends: Any = Field(alias="remainingSends")
    time_window_seconds: Any = Field(alias="timeWindowSeconds")

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class PolicyEvaluationResult(CommitParams):
    """Evaluation payload of a policy; only the commit counters are read here."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True, extra="allow")

    def commit_params(self) -> CommitParams:
        return CommitParams.model_validate(self.model_dump(include=set(CommitParams.model_fields)))


CommitFn = Callable[[CommitParams], Any | Awaitable[Any]]


@dataclass(frozen=True)
class PolicyCapability:
    """A policy that was evaluated for this execution and can be committed."""

    name: str
    result: Any
    commit: CommitFn


def _entry_field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


@dataclass(frozen=True)
class PoliciesContext:
    """Policies the host evaluated and allowed for the current execution."""

    allowed_policies: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> PoliciesContext:
        payload = payload or {}
        allowed = payload.get("allowedPolicies", payload.get("allowed_policies")) or {}
        return cls(allowed_policies=dict(allowed))

    @property
    def names(self) -> list[str]:
        return sorted(self.allowed_policies)

    def get(self, name: str) -> PolicyCapability | None:
        """Return the policy only when it carries both a result and a commit."""
        entry = self.allowed_policies.get(name)
        if entry is None:
            return None
        result = _entry_field(entry, "result")
        commit = _entry_field(entry, "commit")
        if result is None or not callable(commit):
            return None
        return PolicyCapability(name=name, result=result, commit=commit)
