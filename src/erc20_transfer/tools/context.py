"""Delegation payload for tool execution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DelegationContext:
    """Delegated signer the host authorized for this execution.

    The private key never leaves the custody layer; only the public key is
    visible here.
    """

    public_key: str | None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> DelegationContext:
        payload = payload or {}
        info = payload.get("delegatorPkpInfo") or payload.get("delegator_pkp_info") or {}
        public_key = info.get("publicKey", info.get("public_key")) if isinstance(info, Mapping) else None
        return cls(public_key=public_key or None)
