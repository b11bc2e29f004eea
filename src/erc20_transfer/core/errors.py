"""Error definitions for erc20_transfer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ErrorKind(str, Enum):
    """Stable error kinds for caller decisions."""

    INVALID_RECIPIENT = "invalid_recipient"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_TOKEN_ADDRESS = "invalid_token_address"
    INVALID_RPC_URL = "invalid_rpc_url"
    INVALID_CHAIN_ID = "invalid_chain_id"
    AMOUNT_TOO_LARGE = "amount_too_large"
    DELEGATION_UNAVAILABLE = "delegation_unavailable"
    SUBMISSION = "submission"
    COMMIT = "commit"
    CONFIG = "config"


@dataclass
class TransferError(Exception):
    """Public error type for erc20_transfer.

    Attributes:
        kind: Stable, actionable error kind.
        message: Human-readable description.
        cause: Original exception for debugging.
    """

    kind: ErrorKind
    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    def with_cause(self, cause: Exception) -> TransferError:
        return replace(self, cause=cause)
