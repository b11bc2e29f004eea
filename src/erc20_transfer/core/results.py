"""Structured stage results for erc20_transfer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from erc20_transfer.core.errors import ErrorKind, TransferError


@dataclass(frozen=True)
class ErrorPayload:
    kind: ErrorKind
    message: str

    def as_dict(self) -> dict[str, Any]:
        # Callers only ever see the message; kind stays on the Python object.
        return {"error": self.message}

    @classmethod
    def from_error(cls, error: TransferError) -> ErrorPayload:
        return cls(kind=error.kind, message=error.message)


@dataclass(frozen=True)
class PrecheckSuccess:
    address_valid: bool = True
    amount_valid: bool = True
    token_address_valid: bool = True

    def as_dict(self) -> dict[str, Any]:
        return {
            "addressValid": self.address_valid,
            "amountValid": self.amount_valid,
            "tokenAddressValid": self.token_address_valid,
        }


@dataclass(frozen=True)
class ExecuteSuccess:
    tx_hash: str
    to: str
    amount: str
    token_address: str
    timestamp: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "txHash": self.tx_hash,
            "to": self.to,
            "amount": self.amount,
            "tokenAddress": self.token_address,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class PrecheckResult:
    kind: Literal["success", "failure"]
    value: PrecheckSuccess | None
    error: ErrorPayload | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return self.error.as_dict()
        return self.value.as_dict() if self.value is not None else {}

    @classmethod
    def succeed(cls, value: PrecheckSuccess | None = None) -> PrecheckResult:
        return cls(kind="success", value=value or PrecheckSuccess(), error=None)

    @classmethod
    def fail(cls, error: ErrorPayload) -> PrecheckResult:
        return cls(kind="failure", value=None, error=error)


@dataclass(frozen=True)
class ExecuteResult:
    kind: Literal["success", "failure"]
    value: ExecuteSuccess | None
    error: ErrorPayload | None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def tx_hash(self) -> str | None:
        return self.value.tx_hash if self.value is not None else None

    def as_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return self.error.as_dict()
        return self.value.as_dict() if self.value is not None else {}

    @classmethod
    def succeed(cls, value: ExecuteSuccess) -> ExecuteResult:
        return cls(kind="success", value=value, error=None)

    @classmethod
    def fail(cls, error: ErrorPayload) -> ExecuteResult:
        return cls(kind="failure", value=None, error=error)
