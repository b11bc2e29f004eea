"""Parameter validation shared by precheck and execute.

Rules run in a fixed order and the first failing rule decides the error.
Nothing here touches the network or any collaborator.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from erc20_transfer.__about__ import MAX_TRANSFER_AMOUNT
from erc20_transfer.chain.address import is_valid_address
from erc20_transfer.chain.amounts import is_valid_amount, parse_decimal
from erc20_transfer.core.errors import ErrorKind, TransferError
from erc20_transfer.core.params import ToolParameters

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _is_valid_url(value: str) -> bool:
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _within_ceiling(amount: str) -> bool:
    value = parse_decimal(amount)
    return value is not None and value <= MAX_TRANSFER_AMOUNT


FieldValues = Mapping[str, Any]


@dataclass(frozen=True)
class ValidationRule:
    field: str
    kind: ErrorKind
    message: str
    check: Callable[[FieldValues], bool]

    def error(self) -> TransferError:
        return TransferError(self.kind, self.message)


RULES: tuple[ValidationRule, ...] = (
    ValidationRule(
        "to",
        ErrorKind.INVALID_RECIPIENT,
        "Invalid recipient address format",
        lambda v: is_valid_address(v["to"]),
    ),
    ValidationRule(
        "amount",
        ErrorKind.INVALID_AMOUNT,
        "Invalid amount format or amount must be greater than 0",
        lambda v: is_valid_amount(v["amount"]),
    ),
    ValidationRule(
        "token_address",
        ErrorKind.INVALID_TOKEN_ADDRESS,
        "Invalid token contract address format",
        lambda v: is_valid_address(v["token_address"]),
    ),
    ValidationRule(
        "rpc_url",
        ErrorKind.INVALID_RPC_URL,
        "Invalid RPC URL format",
        lambda v: v["rpc_url"] is None or _is_valid_url(v["rpc_url"]),
    ),
    ValidationRule(
        "chain_id",
        ErrorKind.INVALID_CHAIN_ID,
        "Invalid chain ID - must be a positive integer",
        lambda v: v["chain_id"] is None or _is_positive_int(v["chain_id"]),
    ),
    ValidationRule(
        "amount",
        ErrorKind.AMOUNT_TOO_LARGE,
        f"Amount too large (maximum {MAX_TRANSFER_AMOUNT:,} tokens per transaction)",
        lambda v: _within_ceiling(v["amount"]),
    ),
)

_FIELD_ADAPTERS: dict[str, TypeAdapter] = {
    name: TypeAdapter(info.annotation) for name, info in ToolParameters.model_fields.items()
}


@dataclass(frozen=True)
class ValidationOutcome:
    params: ToolParameters | None
    error: TransferError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _field_values(params: Any) -> tuple[dict[str, Any], dict[str, Exception | None]]:
    """Coerce each field on its own so one bad field cannot hide an earlier rule."""
    if isinstance(params, ToolParameters):
        return {name: getattr(params, name) for name in _FIELD_ADAPTERS}, {}

    # A payload that is not a mapping has no readable fields; every field counts as missing.
    raw = params if isinstance(params, Mapping) else {}
    values: dict[str, Any] = {}
    failures: dict[str, Exception | None] = {}
    for name, info in ToolParameters.model_fields.items():
        if info.alias and info.alias in raw:
            value = raw[info.alias]
        elif name in raw:
            value = raw[name]
        elif info.is_required():
            failures[name] = None
            continue
        else:
            values[name] = info.default
            continue
        try:
            values[name] = _FIELD_ADAPTERS[name].validate_python(value)
        except PydanticValidationError as exc:
            failures[name] = exc
    return values, failures


def validate(params: ToolParameters | Mapping[str, Any]) -> ValidationOutcome:
    values, failures = _field_values(params)
    parsed = None
    if not failures:
        parsed = params if isinstance(params, ToolParameters) else ToolParameters(**values)

    for rule in RULES:
        if rule.field in failures:
            error = rule.error()
            cause = failures[rule.field]
            return ValidationOutcome(params=None, error=error.with_cause(cause) if cause else error)
        if not rule.check(values):
            return ValidationOutcome(params=parsed, error=rule.error())
    return ValidationOutcome(params=parsed)
