"""Core primitives for erc20_transfer."""

from erc20_transfer.core.effects import EffectOutcome, EffectStatus, best_effort
from erc20_transfer.core.errors import ErrorKind, TransferError
from erc20_transfer.core.results import ErrorPayload, ExecuteResult, ExecuteSuccess, PrecheckResult, PrecheckSuccess
from erc20_transfer.core.telemetry import event, instrument_erc20_transfer, span, uninstrument_erc20_transfer

__all__ = [
    "EffectOutcome",
    "EffectStatus",
    "ErrorKind",
    "ErrorPayload",
    "ExecuteResult",
    "ExecuteSuccess",
    "PrecheckResult",
    "PrecheckSuccess",
    "TransferError",
    "best_effort",
    "event",
    "instrument_erc20_transfer",
    "span",
    "uninstrument_erc20_transfer",
]
