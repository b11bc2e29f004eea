"""Best-effort side effects that run after an irreversible action."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from erc20_transfer.core.errors import ErrorKind, TransferError
from erc20_transfer.core.telemetry import Stage, event


class EffectStatus(str, Enum):
    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class EffectOutcome:
    status: EffectStatus
    value: Any = None
    error: TransferError | None = None

    @property
    def applied(self) -> bool:
        return self.status is EffectStatus.APPLIED

    @classmethod
    def skipped(cls) -> EffectOutcome:
        return cls(status=EffectStatus.SKIPPED)


async def best_effort(
    stage: Stage,
    effect: Callable[[], Any | Awaitable[Any]],
    **attributes: Any,
) -> EffectOutcome:
    """Run ``effect`` once; log and report any failure instead of raising.

    Used for bookkeeping that follows an action which has already happened
    and cannot be rolled back. The caller's result must not depend on it.
    """
    try:
        value = effect()
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        error = TransferError(ErrorKind.COMMIT, str(exc) or exc.__class__.__name__, cause=exc)
        event(stage, "failed", level="error", error=repr(exc), **attributes)
        return EffectOutcome(status=EffectStatus.FAILED, error=error)
    event(stage, "applied", result=value, **attributes)
    return EffectOutcome(status=EffectStatus.APPLIED, value=value)
