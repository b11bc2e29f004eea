"""Observability helpers for erc20_transfer."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Any, Literal

import logfire

logger = logging.getLogger("erc20_transfer")

Stage = Literal["precheck", "execute", "commit"]
Level = Literal["debug", "info", "warn", "error"]

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_INSTRUMENTED = False


def span(name: str, **attributes: Any):
    if not _INSTRUMENTED:
        return nullcontext()
    return logfire.span(name, **attributes)


def event(stage: Stage, outcome: str, *, level: Level = "info", **attributes: Any) -> None:
    """Emit one structured event for a stage outcome.

    Always goes to the ``erc20_transfer`` logger with the payload under
    ``record.event``; mirrored to Logfire once instrumentation is enabled.
    """
    payload = {"stage": stage, "outcome": outcome, **attributes}
    logger.log(_LEVELS[level], "%s.%s", stage, outcome, extra={"event": payload})
    if _INSTRUMENTED:
        logfire.log(level, "erc20_transfer.{stage}.{outcome}", attributes=payload)


def instrument_erc20_transfer() -> None:
    """Enable Logfire spans and events after users configure Logfire themselves."""
    global _INSTRUMENTED
    _INSTRUMENTED = True


def uninstrument_erc20_transfer() -> None:
    global _INSTRUMENTED
    _INSTRUMENTED = False


def is_instrumented() -> bool:
    return _INSTRUMENTED
