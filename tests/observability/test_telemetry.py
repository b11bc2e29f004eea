from __future__ import annotations

from contextlib import nullcontext

import pytest

from erc20_transfer.core import event, instrument_erc20_transfer, span, uninstrument_erc20_transfer
from erc20_transfer.core import telemetry


class RecordingLogfire:
    def __init__(self) -> None:
        self.spans: list[tuple[str, dict]] = []
        self.logs: list[tuple[str, str, dict]] = []

    def span(self, name: str, **attributes):
        self.spans.append((name, attributes))
        return nullcontext()

    def log(self, level: str, msg_template: str, attributes=None):
        self.logs.append((level, msg_template, attributes))


@pytest.fixture
def recorder(monkeypatch):
    fake = RecordingLogfire()
    monkeypatch.setattr("erc20_transfer.core.telemetry.logfire", fake)
    yield fake
    uninstrument_erc20_transfer()


class TestTelemetry:
    def test_span_noop_until_instrumented(self, recorder):
        with span("erc20_transfer.test"):
            pass
        assert recorder.spans == []

    def test_instrumented_span_uses_logfire(self, recorder):
        instrument_erc20_transfer()
        assert telemetry.is_instrumented()
        with span("erc20_transfer.test", stage="precheck"):
            pass
        assert recorder.spans == [("erc20_transfer.test", {"stage": "precheck"})]

    def test_event_is_logged_with_structured_payload(self, recorder, caplog):
        caplog.set_level("INFO", logger="erc20_transfer")
        event("execute", "submitted", tx_hash="0x1")

        (record,) = caplog.records
        assert record.getMessage() == "execute.submitted"
        assert record.event == {"stage": "execute", "outcome": "submitted", "tx_hash": "0x1"}
        assert recorder.logs == []

    def test_event_levels(self, recorder, caplog):
        caplog.set_level("DEBUG", logger="erc20_transfer")
        event("commit", "failed", level="error")
        event("precheck", "rejected", level="warn")
        assert [r.levelname for r in caplog.records] == ["ERROR", "WARNING"]

    def test_instrumented_event_mirrors_to_logfire(self, recorder):
        instrument_erc20_transfer()
        event("commit", "skipped", level="warn", policy="p")
        assert recorder.logs == [
            (
                "warn",
                "erc20_transfer.{stage}.{outcome}",
                {"stage": "commit", "outcome": "skipped", "policy": "p"},
            )
        ]
