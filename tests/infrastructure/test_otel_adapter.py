"""Tests for telemetry adapters."""

from news_rag.application.ports.telemetry_port import TelemetryPort
from news_rag.infrastructure.telemetry.otel_adapter import (
    NullTelemetry,
    OpenTelemetryAdapter,
    OtelConfig,
)


def test_null_telemetry_accepts_everything():
    t = NullTelemetry()
    t.incr("retrieval.requests", {"status": "success"})
    t.observe("retrieval.latency_ms", 12.5)
    assert isinstance(t, TelemetryPort)


def test_adapter_degrades_to_noop_when_sdk_unavailable(monkeypatch):
    def missing(name):
        raise ImportError(name)

    monkeypatch.setattr("news_rag.infrastructure.telemetry.otel_adapter.import_module", missing)

    adapter = OpenTelemetryAdapter(OtelConfig())

    assert adapter.enabled is False
    adapter.incr("retrieval.requests", {"status": "success"})
    adapter.observe("retrieval.latency_ms", 3.0)


def test_adapter_creates_instruments_once():
    adapter = OpenTelemetryAdapter(OtelConfig(service_name="news-rag-test"))
    assert adapter.enabled is True

    adapter.incr("retrieval.requests", {"status": "success"})
    adapter.incr("retrieval.requests", {"status": "error"})
    adapter.observe("retrieval.latency_ms", 4.2, {"status": "success"})

    assert list(adapter._counters) == ["retrieval.requests"]
    assert list(adapter._histograms) == ["retrieval.latency_ms"]
