"""OpenTelemetry metrics for retrieval and chat.

Instruments are created lazily per metric name. Without opentelemetry-sdk,
or when initialisation fails, every call is a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from news_rag.application.ports.telemetry_port import TelemetryPort

logger = logging.getLogger(__name__)


@dataclass
class OtelConfig:
    service_name: str = "news-rag"
    otlp_endpoint: str | None = None  # e.g. "http://localhost:4317"
    environment: str = "production"
    enable_console: bool = False


class NullTelemetry(TelemetryPort):
    """Telemetry sink used when telemetry is disabled."""

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        return None

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        return None


class OpenTelemetryAdapter(TelemetryPort):
    """Counters for ``incr``, histograms for ``observe``."""

    def __init__(self, cfg: OtelConfig) -> None:
        self._cfg = cfg
        self._meter: Any | None = None
        self._counters: dict[str, Any] = {}
        self._histograms: dict[str, Any] = {}
        self._init_otel()

    @property
    def enabled(self) -> bool:
        return self._meter is not None

    def _init_otel(self) -> None:
        try:
            sdk_metrics = import_module("opentelemetry.sdk.metrics")
            sdk_export = import_module("opentelemetry.sdk.metrics.export")
            api_metrics = import_module("opentelemetry.metrics")
            resources = import_module("opentelemetry.sdk.resources")

            resource = resources.Resource.create(
                {
                    "service.name": self._cfg.service_name,
                    "deployment.environment": self._cfg.environment,
                }
            )

            readers = []
            if self._cfg.otlp_endpoint:
                otlp = import_module("opentelemetry.exporter.otlp.proto.grpc.metric_exporter")
                readers.append(
                    sdk_export.PeriodicExportingMetricReader(
                        otlp.OTLPMetricExporter(endpoint=self._cfg.otlp_endpoint)
                    )
                )
            if self._cfg.enable_console:
                readers.append(
                    sdk_export.PeriodicExportingMetricReader(sdk_export.ConsoleMetricExporter())
                )

            provider = sdk_metrics.MeterProvider(resource=resource, metric_readers=readers)
            api_metrics.set_meter_provider(provider)
            self._meter = api_metrics.get_meter(__name__)
        except Exception as ex:  # noqa: BLE001
            logger.warning("OpenTelemetry unavailable, metrics disabled: %s", ex)
            self._meter = None

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        if self._meter is None:
            return
        try:
            if name not in self._counters:
                self._counters[name] = self._meter.create_counter(
                    name=name, description=f"Counter for {name}"
                )
            self._counters[name].add(1, attributes=tags or {})
        except Exception as ex:  # noqa: BLE001
            # metrics must never break a request
            logger.debug("Dropping counter %s: %s", name, ex)

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        if self._meter is None:
            return
        try:
            if name not in self._histograms:
                self._histograms[name] = self._meter.create_histogram(
                    name=name, description=f"Histogram for {name}"
                )
            self._histograms[name].record(value, attributes=tags or {})
        except Exception as ex:  # noqa: BLE001
            logger.debug("Dropping observation %s: %s", name, ex)
