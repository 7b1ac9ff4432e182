"""
Storefront OpenTelemetry Setup

Tracing for pricing calculations and order totaling:
- One span per calculate()/get_price_for_cart() call
- Span attributes carry rule counts, item counts and totals
- Until setup_otel() runs, tracers are no-ops
"""
from __future__ import annotations
from typing import Optional
import os

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter


def setup_otel(
    service_name: Optional[str] = None,
    endpoint: Optional[str] = None,
    exporter: Optional[SpanExporter] = None,
) -> trace.Tracer:
    """Initialize OpenTelemetry, exporting over OTLP when an endpoint is set.

    An explicit ``exporter`` wins over the endpoint.
    """
    service_name = service_name or os.getenv("OTEL_SERVICE_NAME", "storefront")
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    otlp_endpoint = endpoint or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if exporter is None and otlp_endpoint:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint)
    if exporter is not None:
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    return trace.get_tracer(service_name)


def get_tracer(name: str) -> trace.Tracer:
    """Tracer for a module; resolves against whatever provider is installed."""
    return trace.get_tracer(name)
