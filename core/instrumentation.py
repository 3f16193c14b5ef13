"""
OpenTelemetry instrumentation setup.

This module configures OpenTelemetry for distributed tracing
and starts the Prometheus metrics endpoint.
"""

import logging
import os
import socket

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.instrumentation.psycopg2 import Psycopg2Instrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from prometheus_client import start_http_server

logger = logging.getLogger(__name__)


def setup_opentelemetry():
    """
    Configure OpenTelemetry instrumentation.

    Sets up:
    - Distributed tracing (exported via OTLP)
    - Auto-instrumentation for Django and PostgreSQL
    - The Prometheus scrape endpoint on PROMETHEUS_PORT
    """
    service_name = os.environ.get("OTEL_SERVICE_NAME", "license-server")
    service_version = os.environ.get("OTEL_SERVICE_VERSION", "1.0.0")
    environment = os.environ.get("ENVIRONMENT", "development")

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": service_version,
            "deployment.environment": environment,
        }
    )

    trace_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(trace_provider)

    otlp_endpoint = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT", "http://tempo:4317")
    otlp_exporter = OTLPSpanExporter(
        endpoint=otlp_endpoint,
        insecure=True,  # Use TLS in production
    )
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    DjangoInstrumentor().instrument()
    Psycopg2Instrumentor().instrument()

    start_metrics_server(int(os.environ.get("PROMETHEUS_PORT", "9090")))

    logger.info("OpenTelemetry instrumentation configured")


def start_metrics_server(port: int):
    """Start the Prometheus metrics server unless the port is already taken."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        in_use = sock.connect_ex(("127.0.0.1", port)) == 0
    finally:
        sock.close()

    if in_use:
        logger.info("Prometheus metrics server already running on port %s", port)
        return

    try:
        start_http_server(port, addr="0.0.0.0")
    except OSError as e:
        logger.warning("Could not start Prometheus metrics server: %s", e)
        return
    logger.info("Prometheus metrics server started on 0.0.0.0:%s", port)


def get_tracer(name: str):
    """
    Get a tracer instance for manual instrumentation.

    Without a configured provider this returns OpenTelemetry's no-op tracer.

    Args:
        name: Tracer name (usually module name)

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
