"""
OpenTelemetry instrumentation
"""
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource, DEPLOYMENT_ENVIRONMENT, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
import logging

from inventory_service import __version__

logger = logging.getLogger(__name__)


def build_resource(service_name: str, environment: str = "dev", version: str = __version__) -> Resource:
    """Resource attributes identifying this deployment in the trace backend"""
    return Resource(attributes={
        SERVICE_NAME: service_name,
        SERVICE_VERSION: version,
        DEPLOYMENT_ENVIRONMENT: environment
    })


def setup_opentelemetry(
    service_name: str,
    otlp_endpoint: str = "http://localhost:4317",
    enabled: bool = True,
    environment: str = "dev",
    version: str = __version__
):
    """
    Setup OpenTelemetry tracing for the service
    
    Args:
        service_name: Name of the service (e.g., "inventory-service")
        otlp_endpoint: OTLP collector endpoint
        enabled: Whether to enable tracing
        environment: Deployment environment reported on every span
        version: Service version reported on every span
    """
    if not enabled:
        logger.info("OpenTelemetry disabled")
        return None
    
    resource = build_resource(service_name, environment, version)
    
    provider = TracerProvider(resource=resource)
    
    otlp_exporter = OTLPSpanExporter(
        endpoint=otlp_endpoint,
        insecure=True  # Use TLS in production
    )
    
    provider.add_span_processor(
        BatchSpanProcessor(otlp_exporter)
    )
    
    trace.set_tracer_provider(provider)
    
    logger.info(f"OpenTelemetry initialized for {service_name}")
    logger.info(f"Sending traces to {otlp_endpoint}")
    
    return provider


def instrument_fastapi(app):
    """Instrument FastAPI application"""
    FastAPIInstrumentor.instrument_app(app)
    logger.info("FastAPI instrumented with OpenTelemetry")


def instrument_sqlalchemy(engine):
    """Instrument SQLAlchemy engine"""
    SQLAlchemyInstrumentor().instrument(engine=engine)
    logger.info("SQLAlchemy instrumented with OpenTelemetry")
