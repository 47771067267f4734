"""OpenTelemetry tracing configuration for the Bulletin Board."""

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from bulletin_board import __version__
from bulletin_board.infrastructure.config import get_config


def setup_tracing() -> trace.Tracer:
    """Configure OpenTelemetry tracing for the bulletin board."""
    config = get_config()

    resource = Resource.create(
        {
            "service.name": "bulletin_board",
            "service.version": __version__,
            "deployment.environment": config.observability.environment,
        }
    )

    provider = TracerProvider(resource=resource)

    if config.observability.otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(
            endpoint=config.observability.otlp_endpoint,
            insecure=True,
        )
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
    elif config.observability.console_traces:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    return trace.get_tracer("bulletin_board")


def get_tracer(name: str = "bulletin_board") -> trace.Tracer:
    """Get a tracer instance."""
    return trace.get_tracer(name)
