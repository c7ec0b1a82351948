"""OpenTelemetry tracing helpers for tconv.

Conversion code calls ``get_tracer()`` unconditionally; without an SDK
provider installed the API hands back no-op tracers.

Usage::

    from tconv.utils.telemetry import ATTR_TURNS, get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("transcript.convert") as span:
        span.set_attribute(ATTR_TURNS, len(turns))

Exporting spans requires the ``otel`` extra (``pip install tconv[otel]``)
and a call to :func:`configure_telemetry` at startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from opentelemetry import trace

if TYPE_CHECKING:
    from tconv.sdk.models import TelemetrySettings

# ---------------------------------------------------------------------------
# Attribute keys recorded on conversion spans
# ---------------------------------------------------------------------------

ATTR_PROVIDER = "tconv.provider"
ATTR_TURNS = "tconv.turns"
ATTR_MESSAGES = "tconv.messages"
ATTR_SYSTEM = "tconv.system"
ATTR_ALTERNATION_REPAIRS = "tconv.repairs.alternation"
ATTR_TRAILING_REPAIR = "tconv.repairs.trailing"
ATTR_TOOL_RESULTS = "tconv.tool_results"
ATTR_PENDING_TOOLS = "tconv.pending_tools"

_INSTRUMENTATION_NAME = "tconv"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a tracer for *name* (no-op until an SDK provider is installed)."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(settings: TelemetrySettings) -> bool:
    """Install an SDK tracer provider according to *settings*.

    Spans go to stdout when ``settings.console`` is set and to the OTLP/gRPC
    collector at ``settings.otlp_endpoint`` when one is given. Returns
    ``False`` without touching the global provider when tracing is disabled.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, for OTLP export,
            ``opentelemetry-exporter-otlp``) is not installed.
    """
    if not settings.enabled:
        return False

    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        raise ImportError(_missing("opentelemetry-sdk", "configure_telemetry()")) from exc

    provider = TracerProvider(  # pyright: ignore[reportUnknownVariableType]
        resource=Resource.create({"service.name": settings.service_name})  # pyright: ignore[reportUnknownMemberType]
    )
    for processor in _span_processors(settings):
        provider.add_span_processor(processor)  # pyright: ignore[reportUnknownMemberType]

    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]
    return True


def _span_processors(settings: TelemetrySettings) -> list[Any]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if settings.console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))
    if settings.otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        except ImportError as exc:
            raise ImportError(_missing("opentelemetry-exporter-otlp", "OTLP export")) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint)))
    return processors


def _missing(package: str, feature: str) -> str:
    return f"{package} is required for {feature}. Install it with: pip install tconv[otel]"
