"""OpenTelemetry tracing for the request pipeline.

Two spans are recorded per request: ``mcp.request`` around routing and
``mcp.tool.invoke`` around the GitLab side effect of a tool call. Without a
configured SDK the OpenTelemetry API hands out no-op tracers, so the spans
cost nothing unless ``serve --telemetry`` or ``--otlp-endpoint`` is given.

Span export needs the ``otel`` extra (``pip install mcp-server-gitlab[otel]``).
Exported spans go to stderr or an OTLP collector, never to stdout, which
carries the protocol stream.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from opentelemetry import trace

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mcp_gitlab.protocol.models import RequestId

ATTR_METHOD = "mcp.method"
ATTR_REQUEST_ID = "mcp.request.id"
ATTR_ERROR_CODE = "mcp.error.code"
ATTR_TOOL_NAME = "mcp.tool.name"
ATTR_TOOL_OUTCOME = "mcp.tool.outcome"

REQUEST_SPAN = "mcp.request"
TOOL_SPAN = "mcp.tool.invoke"

_INSTRUMENTATION_NAME = "mcp_gitlab"
_SDK_HINT = "Install it with: pip install mcp-server-gitlab[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


@contextmanager
def request_span(method: str, request_id: RequestId) -> Iterator[trace.Span]:
    """Span covering one routed request."""
    with get_tracer().start_as_current_span(REQUEST_SPAN) as span:
        span.set_attribute(ATTR_METHOD, method)
        if request_id is not None:
            span.set_attribute(ATTR_REQUEST_ID, str(request_id))
        yield span


@contextmanager
def tool_span(tool_name: str) -> Iterator[trace.Span]:
    """Span covering a tool invocation; ``mcp.tool.outcome`` is ok or error."""
    with get_tracer().start_as_current_span(TOOL_SPAN) as span:
        span.set_attribute(ATTR_TOOL_NAME, tool_name)
        try:
            yield span
        except BaseException:
            span.set_attribute(ATTR_TOOL_OUTCOME, "error")
            raise
        span.set_attribute(ATTR_TOOL_OUTCOME, "ok")


def configure_telemetry(
    *,
    service_name: str = "mcp-server-gitlab",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install a tracer provider exporting to stderr and/or OTLP/gRPC.

    Raises :class:`ImportError` when the ``otel`` extra is missing.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for span export. {_SDK_HINT}"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(export_to_console, otlp_endpoint):
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> list[Any]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if export_to_console:
        # Synchronous so spans interleave with the stderr log lines they belong to.
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_SDK_HINT}"
            raise ImportError(msg) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    return processors
