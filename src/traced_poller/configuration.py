# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.trace import Tracer
from opentelemetry.trace.propagation.tracecontext import (
    TraceContextTextMapPropagator,
)

from traced_poller.version import __version__

DEFAULT_SERVICE_NAME = "traced-poller"
INSTRUMENTATION_NAME = "traced_poller"


def init_tracer_provider(
    service_name: str = DEFAULT_SERVICE_NAME,
    exporter: SpanExporter = None,
    statistics: SpanProcessor = None,
) -> TracerProvider:
    """Builds the tracer provider the poller reports to.

    It is not registered globally; pass it (or a tracer from
    :func:`get_tracer`) to the components that need it.

    Args:
        service_name: Value of the ``service.name`` resource attribute
        exporter: Exporter receiving the ended spans, spans are written
            to the console when omitted
        statistics: Optional processor added before the exporting one
    """
    provider = TracerProvider(
        resource=Resource.create(
            {SERVICE_NAME: service_name, SERVICE_VERSION: __version__}
        )
    )
    if statistics is not None:
        provider.add_span_processor(statistics)
    # SpanExporter receives the spans and send them to the target location.
    provider.add_span_processor(
        BatchSpanProcessor(exporter or ConsoleSpanExporter())
    )
    return provider


def get_tracer(provider: TracerProvider) -> Tracer:
    return provider.get_tracer(INSTRUMENTATION_NAME, __version__)


def create_propagator() -> TextMapPropagator:
    return CompositePropagator(
        [TraceContextTextMapPropagator(), W3CBaggagePropagator()]
    )
