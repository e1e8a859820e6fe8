# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
import logging
import re
import time

import requests
from opentelemetry import trace
from opentelemetry.propagate import get_global_textmap
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.semconv.attributes.error_attributes import ERROR_TYPE
from opentelemetry.semconv.attributes.http_attributes import (
    HTTP_REQUEST_METHOD,
    HTTP_RESPONSE_STATUS_CODE,
)
from opentelemetry.semconv.attributes.url_attributes import URL_FULL
from opentelemetry.trace import SpanKind, Tracer
from opentelemetry.trace.status import Status, StatusCode

from traced_poller import utils
from traced_poller.options import PollerOptions
from traced_poller.protocol import Outcome, OutcomeKind

logger = logging.getLogger(__name__)

# Line terminators of the body, other Unicode breaks are kept as content
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class RequestExecutor:
    """Performs one traced GET request against the polling target.

    Every call to :meth:`execute_once` runs inside its own client span,
    which carries the request attributes, is propagated through the
    outgoing headers and is ended on every exit path.

    Args:
        tracer: Tracer starting the span of each request
        options: :class:`PollerOptions` describing the target
        propagator: Propagator injecting the trace context into the
            request headers, the global one if omitted
    """

    def __init__(
        self,
        tracer: Tracer,
        options: PollerOptions = None,
        propagator: TextMapPropagator = None,
    ):
        self.options = options or PollerOptions()
        self.url = utils.build_url(self.options)
        self.encoding = utils.default_encoding()
        self._tracer = tracer
        self._propagator = propagator or get_global_textmap()

    def execute_once(self) -> Outcome:
        """Sends the request and returns its :class:`Outcome`.

        Transport failures are recorded on the span and returned as an
        outcome, this function should not throw an exception.
        """
        status_code = 0
        chunks = []
        error = None
        kind = OutcomeKind.SUCCESS

        span = self._tracer.start_span(
            self.options.span_name, kind=SpanKind.CLIENT
        )
        with trace.use_span(span, end_on_exit=True):
            span.set_attribute(HTTP_REQUEST_METHOD, "GET")
            span.set_attribute("component", self.options.component)
            span.set_attribute(URL_FULL, self.url)

            # Inject the request with the current Context/Span.
            headers = {}
            self._propagator.inject(headers)

            # The requests timeout applies per socket read, the deadline
            # bounds reading the whole body.
            deadline = time.monotonic() + self.options.timeout
            try:
                with requests.get(
                    self.url,
                    headers=headers,
                    timeout=self.options.timeout,
                    stream=True,
                ) as response:
                    status_code = response.status_code
                    span.set_attribute(HTTP_RESPONSE_STATUS_CODE, status_code)
                    response.encoding = self.encoding
                    for chunk in response.iter_content(
                        chunk_size=None, decode_unicode=True
                    ):
                        chunks.append(chunk)
                        if time.monotonic() > deadline:
                            raise requests.exceptions.Timeout(
                                "Response not read within {} seconds".format(
                                    self.options.timeout
                                )
                            )
            except Exception as ex:  # pylint: disable=broad-except
                logger.warning("Request to %s failed: %s.", self.url, ex)
                error = ex
                kind = OutcomeKind.TRANSPORT_ERROR
                span.record_exception(ex)
                span.set_attribute(ERROR_TYPE, type(ex).__qualname__)
                span.set_status(
                    Status(StatusCode.ERROR, "HTTP Code: {}".format(status_code))
                )
            else:
                if status_code >= 400:
                    kind = OutcomeKind.HTTP_ERROR
                    span.set_attribute(ERROR_TYPE, str(status_code))
                    span.set_status(
                        Status(
                            StatusCode.ERROR,
                            "HTTP Code: {}".format(status_code),
                        )
                    )

        return Outcome(
            status_code=status_code,
            content=_LINE_BREAK.sub("", "".join(chunks)),
            error=error,
            kind=kind,
        )
