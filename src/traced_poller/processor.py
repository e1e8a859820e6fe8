# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
import logging
import threading
import typing

from opentelemetry.context import Context
from opentelemetry.sdk.trace import ReadableSpan, Span, SpanProcessor
from opentelemetry.trace.status import StatusCode

logger = logging.getLogger(__name__)


class PollStatisticsSpanProcessor(SpanProcessor):
    """PollStatisticsSpanProcessor is an implementation of `SpanProcessor`
    counting the spans started, ended and failed by the poller.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.started = 0
        self.ended = 0
        self.failed = 0
        self.duration = 0.0

    @property
    def open_spans(self) -> int:
        with self._lock:
            return self.started - self.ended

    def on_start(
        self, span: Span, parent_context: typing.Optional[Context] = None
    ) -> None:
        with self._lock:
            self.started += 1

    def on_end(self, span: ReadableSpan) -> None:
        try:
            with self._lock:
                self.ended += 1
                if span.status.status_code is StatusCode.ERROR:
                    self.failed += 1
                if span.start_time and span.end_time:
                    self.duration += (span.end_time - span.start_time) / 1e9
        # pylint: disable=broad-except
        except Exception:
            logger.warning("Exception while processing Span.")

    def snapshot(self) -> typing.Dict[str, float]:
        with self._lock:
            return {
                "started": self.started,
                "ended": self.ended,
                "failed": self.failed,
                "duration": self.duration,
            }

    def shutdown(self) -> None:
        pass

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True
