# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
from traced_poller.protocol import BaseObject

SUPPORTED_SCHEMES = ("http", "https")


class PollerOptions(BaseObject):
    """Options describing the polling target and cadence.

    The defaults are the fixed target of the poller; overriding them is
    meant for tests.

    Args:
        scheme: URL scheme of the target
        host: Target host
        port: Target port
        path: Request path
        interval: Seconds to wait between two requests
        timeout: Networking timeout in seconds
        span_name: Name given to the client span of each request
        component: Value of the ``component`` span attribute
    """

    __slots__ = (
        "component",
        "host",
        "interval",
        "path",
        "port",
        "scheme",
        "span_name",
        "timeout",
    )

    def __init__(
        self,
        scheme="http",
        host="127.0.0.1",
        port=8080,
        path="/ping",
        interval=5.0,
        timeout=10.0,  # networking timeout in seconds
        # Name convention for client spans is not settled yet, see
        # https://github.com/open-telemetry/opentelemetry-specification/issues/270
        span_name="/",
        component="http",
    ) -> None:
        self.scheme = scheme
        self.host = host
        self.port = port
        self.path = path
        self.interval = interval
        self.timeout = timeout
        self.span_name = span_name
        self.component = component
        self._validate()

    def _validate(self):
        """Validates the target and cadence.

        A bad value here is a configuration bug, so it is rejected when
        the options are built instead of failing on every request.
        """
        if self.scheme not in SUPPORTED_SCHEMES:
            raise ValueError("Unsupported scheme: {}".format(self.scheme))
        if not self.host:
            raise ValueError("Host cannot be none or empty.")
        if (
            isinstance(self.port, bool)
            or not isinstance(self.port, int)
            or not 0 < self.port < 65536
        ):
            raise ValueError("Invalid port: {}".format(self.port))
        if not self.path or not self.path.startswith("/"):
            raise ValueError("Path must start with '/'.")
        if self.interval <= 0:
            raise ValueError("Interval must be positive.")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive.")
