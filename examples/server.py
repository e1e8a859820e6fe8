# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
# pylint: disable=import-error
import flask
from opentelemetry import trace

from traced_poller import configuration

provider = configuration.init_tracer_provider(service_name="ping-server")
tracer = configuration.get_tracer(provider)
propagator = configuration.create_propagator()

app = flask.Flask(__name__)


@app.route("/ping")
def ping():
    # Continue the trace started by the poller's client span.
    ctx = propagator.extract(flask.request.headers)
    with tracer.start_as_current_span(
        "GET /ping", context=ctx, kind=trace.SpanKind.SERVER
    ):
        return "pong"


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8080, threaded=True)
    provider.shutdown()
