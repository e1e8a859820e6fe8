# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
# pylint: disable=import-error
import logging

from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from traced_poller import PollerOptions, PollingScheduler, RequestExecutor
from traced_poller import configuration

logging.basicConfig(level=logging.INFO)

provider = configuration.init_tracer_provider(
    service_name="ping-client", exporter=ConsoleSpanExporter()
)
executor = RequestExecutor(
    configuration.get_tracer(provider),
    PollerOptions(interval=1.0),
    propagator=configuration.create_propagator(),
)
scheduler = PollingScheduler(executor)
scheduler.start()

input("Press any key to exit...")
scheduler.shutdown()
scheduler.join()
provider.shutdown()
