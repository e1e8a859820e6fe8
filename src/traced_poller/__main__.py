# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
import logging

from traced_poller import configuration
from traced_poller.executor import RequestExecutor
from traced_poller.options import PollerOptions
from traced_poller.processor import PollStatisticsSpanProcessor
from traced_poller.scheduler import PollingScheduler

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO)

    options = PollerOptions()
    statistics = PollStatisticsSpanProcessor()
    # It's important to set up tracing as early in the process as possible.
    provider = configuration.init_tracer_provider(statistics=statistics)
    executor = RequestExecutor(
        configuration.get_tracer(provider),
        options,
        propagator=configuration.create_propagator(),
    )
    scheduler = PollingScheduler(executor)
    scheduler.start()
    try:
        while scheduler.is_alive():
            scheduler.join(1.0)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down.")
    finally:
        scheduler.shutdown()
        scheduler.join(options.timeout)
        provider.shutdown()
        logger.info("Span statistics: %s.", statistics.snapshot())


if __name__ == "__main__":
    main()
