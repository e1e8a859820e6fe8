# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
import logging
import threading

from traced_poller import utils

logger = logging.getLogger(__name__)


class PollingScheduler(threading.Thread):
    """Thread that runs a request executor on a fixed period.

    The first request is sent as soon as the thread starts. A failing
    iteration is logged and reported, and never stops the loop; only
    :meth:`shutdown` does.

    :type executor: :class:`traced_poller.executor.RequestExecutor`
    :param executor: Executor performing one request per iteration.

    :type interval: int or float
    :param interval: Seconds between two requests, defaults to the
        executor's configured interval.

    :type reporter: function
    :param reporter: Called with the outcome of every request.
    """

    daemon = True

    def __init__(self, executor, interval=None, reporter=None):
        super().__init__(name="traced-poller")
        self.executor = executor
        self.interval = (
            executor.options.interval if interval is None else interval
        )
        self.reporter = reporter or utils.print_outcome
        self.iterations = 0
        self.thread_event = threading.Event()

    def run(self):
        logger.info(
            "Polling %s every %s seconds.", self.executor.url, self.interval
        )
        while not self.thread_event.is_set():
            self.poll()
            if self.thread_event.wait(self.interval):
                break
        logger.info("Polling stopped after %d iterations.", self.iterations)

    def poll(self):
        try:
            outcome = self.executor.execute_once()
            self.reporter(outcome)
        except Exception as ex:  # pylint: disable=broad-except
            logger.exception("Polling iteration failed.")
            print(ex)
        finally:
            self.iterations += 1

    def shutdown(self):
        self.thread_event.set()
