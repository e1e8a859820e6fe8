# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
from traced_poller.executor import RequestExecutor
from traced_poller.options import PollerOptions
from traced_poller.processor import PollStatisticsSpanProcessor
from traced_poller.protocol import Outcome, OutcomeKind
from traced_poller.scheduler import PollingScheduler

__all__ = [
    "Outcome",
    "OutcomeKind",
    "PollerOptions",
    "PollStatisticsSpanProcessor",
    "PollingScheduler",
    "RequestExecutor",
]
