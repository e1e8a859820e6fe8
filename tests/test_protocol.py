# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import unittest

from traced_poller import protocol
from traced_poller.options import PollerOptions


class TestProtocol(unittest.TestCase):
    def test_object(self):
        data = protocol.BaseObject()
        self.assertEqual(repr(data), "{}")

    def test_request_descriptor(self):
        descriptor = protocol.RequestDescriptor()
        self.assertEqual(descriptor.url, "http://127.0.0.1:8080/ping")

    def test_request_descriptor_query_fragment(self):
        descriptor = protocol.RequestDescriptor(
            scheme="https",
            host="example.com",
            port=8443,
            path="/a",
            query="x=1",
            fragment="top",
        )
        self.assertEqual(descriptor.url, "https://example.com:8443/a?x=1#top")

    def test_request_descriptor_ipv6(self):
        descriptor = protocol.RequestDescriptor(host="::1")
        self.assertEqual(descriptor.url, "http://[::1]:8080/ping")

    def test_request_descriptor_from_options(self):
        descriptor = protocol.RequestDescriptor.from_options(
            PollerOptions(port=9000, path="/health")
        )
        self.assertEqual(descriptor.port, 9000)
        self.assertEqual(descriptor.path, "/health")
        self.assertEqual(descriptor.query, "")

    def test_outcome(self):
        outcome = protocol.Outcome(200, "pong")
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.message, "pong")
        self.assertEqual(outcome.kind, protocol.OutcomeKind.SUCCESS)

    def test_outcome_error(self):
        outcome = protocol.Outcome(
            error=ConnectionRefusedError("refused"),
            kind=protocol.OutcomeKind.TRANSPORT_ERROR,
        )
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.status_code, 0)
        self.assertEqual(outcome.message, "refused")

    def test_outcome_http_error(self):
        outcome = protocol.Outcome(404, kind=protocol.OutcomeKind.HTTP_ERROR)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.message, "")
