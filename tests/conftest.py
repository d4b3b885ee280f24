"""Shared fixtures for aggregator client tests"""
import json
import logging
import os
import socket

import pytest
import structlog

import aggregator_client
from aggregator_client.metrics.exporters.base import BaseTransport


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep AGGREGATOR_* variables from the host out of the tests"""
    for key in list(os.environ):
        if key.upper().startswith("AGGREGATOR_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_default_client():
    aggregator_client.reset()
    yield
    aggregator_client.reset()


@pytest.fixture
def restore_logging():
    """Undo setup_structured_logging after a test"""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def udp_receiver():
    """Loopback UDP socket standing in for the aggregator"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


class RecordingTransport(BaseTransport):
    """Transport that records payloads instead of sending them"""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def send_datagram(self, payload, address):
        self.calls.append((payload, address))
        if self.error is not None:
            raise self.error

    def decoded(self):
        return [json.loads(payload) for payload, _ in self.calls]


@pytest.fixture
def recording_transport():
    return RecordingTransport()
