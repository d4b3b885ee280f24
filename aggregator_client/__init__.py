"""Fire-and-forget UDP client for a Prometheus metrics aggregator"""
from .client import AggregatorClient, configure, get_client, init, reset, send
from .config import ClientSettings, load_settings
from .environment import Capability, RuntimeCapabilities
from .errors import (
    AggregatorClientError,
    ConfigError,
    EnvironmentError,
    ObservationError,
    TransportError,
)
from .logging_config import get_logger, setup_structured_logging
from .metrics import GzipCompressor, JsonEncoder, MetricObservation
from .metrics.exporters import BaseTransport, UdpTransport

__version__ = "1.0.0"

__all__ = [
    'AggregatorClient',
    'configure',
    'init',
    'send',
    'get_client',
    'reset',
    'ClientSettings',
    'load_settings',
    'Capability',
    'RuntimeCapabilities',
    'AggregatorClientError',
    'ConfigError',
    'ObservationError',
    'TransportError',
    'get_logger',
    'setup_structured_logging',
    'MetricObservation',
    'JsonEncoder',
    'GzipCompressor',
    'BaseTransport',
    'UdpTransport',
]
