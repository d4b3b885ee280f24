"""Aggregator client: configure once, send observations as single datagrams"""
import threading
from typing import Mapping, Optional

from .config import (
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ClientSettings,
    load_settings,
)
from .environment.capabilities import RuntimeCapabilities
from .errors import AggregatorClientError, ConfigError
from .logging_config import get_logger, log_client_configured
from .metrics.encoder import build_payload
from .metrics.models import MetricObservation, ScalarValue


logger = get_logger(__name__)


class AggregatorClient:
    """Sends metric observations to a remote aggregator over UDP

    Holds only immutable settings and stateless capabilities, so one
    instance can be shared between threads.
    """

    def __init__(self, settings: ClientSettings, capabilities: Optional[RuntimeCapabilities] = None):
        if capabilities is None:
            capabilities = RuntimeCapabilities.detect(settings.receive_timeout)
        capabilities.require(settings.compression_level)

        self.settings = settings
        self.capabilities = capabilities
        log_client_configured(logger, settings)

    @classmethod
    def configure(cls, host: str, port: int, compression_level: int = DEFAULT_COMPRESSION_LEVEL,
                  capabilities: Optional[RuntimeCapabilities] = None, **overrides) -> "AggregatorClient":
        """Validate settings and capabilities, then build a client

        Raises ConfigError for invalid settings and EnvironmentError when a
        required capability is missing. No network I/O happens here.
        """
        settings = load_settings(
            host=host, port=port, compression_level=compression_level, **overrides
        )
        return cls(settings, capabilities)

    @classmethod
    def from_env(cls, capabilities: Optional[RuntimeCapabilities] = None) -> "AggregatorClient":
        """Build a client from AGGREGATOR_* environment variables"""
        return cls(load_settings(), capabilities)

    def encode(self, observation: MetricObservation) -> bytes:
        """Wire payload for an observation under the current settings"""
        return build_payload(
            observation,
            self.capabilities.encoder,
            self.capabilities.compressor,
            self.settings.compression_level,
        )

    def send(self, name: str, value: ScalarValue, labels: Optional[Mapping[str, str]] = None) -> None:
        """Emit one observation as exactly one datagram

        Raises ObservationError before anything is sent when the observation
        is invalid, and TransportError when the datagram cannot be sent.
        """
        observation = MetricObservation(name, value, labels)
        payload = self.encode(observation)
        self.capabilities.transport.send_datagram(payload, self.settings.address)


# Process-wide default client used by the module-level helpers
_client: Optional[AggregatorClient] = None
_configure_error: Optional[AggregatorClientError] = None
_lock = threading.Lock()


def configure(host: str, port: int, compression_level: int = DEFAULT_COMPRESSION_LEVEL) -> AggregatorClient:
    """Configure the process-wide default client

    A failed attempt discards the previous client; send() then raises until
    configure() succeeds again.
    """
    global _client, _configure_error
    with _lock:
        try:
            client = AggregatorClient.configure(host, port, compression_level)
        except AggregatorClientError as e:
            _client = None
            _configure_error = e
            raise
        _client = client
        _configure_error = None
        return client


init = configure


def get_client() -> AggregatorClient:
    """Return the default client, configuring it with defaults on first use"""
    global _client
    with _lock:
        if _client is None:
            if _configure_error is not None:
                raise ConfigError(
                    "Aggregator client is not configured: last configure() call failed with "
                    f"{type(_configure_error).__name__}: {_configure_error}"
                ) from _configure_error
            _client = AggregatorClient.configure(DEFAULT_HOST, DEFAULT_PORT, DEFAULT_COMPRESSION_LEVEL)
        return _client


def send(name: str, value: ScalarValue, labels: Optional[Mapping[str, str]] = None) -> None:
    """Send one observation through the default client"""
    get_client().send(name, value, labels)


def reset() -> None:
    """Forget the default client and any failed configuration"""
    global _client, _configure_error
    with _lock:
        _client = None
        _configure_error = None
