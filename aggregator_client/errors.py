"""Error family raised by the aggregator client"""
from typing import Optional


class AggregatorClientError(Exception):
    """Base class for all aggregator client errors"""


class ConfigError(AggregatorClientError):
    """Invalid client settings; fix the settings and configure again"""


class EnvironmentError(AggregatorClientError):  # noqa: A001
    """A runtime capability the client needs is not available"""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing runtime capabilities: {', '.join(self.missing)}")


class ObservationError(AggregatorClientError):
    """The observation cannot be encoded for the wire"""


class TransportError(AggregatorClientError):
    """Socket creation or datagram transmission failed"""

    def __init__(self, message: str, errno: Optional[int] = None, strerror: Optional[str] = None):
        self.errno = errno
        self.strerror = strerror
        if errno is not None:
            message = f"{message}: [{errno}] {strerror}"
        elif strerror:
            message = f"{message}: {strerror}"
        super().__init__(message)

    @classmethod
    def from_os_error(cls, message: str, error: OSError) -> "TransportError":
        """Build a transport error carrying the OS error code and message"""
        return cls(message, errno=error.errno, strerror=error.strerror or str(error))
