"""Transport interface for shipping encoded payloads"""
import abc
from typing import Tuple


class BaseTransport(abc.ABC):
    """Abstract base class for datagram transports"""

    @abc.abstractmethod
    def send_datagram(self, payload: bytes, address: Tuple[str, int]) -> None:
        """Send payload as exactly one datagram to address

        Implementations raise TransportError on failure and never retry.
        """
        pass
