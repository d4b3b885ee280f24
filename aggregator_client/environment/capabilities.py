"""Runtime capability detection and injection for the sender"""
import socket
from dataclasses import dataclass
from enum import Enum
from importlib.util import find_spec
from typing import List, Optional

from ..config import DEFAULT_RECEIVE_TIMEOUT
from ..errors import EnvironmentError
from ..logging_config import get_logger
from ..metrics.encoder import GzipCompressor, JsonEncoder
from ..metrics.exporters.base import BaseTransport
from ..metrics.exporters.udp import UdpTransport


logger = get_logger(__name__)


class Capability(Enum):
    """Capabilities the sender depends on"""
    DATAGRAM_TRANSPORT = "datagram_transport"
    JSON_ENCODER = "json_encoder"
    COMPRESSOR = "compressor"


@dataclass(frozen=True)
class RuntimeCapabilities:
    """Concrete implementations backing each capability

    A field left as None means the capability is unavailable.
    """
    transport: Optional[BaseTransport] = None
    encoder: Optional[JsonEncoder] = None
    compressor: Optional[GzipCompressor] = None

    @classmethod
    def detect(cls, receive_timeout: float = DEFAULT_RECEIVE_TIMEOUT) -> "RuntimeCapabilities":
        """Build the default implementations the interpreter supports"""
        capabilities = cls(
            transport=UdpTransport(receive_timeout) if _supports_udp() else None,
            encoder=JsonEncoder() if _module_available("json") else None,
            compressor=GzipCompressor() if _module_available("zlib") else None,
        )
        logger.debug(
            "Runtime capabilities detected",
            available=[c.value for c in Capability if capabilities.provides(c)]
        )
        return capabilities

    def provides(self, capability: Capability) -> bool:
        """Check if an implementation is present for a capability"""
        implementations = {
            Capability.DATAGRAM_TRANSPORT: self.transport,
            Capability.JSON_ENCODER: self.encoder,
            Capability.COMPRESSOR: self.compressor,
        }
        return implementations[capability] is not None

    def required_for(self, compression_level: int) -> List[Capability]:
        """Capabilities needed to send at the given compression level"""
        required = [Capability.DATAGRAM_TRANSPORT, Capability.JSON_ENCODER]
        if compression_level > 0:
            required.append(Capability.COMPRESSOR)
        return required

    def missing(self, compression_level: int) -> List[Capability]:
        """Required capabilities that are not available"""
        return [c for c in self.required_for(compression_level) if not self.provides(c)]

    def require(self, compression_level: int) -> None:
        """Raise EnvironmentError unless every required capability is present"""
        missing = self.missing(compression_level)
        if missing:
            raise EnvironmentError(c.value for c in missing)


def _supports_udp() -> bool:
    return hasattr(socket, "AF_INET") and hasattr(socket, "SOCK_DGRAM")


def _module_available(name: str) -> bool:
    try:
        return find_spec(name) is not None
    except (ImportError, ValueError):
        return False
