"""Fire-and-forget UDP transport"""
import socket
import struct
from typing import Tuple

from ...config import DEFAULT_RECEIVE_TIMEOUT
from ...errors import TransportError
from ...logging_config import get_logger
from .base import BaseTransport


logger = get_logger(__name__)


class UdpTransport(BaseTransport):
    """Sends each payload from a fresh, unconnected IPv4 UDP socket"""

    def __init__(self, receive_timeout: float = DEFAULT_RECEIVE_TIMEOUT):
        self.receive_timeout = receive_timeout

    def send_datagram(self, payload: bytes, address: Tuple[str, int]) -> None:
        """Open a socket, send one datagram, close the socket"""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as e:
            raise TransportError.from_os_error("Couldn't create socket", e) from e

        try:
            # Receive-only; the socket stays blocking for sendto
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_RCVTIMEO, self._receive_timeval())
            sock.sendto(payload, address)
        except OSError as e:
            logger.warning(
                "Datagram send failed",
                host=address[0],
                port=address[1],
                payload_bytes=len(payload),
                errno=e.errno,
                error=str(e)
            )
            raise TransportError.from_os_error(
                f"Could not send data to {address[0]}:{address[1]}", e
            ) from e
        finally:
            sock.close()

        logger.debug(
            "Observation sent",
            host=address[0],
            port=address[1],
            payload_bytes=len(payload)
        )

    def _receive_timeval(self) -> bytes:
        """Pack receive_timeout as a struct timeval (seconds, microseconds)"""
        seconds = int(self.receive_timeout)
        microseconds = int(round((self.receive_timeout - seconds) * 1_000_000))
        return struct.pack("ll", seconds, microseconds)
