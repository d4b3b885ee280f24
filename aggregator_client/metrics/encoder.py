"""Payload codec: compact JSON encoding and gzip wrapping"""
import json

from ..errors import ObservationError
from .models import MetricObservation


class JsonEncoder:
    """Encodes observations as compact UTF-8 JSON"""

    separators = (",", ":")

    def encode(self, observation: MetricObservation) -> bytes:
        try:
            text = json.dumps(observation.to_dict(), separators=self.separators, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise ObservationError(f"Observation {observation.name!r} is not JSON serializable: {e}") from e
        return text.encode("utf-8")


class GzipCompressor:
    """Wraps payloads in a standard gzip container"""

    def compress(self, data: bytes, level: int) -> bytes:
        """Compress at the given level (1 fastest, 9 smallest)

        mtime is pinned to 0 so equal payloads produce equal datagrams.
        """
        import gzip  # requires zlib, probed by RuntimeCapabilities

        return gzip.compress(data, compresslevel=level, mtime=0)


def build_payload(observation: MetricObservation, encoder, compressor, compression_level: int) -> bytes:
    """Encode an observation and compress it when compression is enabled"""
    payload = encoder.encode(observation)
    if compression_level > 0:
        payload = compressor.compress(payload, compression_level)
    return payload
