"""Metric observation model, payload codec and transports"""
from .models import MetricObservation, ScalarValue
from .encoder import GzipCompressor, JsonEncoder, build_payload

__all__ = [
    'MetricObservation',
    'ScalarValue',
    'JsonEncoder',
    'GzipCompressor',
    'build_payload',
]
