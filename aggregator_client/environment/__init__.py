"""Runtime capability detection for the aggregator client"""
from .capabilities import Capability, RuntimeCapabilities

__all__ = [
    'Capability',
    'RuntimeCapabilities',
]
