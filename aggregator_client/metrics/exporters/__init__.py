"""Datagram transports"""
from .base import BaseTransport
from .udp import UdpTransport

__all__ = [
    'BaseTransport',
    'UdpTransport',
]
