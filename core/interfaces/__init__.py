"""
Interfaces for dependency inversion.

The client depends on these abstractions, not on concrete transports or
entity classes.
"""
from .entity import IJsonEntity
from .transport import ITransport, TransportResponse

__all__ = [
    'IJsonEntity',
    'ITransport',
    'TransportResponse',
]
