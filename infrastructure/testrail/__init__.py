"""
TestRail infrastructure module.

Provides endpoint addressing, the HTTP transport, the request dispatcher and
the typed TestRail client.
"""
from .endpoints import build_address
from .http_client import TestRailHttpClient
from .dispatcher import RequestDispatcher, classify_failure
from .testrail_client import TestRailClient

__all__ = [
    'build_address',
    'TestRailHttpClient',
    'RequestDispatcher',
    'classify_failure',
    'TestRailClient',
]
