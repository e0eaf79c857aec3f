"""
Infrastructure layer - implementations of interfaces.

Contains:
- testrail: TestRail API transport, dispatcher and client
- client_factory: client creation from environment or YAML configuration
"""
from .testrail import (
    TestRailClient,
    TestRailHttpClient,
    RequestDispatcher,
    build_address,
    classify_failure
)
from .client_factory import ClientFactory, get_testrail_client

__all__ = [
    # TestRail
    'TestRailClient',
    'TestRailHttpClient',
    'RequestDispatcher',
    'build_address',
    'classify_failure',
    # Client Factory
    'ClientFactory',
    'get_testrail_client',
]
