"""
Shared fixtures: a scripted transport and a ready-made configuration.
"""
import pytest

from core.config import TestRailConfig
from tests.fakes import BASE_URL, FakeTransport


@pytest.fixture
def testrail_config():
    return TestRailConfig(
        base_url=BASE_URL,
        username='test@example.com',
        api_key='test-api-key'
    )


@pytest.fixture
def transport():
    return FakeTransport()
