"""
Client factory.

Creates a configured TestRailClient from environment variables or a YAML
file, and sets up logging from the settings in ``config.py``.
"""
from typing import Optional

import config
from core.config import TestRailConfig
from core.interfaces.transport import ITransport
from core.services.structured_logger import configure_logging
from infrastructure.testrail.testrail_client import TestRailClient


class ClientFactory:
    """Factory for TestRail clients."""

    @staticmethod
    def load_config(yaml_path: Optional[str] = None) -> TestRailConfig:
        """
        Load connection settings.

        Args:
            yaml_path: YAML file with a ``testrail`` section; when omitted,
                settings come from TESTRAIL_* environment variables

        Returns:
            TestRailConfig

        Raises:
            ValueError: If base URL, email or API key is missing
        """
        if yaml_path:
            return TestRailConfig.load_from_yaml(yaml_path)
        return TestRailConfig.from_env()

    @staticmethod
    def create_client(
        testrail_config: TestRailConfig,
        transport: Optional[ITransport] = None
    ) -> TestRailClient:
        """
        Create a client for the given settings.

        Args:
            testrail_config: Connection settings
            transport: Optional transport override (tests, proxies)

        Returns:
            TestRailClient
        """
        return TestRailClient(testrail_config, transport=transport)

    @staticmethod
    def configure_logging() -> None:
        """Apply LOG_LEVEL, LOG_FORMAT and LOG_FILE from config.py."""
        configure_logging(
            level=config.LOG_LEVEL,
            fmt=config.LOG_FORMAT,
            log_file=config.LOG_FILE
        )


def get_testrail_client(
    yaml_path: Optional[str] = None,
    setup_logging: bool = True
) -> TestRailClient:
    """Convenience function to get a configured client."""
    if setup_logging:
        ClientFactory.configure_logging()
    return ClientFactory.create_client(ClientFactory.load_config(yaml_path))
