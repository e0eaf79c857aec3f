"""
Configuration management - externalized and immutable.
"""
import base64
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

try:
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent.parent / '.env'
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
except (PermissionError, OSError):
    # .env not readable, rely on the process environment
    pass

DEFAULT_TIMEOUT = 30


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == '':
        return None
    return int(value)


@dataclass(frozen=True)
class TestRailConfig:
    """Connection settings for one TestRail instance."""
    __test__ = False  # not a pytest test class

    base_url: str  # e.g., "https://company.testrail.io"
    username: str  # Email used to log in
    api_key: str  # Password or API key
    timeout: int = DEFAULT_TIMEOUT  # Seconds, applied by the transport
    max_pages: Optional[int] = None  # None follows every next-page link

    def __post_init__(self):
        """Validate required settings."""
        if not self.base_url:
            raise ValueError("Base URL is required")
        if not self.username:
            raise ValueError("Username is required")
        if not self.api_key:
            raise ValueError("API key is required")
        if self.max_pages is not None and self.max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        object.__setattr__(self, 'base_url', self.base_url.rstrip('/'))

    @property
    def auth_info(self) -> str:
        """Base64 ``username:api_key`` for the Basic auth header."""
        return base64.b64encode(
            f"{self.username}:{self.api_key}".encode('utf-8')
        ).decode('ascii')

    def __repr__(self) -> str:
        return (
            f"TestRailConfig(base_url={self.base_url!r}, username={self.username!r}, "
            f"api_key='***', timeout={self.timeout}, max_pages={self.max_pages})"
        )

    @classmethod
    def from_env(cls) -> 'TestRailConfig':
        """Create config from environment variables."""
        return cls(
            base_url=os.getenv("TESTRAIL_BASE_URL", ""),
            username=os.getenv("TESTRAIL_EMAIL", ""),
            api_key=os.getenv("TESTRAIL_API_KEY", ""),
            timeout=int(os.getenv("TESTRAIL_TIMEOUT", str(DEFAULT_TIMEOUT))),
            max_pages=_optional_int(os.getenv("TESTRAIL_MAX_PAGES")),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TestRailConfig':
        """Create config from a mapping; missing keys fall back to the environment."""
        return cls(
            base_url=data.get('base_url') or os.getenv("TESTRAIL_BASE_URL", ""),
            username=data.get('email') or data.get('username') or os.getenv("TESTRAIL_EMAIL", ""),
            api_key=data.get('api_key') or os.getenv("TESTRAIL_API_KEY", ""),
            timeout=int(data.get('timeout') or os.getenv("TESTRAIL_TIMEOUT", str(DEFAULT_TIMEOUT))),
            max_pages=_optional_int(data.get('max_pages', os.getenv("TESTRAIL_MAX_PAGES"))),
        )

    @classmethod
    def load_from_yaml(cls, yaml_path: str) -> 'TestRailConfig':
        """Load the ``testrail`` section of a YAML file.

        Args:
            yaml_path: Path to the YAML file

        Returns:
            TestRailConfig

        Raises:
            ValueError: If required settings are missing
        """
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data.get('testrail') or {})
