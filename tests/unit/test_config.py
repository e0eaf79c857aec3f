"""
Unit tests for TestRailConfig.
"""
import base64

import pytest

from core.config import TestRailConfig

ENV_VARS = (
    'TESTRAIL_BASE_URL', 'TESTRAIL_EMAIL', 'TESTRAIL_API_KEY',
    'TESTRAIL_TIMEOUT', 'TESTRAIL_MAX_PAGES',
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestTestRailConfig:
    """Test validation and derived values."""

    def test_valid_config(self):
        config = TestRailConfig(
            base_url='https://company.testrail.io/',
            username='qa@example.com',
            api_key='secret'
        )
        assert config.base_url == 'https://company.testrail.io'
        assert config.timeout == 30
        assert config.max_pages is None

    @pytest.mark.parametrize("kwargs, message", [
        ({'base_url': '', 'username': 'u', 'api_key': 'k'}, 'Base URL'),
        ({'base_url': 'https://x', 'username': '', 'api_key': 'k'}, 'Username'),
        ({'base_url': 'https://x', 'username': 'u', 'api_key': ''}, 'API key'),
        ({'base_url': 'https://x', 'username': 'u', 'api_key': 'k', 'max_pages': 0}, 'max_pages'),
    ])
    def test_invalid_config(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            TestRailConfig(**kwargs)

    def test_auth_info(self):
        config = TestRailConfig(base_url='https://x', username='qa@example.com', api_key='secret')
        assert base64.b64decode(config.auth_info).decode() == 'qa@example.com:secret'

    def test_repr_masks_api_key(self):
        config = TestRailConfig(base_url='https://x', username='u', api_key='super-secret')
        assert 'super-secret' not in repr(config)

    def test_immutable(self):
        config = TestRailConfig(base_url='https://x', username='u', api_key='k')
        with pytest.raises(AttributeError):
            config.api_key = 'other'


class TestConfigLoading:
    """Test environment, dict and YAML loading."""

    def test_from_env(self, clean_env):
        clean_env.setenv('TESTRAIL_BASE_URL', 'https://env.testrail.io')
        clean_env.setenv('TESTRAIL_EMAIL', 'env@example.com')
        clean_env.setenv('TESTRAIL_API_KEY', 'env-key')
        clean_env.setenv('TESTRAIL_TIMEOUT', '12')
        clean_env.setenv('TESTRAIL_MAX_PAGES', '5')

        config = TestRailConfig.from_env()

        assert config.base_url == 'https://env.testrail.io'
        assert config.username == 'env@example.com'
        assert config.api_key == 'env-key'
        assert config.timeout == 12
        assert config.max_pages == 5

    def test_from_env_missing_values(self, clean_env):
        with pytest.raises(ValueError):
            TestRailConfig.from_env()

    def test_from_dict_falls_back_to_env(self, clean_env):
        clean_env.setenv('TESTRAIL_API_KEY', 'env-key')

        config = TestRailConfig.from_dict({
            'base_url': 'https://dict.testrail.io',
            'email': 'dict@example.com',
        })

        assert config.username == 'dict@example.com'
        assert config.api_key == 'env-key'

    def test_load_from_yaml(self, clean_env, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text(
            "testrail:\n"
            "  base_url: https://yaml.testrail.io\n"
            "  username: yaml@example.com\n"
            "  api_key: yaml-key\n"
            "  timeout: 5\n"
            "  max_pages: 3\n"
        )

        config = TestRailConfig.load_from_yaml(str(path))

        assert config.base_url == 'https://yaml.testrail.io'
        assert config.username == 'yaml@example.com'
        assert config.timeout == 5
        assert config.max_pages == 3

    def test_load_from_yaml_without_section(self, clean_env, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("other: {}\n")

        with pytest.raises(ValueError):
            TestRailConfig.load_from_yaml(str(path))
