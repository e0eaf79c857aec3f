"""
Test TestRail client end to end with a stubbed network.

Requests go through the real TestRailHttpClient and RequestDispatcher; only
``requests.request`` is replaced, so no actual API calls are made.
"""
import json
from http import HTTPStatus
from unittest.mock import Mock, patch

import pytest
import requests

from core.config import TestRailConfig
from core.domain.enums import ResultStatus
from infrastructure.client_factory import ClientFactory

BASE_URL = 'https://company.testrail.io'


def _reply(status_code, data=None, text=None):
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = json.dumps(data) if data is not None else (text or '')
    response.json.return_value = data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error: for url: {BASE_URL}/index.php"
        )
    return response


@pytest.fixture
def client():
    config = TestRailConfig(base_url=BASE_URL, username='qa@example.com', api_key='key', timeout=9)
    return ClientFactory.create_client(config)


class TestEndToEnd:
    """Client operations through the requests transport."""

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_get_case(self, mock_request, client):
        """Test a single-object GET is sent with auth headers and decoded."""
        mock_request.return_value = _reply(200, {'id': 42, 'title': 'Login works', 'priority_id': 4})

        result = client.get_case(42)

        assert result.status_code == HTTPStatus.OK
        assert result.payload.title == 'Login works'
        args, kwargs = mock_request.call_args
        assert args == ('GET', f'{BASE_URL}/index.php?/api/v2/get_case/42')
        assert kwargs['headers']['Authorization'].startswith('Basic ')
        assert kwargs['timeout'] == 9

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_paged_cases(self, mock_request, client):
        """Test bulk pages are followed and concatenated."""
        mock_request.side_effect = [
            _reply(200, {'_links': {'next': '/api/v2/get_cases/1&suite_id=2&offset=2'},
                         'cases': [{'id': 1}, {'id': 2}]}),
            _reply(200, {'_links': {'next': None}, 'cases': [{'id': 3}]}),
        ]

        result = client.get_cases(1, 2)

        assert [c.id for c in result.payload] == [1, 2, 3]
        urls = [c.args[1] for c in mock_request.call_args_list]
        assert urls[1] == f'{BASE_URL}/index.php?/api/v2/get_cases/1&suite_id=2&offset=2'

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_server_error_detail(self, mock_request, client):
        """Test a 400 with TestRail's error text becomes a BAD_REQUEST result."""
        mock_request.return_value = _reply(400, {'error': 'Field :status_id is not a valid status.'})

        result = client.add_result(11, ResultStatus.PASSED)

        assert result.status_code == HTTPStatus.BAD_REQUEST
        assert result.failure_message == '400 Bad Request'
        assert result.thrown_exception.detail == 'Field :status_id is not a valid status.'

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_status_codes_in_address_do_not_change_classification(self, mock_request):
        """Test a 400 on case 503 of a host named 404 stays BAD_REQUEST."""
        config = TestRailConfig(base_url='https://qa404.testrail.io', username='qa@example.com', api_key='key')
        client = ClientFactory.create_client(config)
        mock_request.return_value = _reply(400, {'error': 'Field :title is too long (max 502).'})

        result = client.update_case(503, 'title')

        assert result.status_code == HTTPStatus.BAD_REQUEST
        assert result.payload is None
        assert mock_request.call_args.args[1].endswith('/api/v2/update_case/503')

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_connection_error_with_status_like_url(self, mock_request, client):
        """Test a connection failure on case 503 is not read as SERVICE_UNAVAILABLE."""
        mock_request.side_effect = requests.ConnectionError(
            "Max retries exceeded with url: /index.php?/api/v2/get_case/503"
        )

        result = client.get_case(503)

        assert result.status_code == HTTPStatus.INTERNAL_SERVER_ERROR

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_timeout(self, mock_request, client):
        """Test a transport timeout is returned as a failed result."""
        mock_request.side_effect = requests.Timeout("Read timed out.")

        result = client.get_run(3)

        assert result.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        assert isinstance(result.thrown_exception, requests.Timeout)

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_delete_run(self, mock_request, client):
        """Test delete answers with an empty body."""
        mock_request.return_value = _reply(200, text='')

        result = client.delete_run(3)

        assert result.is_success
        assert result.payload is None
        assert mock_request.call_args.args[0] == 'POST'


class TestClientFactory:
    """Test client creation from settings."""

    def test_load_config_from_yaml(self, tmp_path):
        """Test YAML settings produce a client."""
        path = tmp_path / 'testrail.yaml'
        path.write_text(
            "testrail:\n"
            f"  base_url: {BASE_URL}\n"
            "  email: qa@example.com\n"
            "  api_key: key\n"
        )

        config = ClientFactory.load_config(str(path))
        client = ClientFactory.create_client(config)

        assert client.config.base_url == BASE_URL
        assert client.config.username == 'qa@example.com'

    def test_load_config_from_env(self, monkeypatch):
        """Test environment settings are used without a YAML path."""
        monkeypatch.setenv('TESTRAIL_BASE_URL', BASE_URL)
        monkeypatch.setenv('TESTRAIL_EMAIL', 'env@example.com')
        monkeypatch.setenv('TESTRAIL_API_KEY', 'key')
        monkeypatch.delenv('TESTRAIL_MAX_PAGES', raising=False)
        monkeypatch.delenv('TESTRAIL_TIMEOUT', raising=False)

        config = ClientFactory.load_config()

        assert config.username == 'env@example.com'
