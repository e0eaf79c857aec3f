"""
Unit tests for TestRailHttpClient.
"""
from unittest.mock import Mock, patch

import pytest
import requests

from infrastructure.testrail.http_client import TestRailHttpClient, TestRailHttpError


def _response(status_code, text='', json_data=None):
    response = Mock()
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error: for url: https://x/index.php?/api/v2/get_case/1"
        )
    else:
        response.raise_for_status.return_value = None
    return response


class TestTestRailHttpClient:
    """Test the requests-based transport."""

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_get(self, mock_request):
        mock_request.return_value = _response(200, '{"id": 1}')
        client = TestRailHttpClient(timeout=7)

        response = client.execute('GET', 'https://x/index.php?/api/v2/get_case/1', {'Accept': 'application/json'})

        assert response.status_code == 200
        assert response.body == '{"id": 1}'
        mock_request.assert_called_once_with(
            'GET',
            'https://x/index.php?/api/v2/get_case/1',
            headers={'Accept': 'application/json'},
            data=None,
            timeout=7
        )

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_post_body_is_utf8(self, mock_request):
        mock_request.return_value = _response(200, '{}')
        client = TestRailHttpClient()

        client.execute('POST', 'https://x', {}, '{"title": "Café"}')

        _, kwargs = mock_request.call_args
        assert kwargs['data'] == '{"title": "Café"}'.encode('utf-8')
        assert kwargs['timeout'] == 30

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_error_keeps_detail_out_of_message(self, mock_request):
        mock_request.return_value = _response(
            400, json_data={'error': 'Field :title is a required field.'}
        )
        client = TestRailHttpClient()

        with pytest.raises(TestRailHttpError) as exc_info:
            client.execute('POST', 'https://x/index.php?/api/v2/add_case/5', {}, '{}')

        error = exc_info.value
        assert str(error) == '400 Bad Request'
        assert error.status_code == 400
        assert error.detail == 'Field :title is a required field.'
        assert error.url == 'https://x/index.php?/api/v2/add_case/5'
        assert isinstance(error, requests.HTTPError)

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_error_message_ignores_ids_in_url(self, mock_request):
        mock_request.return_value = _response(
            400, json_data={'error': 'Case 404 title exceeds 250 characters'}
        )
        client = TestRailHttpClient()

        with pytest.raises(TestRailHttpError) as exc_info:
            client.execute('POST', 'https://x503.testrail.io/index.php?/api/v2/update_case/503', {}, '{}')

        assert str(exc_info.value) == '400 Bad Request'

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_error_without_json_body(self, mock_request):
        mock_request.return_value = _response(503, text='<html>down</html>')
        client = TestRailHttpClient()

        with pytest.raises(TestRailHttpError) as exc_info:
            client.execute('GET', 'https://x', {})

        assert str(exc_info.value) == '503 Service Unavailable'
        assert exc_info.value.detail is None

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_connection_error_propagates_without_url(self, mock_request):
        mock_request.side_effect = requests.ConnectionError(
            "HTTPSConnectionPool(host='x', port=443): Max retries exceeded with url: "
            "/index.php?/api/v2/get_case/503"
        )
        client = TestRailHttpClient()

        with pytest.raises(requests.ConnectionError) as exc_info:
            client.execute('GET', 'https://x/index.php?/api/v2/get_case/503', {})

        assert '503' not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @patch('infrastructure.testrail.http_client.requests.request')
    def test_timeout_keeps_its_type(self, mock_request):
        mock_request.side_effect = requests.Timeout("Read timed out. (read timeout=30)")
        client = TestRailHttpClient()

        with pytest.raises(requests.Timeout):
            client.execute('GET', 'https://x', {})
