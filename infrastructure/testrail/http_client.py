"""
TestRail HTTP Client - Low-level HTTP interactions with TestRail.

This class handles only HTTP concerns: one blocking request per call,
raising on any failure. Raised messages carry the status line only, never
the URL or server text, so ids in the address cannot be read as a status.
"""
import logging
from http import HTTPStatus
from typing import Dict, Optional

import requests

from core.interfaces.transport import ITransport, TransportResponse

logger = logging.getLogger(__name__)


class TestRailHttpError(requests.HTTPError):
    """Non-2xx reply from TestRail.

    ``str()`` is the bare status line, e.g. "400 Bad Request". The request
    URL and TestRail's ``error`` text are kept in ``url`` and ``detail``.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        url: Optional[str] = None,
        detail: Optional[str] = None,
        response: Optional[requests.Response] = None
    ):
        super().__init__(f"{status_code} {reason}".strip(), response=response)
        self.status_code = status_code
        self.url = url
        self.detail = detail


def _reason(status_code: int, response: requests.Response) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return response.reason if isinstance(response.reason, str) else ""


class TestRailHttpClient(ITransport):
    """requests-based transport for the TestRail API."""
    __test__ = False  # not a pytest test class

    def __init__(self, timeout: int = 30):
        """Initialize TestRail HTTP client.

        Args:
            timeout: Request timeout in seconds
        """
        self._timeout = timeout

    @property
    def timeout(self) -> int:
        """Request timeout in seconds."""
        return self._timeout

    def execute(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[str] = None
    ) -> TransportResponse:
        """Send one request to TestRail.

        Args:
            method: HTTP method
            url: Absolute URL
            headers: Request headers
            body: Serialized JSON body

        Returns:
            TransportResponse with status code and raw body

        Raises:
            TestRailHttpError: If TestRail answers with a 4xx/5xx status
            requests.RequestException: On connection or timeout errors; the
                message names the error kind only
        """
        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                data=body.encode('utf-8') if body is not None else None,
                timeout=self._timeout
            )
        except requests.RequestException as e:
            logger.debug("%s %s failed: %s", method, url, e)
            raise type(e)(f"{type(e).__name__} during {method} request") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            detail = self._error_detail(response)
            logger.debug("TestRail error detail for %s: %s", url, detail)
            raise TestRailHttpError(
                response.status_code,
                _reason(response.status_code, response),
                url=url,
                detail=detail,
                response=response
            ) from e

        return TransportResponse(status_code=response.status_code, body=response.text)

    @staticmethod
    def _error_detail(response: requests.Response) -> Optional[str]:
        """Extract the ``error`` field TestRail puts in failure bodies."""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict):
            return data.get('error')
        return None
