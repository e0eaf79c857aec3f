"""
Test doubles for the transport and bulk response pages.
"""
import json
from typing import Any, Dict, List, Optional

from core.interfaces.transport import ITransport, TransportResponse

BASE_URL = 'https://test.testrail.io'


class FakeTransport(ITransport):
    """Transport returning queued replies and recording every call."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self._replies: List[Any] = []

    def reply_json(self, data: Any, status_code: int = 200) -> 'FakeTransport':
        self._replies.append(TransportResponse(status_code, json.dumps(data)))
        return self

    def reply_body(self, body: str, status_code: int = 200) -> 'FakeTransport':
        self._replies.append(TransportResponse(status_code, body))
        return self

    def fail(self, error: Exception) -> 'FakeTransport':
        self._replies.append(error)
        return self

    def execute(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[str] = None
    ) -> TransportResponse:
        self.calls.append({'method': method, 'url': url, 'headers': headers, 'body': body})
        if not self._replies:
            raise AssertionError(f"Unexpected request: {method} {url}")
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def urls(self) -> List[str]:
        return [c['url'] for c in self.calls]

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.calls[index]['body'])


def page(key: str, items: List[Any], next_address: Optional[str] = None) -> Dict[str, Any]:
    """Build a bulk response page."""
    return {
        'offset': 0,
        'limit': 250,
        'size': len(items),
        '_links': {'next': next_address, 'prev': None},
        key: items,
    }
