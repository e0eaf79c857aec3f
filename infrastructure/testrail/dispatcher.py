"""
TestRail request dispatcher.

Turns an address into a typed ``RequestResult``: builds headers and body,
calls the transport, decodes the response, and classifies any failure into
an HTTP status instead of raising. Also follows ``_links.next`` cursors of
bulk responses and concatenates the pages.
"""
import json
import logging
from http import HTTPStatus
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from core.config import TestRailConfig
from core.domain.bulk import BulkPage
from core.domain.enums import RequestType
from core.domain.result import RequestResult
from core.interfaces.entity import IJsonEntity
from core.interfaces.transport import ITransport
from core.services.list_decoder import decode_list

logger = logging.getLogger(__name__)

T = TypeVar('T')
E = TypeVar('E', bound=IJsonEntity)

# Status markers looked up in failure messages. Every marker is checked and
# a later match overrides an earlier one; "404" is checked last so it always
# wins. This is a plain substring test on free text: "1404" matches "404",
# and ids inside a URL in the message can match too.
STATUS_MARKERS: Tuple[Tuple[str, HTTPStatus], ...] = (
    ("400", HTTPStatus.BAD_REQUEST),
    ("401", HTTPStatus.UNAUTHORIZED),
    ("403", HTTPStatus.FORBIDDEN),
    ("502", HTTPStatus.BAD_GATEWAY),
    ("503", HTTPStatus.SERVICE_UNAVAILABLE),
    ("504", HTTPStatus.GATEWAY_TIMEOUT),
    ("404", HTTPStatus.NOT_FOUND),
)


def classify_failure(message: str) -> HTTPStatus:
    """Map a failure message to a status code.

    Args:
        message: Exception text from the transport or decoder

    Returns:
        Matched status, or INTERNAL_SERVER_ERROR when nothing matches
    """
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    for marker, marker_status in STATUS_MARKERS:
        if marker in message:
            status = marker_status
    return status


class RequestDispatcher:
    """Executes TestRail commands and wraps outcomes in RequestResult."""

    def __init__(self, config: TestRailConfig, transport: ITransport):
        """Initialize dispatcher.

        Args:
            config: Connection settings
            transport: Transport performing the HTTP exchange
        """
        self._config = config
        self._transport = transport
        self._headers = self._create_headers()

    @property
    def config(self) -> TestRailConfig:
        return self._config

    @property
    def headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        return self._headers.copy()

    def _create_headers(self) -> Dict[str, str]:
        """Create authentication and content headers."""
        return {
            'Authorization': f'Basic {self._config.auth_info}',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }

    def build_url(self, address: str) -> str:
        """Get the full URL for a relative address."""
        return f"{self._config.base_url}/index.php?{address}"

    def dispatch(
        self,
        address: str,
        method: RequestType,
        decode: Callable[[Any], T],
        json_body: Optional[Dict[str, Any]] = None
    ) -> RequestResult[T]:
        """Send one command and decode its response.

        Never raises: transport and decode errors come back as failed
        results classified by ``classify_failure``.

        Args:
            address: Relative address from ``build_address``
            method: GET or POST
            decode: Converts the parsed JSON body into the payload
            json_body: Request body, if any

        Returns:
            RequestResult with the decoded payload or the failure
        """
        try:
            payload = self._call_endpoint(address, method, decode, json_body)
        except Exception as e:
            status = classify_failure(str(e))
            logger.warning(
                "%s %s failed with %d %s: %s",
                method.value, address, status.value, status.phrase, e,
                extra={
                    "method": method.value,
                    "address": address,
                    "status": status.value,
                    "detail": getattr(e, "detail", None),
                }
            )
            return RequestResult.failure(status, e)

        return RequestResult.success(payload)

    def _call_endpoint(
        self,
        address: str,
        method: RequestType,
        decode: Callable[[Any], T],
        json_body: Optional[Dict[str, Any]]
    ) -> Optional[T]:
        """Build the request, send it and decode the reply."""
        logger.debug(
            "%s %s", method.value, address,
            extra={"method": method.value, "address": address}
        )
        body = json.dumps(json_body) if json_body is not None else None

        response = self._transport.execute(
            method.value,
            self.build_url(address),
            self.headers,
            body
        )

        # Delete and close commands may answer with an empty body
        if not response.body or not response.body.strip():
            return None
        return decode(json.loads(response.body))

    def fetch_all_pages(
        self,
        address: str,
        key: str,
        entity_type: Type[E]
    ) -> RequestResult[List[Optional[E]]]:
        """Fetch a bulk endpoint and every page after it.

        Pages are followed through their ``_links.next`` cursor until a page
        has none. When ``max_pages`` is configured, aggregation stops after
        that many pages and returns what was collected.

        Args:
            address: Address of the first page
            key: Plural key holding each page's array, e.g. "cases"
            entity_type: Entity class used to decode items

        Returns:
            RequestResult with all items in page order, or the failed
            page's result (items from earlier pages are dropped)
        """
        def decode_page(raw: Any) -> Tuple[List[Optional[E]], Optional[str]]:
            page = BulkPage.from_json(raw, key)
            return decode_list(entity_type, page.items), page.next

        items: List[Optional[E]] = []
        next_address: Optional[str] = address
        pages = 0

        while next_address is not None:
            if self._config.max_pages is not None and pages >= self._config.max_pages:
                logger.warning(
                    "Stopped paging %s after %d pages (max_pages); next=%s",
                    address, pages, next_address
                )
                break

            result = self.dispatch(next_address, RequestType.GET, decode_page)
            if not result.is_success:
                logger.warning(
                    "Aborted paging %s at page %d, discarding %d items",
                    address, pages + 1, len(items)
                )
                return result  # type: ignore[return-value]
            if result.payload is None:
                error = ValueError(f"Empty bulk response for {next_address}")
                return RequestResult.failure(classify_failure(str(error)), error)

            page_items, next_address = result.payload
            items.extend(page_items)
            pages += 1
            if next_address is not None:
                logger.debug("Following next page %s", next_address)

        return RequestResult.success(items)
