"""
Transport adapter interface.

A transport performs exactly one blocking HTTP exchange. It raises on any
failure (connection error, non-2xx status); the dispatcher turns those
exceptions into classified results.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class TransportResponse:
    """Raw response of a successful exchange."""
    status_code: int
    body: str


class ITransport(ABC):
    """Interface for HTTP transports."""

    @abstractmethod
    def execute(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[str] = None
    ) -> TransportResponse:
        """Send one request.

        Args:
            method: HTTP method ("GET" or "POST")
            url: Absolute URL
            headers: Request headers
            body: Serialized JSON body, if any

        Returns:
            TransportResponse for a 2xx reply

        Raises:
            Exception: Any transport or HTTP failure; the message text is
                used for status classification
        """
        pass
