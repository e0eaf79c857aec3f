"""
Bulk (paginated) response page.

Paginated endpoints wrap their items in an object::

    {"offset": 0, "limit": 250, "size": 250,
     "_links": {"next": "/api/v2/get_cases/1&offset=250", "prev": null},
     "cases": [...]}
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .json_fields import require_object


@dataclass(frozen=True)
class BulkPage:
    """One page of a bulk response."""
    items: List[Any] = field(default_factory=list)
    next: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any], key: str) -> 'BulkPage':
        """Extract the array stored under ``key`` and the next-page cursor.

        Args:
            data: Decoded page object
            key: Plural resource key, e.g. "cases"

        Returns:
            BulkPage

        Raises:
            KeyError: If the page has no array under ``key``
            TypeError: If the page or its array has the wrong shape
        """
        data = require_object(data, cls.__name__)
        items = data[key]
        if not isinstance(items, list):
            raise TypeError(f"Expected JSON array under '{key}', got {type(items).__name__}")
        links = data.get('_links') or {}
        return cls(items=items, next=links.get('next') or None)
