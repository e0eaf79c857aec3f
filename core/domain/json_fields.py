"""
Helpers shared by entity decode/encode functions.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

CUSTOM_FIELD_PREFIX = 'custom_'


def require_object(data: Any, entity_name: str) -> Dict[str, Any]:
    """Ensure a decoded JSON value is an object.

    Raises:
        TypeError: If data is not a dict
    """
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected JSON object for {entity_name}, got {type(data).__name__}"
        )
    return data


def to_datetime(value: Optional[int]) -> Optional[datetime]:
    """Convert a UNIX timestamp to an aware UTC datetime."""
    if value is None:
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def from_datetime(value: Optional[datetime]) -> Optional[int]:
    """Convert a datetime to a UNIX timestamp."""
    if value is None:
        return None
    return int(value.timestamp())


def custom_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Collect ``custom_*`` fields from a JSON object."""
    return {k: v for k, v in data.items() if k.startswith(CUSTOM_FIELD_PREFIX)}


def compact(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop absent values so partial updates only send what was given."""
    return {k: v for k, v in fields.items() if v is not None}


def merge(body: Dict[str, Any], customs: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Overlay custom fields on an entity body; custom keys win."""
    merged = dict(body)
    if customs:
        merged.update(customs)
    return merged


def id_list(values: Optional[Any]) -> Optional[List[int]]:
    """Normalize an id collection to a sorted list for serialization."""
    if values is None:
        return None
    return sorted(int(v) for v in values)
