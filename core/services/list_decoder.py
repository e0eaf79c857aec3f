"""
Generic list decoding through the entity decode contract.
"""
from typing import Any, Callable, List, Optional, Type, TypeVar

from core.interfaces.entity import IJsonEntity

E = TypeVar('E', bound=IJsonEntity)


def decode_list(entity_type: Type[E], raw_items: Any) -> List[Optional[E]]:
    """Decode a JSON array into entities, preserving order.

    JSON ``null`` elements decode to ``None``. Any other element that fails
    to decode fails the whole list.

    Args:
        entity_type: Entity class providing ``from_json``
        raw_items: Decoded JSON array

    Returns:
        List of entities in array order

    Raises:
        TypeError: If raw_items is not a list, or an element is not an object
    """
    if not isinstance(raw_items, list):
        raise TypeError(
            f"Expected JSON array of {entity_type.__name__}, got {type(raw_items).__name__}"
        )
    return [
        entity_type.from_json(item) if item is not None else None
        for item in raw_items
    ]


def single(entity_type: Type[E]) -> Callable[[Any], E]:
    """Decoder for a response holding one JSON object."""
    return entity_type.from_json


def many(entity_type: Type[E]) -> Callable[[Any], List[Optional[E]]]:
    """Decoder for a response holding a plain JSON array."""
    def _decode(raw: Any) -> List[Optional[E]]:
        return decode_list(entity_type, raw)
    return _decode
