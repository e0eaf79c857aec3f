"""
Decode contract for TestRail entities.

Every entity kind converts one JSON object into one instance, so list
decoding can stay generic over entity types.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Type, TypeVar

E = TypeVar('E', bound='IJsonEntity')


class IJsonEntity(ABC):
    """Interface for entities exchanged with the TestRail API."""

    @classmethod
    @abstractmethod
    def from_json(cls: Type[E], data: Dict[str, Any]) -> E:
        """Build an entity from one JSON object.

        Args:
            data: Decoded JSON object

        Returns:
            Entity instance

        Raises:
            TypeError: If data is not a JSON object
            ValueError: If a field has an unusable value
        """
        pass

    @abstractmethod
    def to_json(self) -> Dict[str, Any]:
        """Serialize the entity to a request body.

        Returns:
            JSON object with absent fields omitted
        """
        pass
