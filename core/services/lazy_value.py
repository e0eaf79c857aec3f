"""
Thread-safe compute-once value.

Used for values derived from remote catalogues (projects, priorities) that
are fetched on first access and then kept for the life of the client.
"""
import logging
from threading import Lock
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)


class LazyValue(Generic[T]):
    """Value computed by ``factory`` exactly once, on first access.

    Concurrent first accesses block on a lock so the factory runs once;
    later accesses read the stored value without locking. The value is
    never invalidated. If the factory raises, nothing is stored and the
    next access retries.
    """

    def __init__(self, factory: Callable[[], T], name: str = "value"):
        """Initialize lazy value.

        Args:
            factory: Zero-argument callable producing the value
            name: Label used in log messages
        """
        self._factory = factory
        self._name = name
        self._lock = Lock()
        self._computed = False
        self._value: Optional[T] = None

    @property
    def is_computed(self) -> bool:
        return self._computed

    def get(self) -> T:
        """Return the value, computing it on first call."""
        if self._computed:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if not self._computed:
                logger.info("Computing lazy %s", self._name)
                self._value = self._factory()
                self._computed = True

        return self._value  # type: ignore[return-value]
