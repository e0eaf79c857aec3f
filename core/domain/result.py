"""
Request result envelope.

Every client operation returns a ``RequestResult`` instead of raising, so
callers check ``status_code`` (or ``is_success``) before reading ``payload``.
"""
from dataclasses import dataclass
from http import HTTPStatus
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class RequestResult(Generic[T]):
    """Outcome of a single TestRail API call."""
    status_code: HTTPStatus
    payload: Optional[T] = None
    thrown_exception: Optional[BaseException] = None

    def __post_init__(self):
        """Enforce that failures never carry a payload."""
        if not self.is_success and self.payload is not None:
            raise ValueError("A failed result cannot carry a payload")

    @property
    def is_success(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= int(self.status_code) < 300

    @property
    def failure_message(self) -> Optional[str]:
        """Text of the exception that caused the failure, if any."""
        if self.thrown_exception is None:
            return None
        return str(self.thrown_exception)

    @classmethod
    def success(cls, payload: Optional[T] = None) -> 'RequestResult[T]':
        """Create a 200 OK result."""
        return cls(HTTPStatus.OK, payload=payload)

    @classmethod
    def failure(
        cls,
        status_code: HTTPStatus,
        exception: BaseException
    ) -> 'RequestResult[T]':
        """Create a failed result with no payload.

        Args:
            status_code: Classified failure status
            exception: Underlying error

        Returns:
            RequestResult without payload
        """
        return cls(status_code, payload=None, thrown_exception=exception)

    @classmethod
    def bad_request(cls, message: str) -> 'RequestResult[T]':
        """Create a 400 result for input rejected before dispatch."""
        return cls.failure(HTTPStatus.BAD_REQUEST, ValueError(message))
