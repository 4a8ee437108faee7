"""
Module: errors.py
Description: Exception taxonomy for the IronMQ client.

Every failure raised by the client derives from IronMQError, except
network-level failures which surface as the underlying httpx.TransportError.
"""

from typing import Optional

EMPTY_OR_NON_JSON = "Empty or non-JSON response"
RETRYABLE_STATUS = 503


class IronMQError(Exception):
    """Base class for all IronMQ client errors."""


class HTTPError(IronMQError):
    """
    The service answered with a status other than 200 OK.

    Attributes:
        status_code: HTTP status returned by the service
        message: Raw response text, or a sentinel when the body was
            empty or not JSON
    """

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message if message else EMPTY_OR_NON_JSON
        super().__init__(f"HTTP {status_code}: {self.message}")

    @property
    def retryable(self) -> bool:
        """True when the service signalled transient overload."""
        return self.status_code == RETRYABLE_STATUS


class EmptyQueueError(IronMQError):
    """A single-message get found the queue empty."""

    def __init__(self, queue_name: Optional[str] = None):
        self.queue_name = queue_name
        super().__init__("Queue is empty")


class InvalidArgumentError(IronMQError, ValueError):
    """A caller-supplied argument is outside the client contract."""


class MalformedResponseError(IronMQError):
    """
    A 200 response could not be turned into the expected result.

    Attributes:
        message_id: ID of the message whose body failed to decode, if any
    """

    def __init__(self, detail: str, message_id: Optional[str] = None):
        self.message_id = message_id
        super().__init__(detail)
