"""
Package: models
Description: Pydantic data models passed across the codec boundary.

- Message / Messages: queue messages and their wire envelope
- PushResponse: identifiers assigned by a push
- Subscriber / PushType: push subscriber registration
- QueueInfo: queue metadata snapshot
"""

from .message import Message, Messages, PushResponse
from .queue_info import QueueInfo
from .subscriber import PushType, Subscriber

__all__ = [
    "Message",
    "Messages",
    "PushResponse",
    "PushType",
    "QueueInfo",
    "Subscriber",
]
