"""
Package: ironmq
Description: Synchronous client for the IronMQ v1 HTTP/JSON message queue.

Example:
    >>> from ironmq import Client
    >>> queue = Client("my-project", "my-token").queue("jobs")
    >>> message_id = queue.push("hello")
    >>> message = queue.get()
    >>> queue.delete_message(message)
"""

from .client import Client
from .codec import DeflateBodyEncoding, PlainBodyEncoding
from .config import Cloud, Settings
from .errors import (
    EmptyQueueError,
    HTTPError,
    InvalidArgumentError,
    IronMQError,
    MalformedResponseError,
)
from .models import Message, Messages, PushType, QueueInfo, Subscriber
from .queue import Queue

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Cloud",
    "DeflateBodyEncoding",
    "EmptyQueueError",
    "HTTPError",
    "InvalidArgumentError",
    "IronMQError",
    "MalformedResponseError",
    "Message",
    "Messages",
    "PlainBodyEncoding",
    "PushType",
    "Queue",
    "QueueInfo",
    "Settings",
    "Subscriber",
]
