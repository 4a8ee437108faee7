"""
Module: queue.py
Description: Queue operations bound to a single named queue.

Composes the JSON codec, the queue's body encoding and the client's
transport into get/fetch/push/delete/clear/subscribe/info calls.

Key Components:
- Queue: Domain-facing API for one queue
- Input validation performed before any network access
- Body decoding of fetched messages

Dependencies: codec, models, errors, logger
"""

import zlib
from typing import TYPE_CHECKING, Iterable, List, Optional, Union
from urllib.parse import quote

from ironmq.codec import json_codec
from ironmq.codec.body import BodyEncoding, get_body_encoding
from ironmq.errors import EmptyQueueError, InvalidArgumentError, MalformedResponseError
from ironmq.models import Message, Messages, PushType, QueueInfo, Subscriber
from ironmq.models.subscriber import RETRIES_COUNT, RETRIES_DELAY
from ironmq.utils.logger import get_logger

if TYPE_CHECKING:
    from ironmq.client import Client

logger = get_logger(__name__)

MAX_FETCH = 100
DEFAULT_RESERVATION_TIMEOUT = 120


class Queue:
    """
    A specific IronMQ queue bound to a client.

    The body encoding is fixed when the queue is created. Messages pushed
    through a deflate queue must be read through a deflate queue, and
    likewise for plain.

    Attributes:
        client: Owning client
        name: Queue name
        encoding: Body encoding applied on push and fetch
    """

    def __init__(
        self,
        client: "Client",
        name: str,
        encoding: Union[str, BodyEncoding] = "deflate"
    ):
        if not name or not isinstance(name, str):
            raise InvalidArgumentError("queue name must be a non-empty string")

        self.client = client
        self.name = name
        self.encoding = get_body_encoding(encoding)
        self._path = f"queues/{quote(name, safe='')}"
        self._messages_path = f"{self._path}/messages"

    def __repr__(self) -> str:
        return f"Queue(name={self.name!r}, encoding={self.encoding.name!r})"

    def get(self) -> Message:
        """
        Retrieve one message from the queue.

        Raises:
            EmptyQueueError: If the queue has no available message
            HTTPError: If the service returns a status other than 200
        """
        messages = self.fetch(1)
        if len(messages) == 0:
            raise EmptyQueueError(self.name)
        return messages[0]

    def fetch(self, n: int = 1, timeout: int = DEFAULT_RESERVATION_TIMEOUT) -> Messages:
        """
        Retrieve up to n messages and reserve them for timeout seconds.

        An empty queue yields an empty Messages, not an error.

        Args:
            n: Number of messages to receive (1..100)
            timeout: Reservation timeout in seconds

        Returns:
            Fetched messages with bodies decoded

        Raises:
            InvalidArgumentError: If n is outside 1..100
            HTTPError: If the service returns a status other than 200
            MalformedResponseError: If a body cannot be decoded with the
                queue's encoding
        """
        if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= MAX_FETCH:
            raise InvalidArgumentError(f"n has to be within 1..{MAX_FETCH}, got {n!r}")

        raw = self.client.request(
            "GET",
            self._messages_path,
            params={"n": n, "timeout": timeout}
        )
        messages = json_codec.decode_messages(raw)

        # Decode every body before touching any message
        decoded = [self._decode_body(message) for message in messages]
        for message, body in zip(messages, decoded):
            message.body = body

        logger.debug("Messages fetched", queue=self.name, requested=n, received=len(messages))

        return messages

    def push(
        self,
        body: str,
        expires_in: Optional[int] = None,
        timeout: Optional[int] = None,
        delay: Optional[int] = None
    ) -> str:
        """
        Push a message onto the queue.

        Args:
            body: Message body
            expires_in: Seconds until deletion; <= 0 uses the service default
            timeout: Reservation timeout in seconds
            delay: Seconds before the message becomes visible

        Returns:
            The new message's ID
        """
        message = Message(body=body, expires_in=expires_in, timeout=timeout, delay=delay)
        return self.push_messages([message])[0]

    def push_messages(self, messages: Iterable[Message]) -> List[str]:
        """
        Push several messages in a single request.

        Bodies are encoded into copies; the given Message objects are
        left untouched.

        Returns:
            IDs assigned by the service, in push order

        Raises:
            InvalidArgumentError: If messages is empty or a body is missing
            MalformedResponseError: If the service did not return one ID per message
        """
        outgoing = []
        for message in messages:
            if message.body is None:
                raise InvalidArgumentError("message body must not be None")
            outgoing.append(message.model_copy(update={
                "id": None,
                "body": self.encoding.encode(message.body),
            }))
        if not outgoing:
            raise InvalidArgumentError("at least one message is required")

        raw = self.client.request(
            "POST",
            self._messages_path,
            body=json_codec.encode_messages(Messages(messages=outgoing))
        )
        ids = json_codec.decode_push_response(raw).ids
        if len(ids) != len(outgoing):
            raise MalformedResponseError(
                f"push of {len(outgoing)} message(s) returned {len(ids)} id(s)"
            )

        logger.debug("Messages pushed", queue=self.name, count=len(outgoing), ids=ids)

        return ids

    def delete_message(self, message: Union[str, Message]) -> None:
        """
        Delete a message from the queue.

        Args:
            message: Message ID, or a Message whose ID is used
        """
        message_id = message.id if isinstance(message, Message) else message
        if not message_id:
            raise InvalidArgumentError("message id must be a non-empty string")

        self.client.request("DELETE", f"{self._messages_path}/{quote(message_id, safe='')}")

    def clear(self) -> None:
        """Remove all messages from the queue."""
        self.client.request("POST", f"{self._path}/clear", body="")

    def subscribe(
        self,
        *urls: str,
        push_type: Union[PushType, str] = PushType.UNICAST,
        retries: int = RETRIES_COUNT,
        retries_delay: int = RETRIES_DELAY
    ) -> None:
        """
        Subscribe endpoints to the queue for push delivery.

        Args:
            *urls: Endpoint URLs, at least one
            push_type: unicast or multicast
            retries: Delivery attempts per endpoint
            retries_delay: Seconds between delivery attempts

        Raises:
            InvalidArgumentError: If no URL is given, push_type is unknown,
                or retries or retries_delay is negative
        """
        if not urls:
            raise InvalidArgumentError("at least one subscriber endpoint is required")
        try:
            push_type = PushType(push_type)
        except ValueError:
            raise InvalidArgumentError(
                f"push_type must be one of: {', '.join(p.value for p in PushType)}, got {push_type!r}"
            ) from None
        for field, value in (("retries", retries), ("retries_delay", retries_delay)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidArgumentError(f"{field} must be a non-negative integer, got {value!r}")

        subscriber = Subscriber.for_urls(
            list(urls),
            push_type=push_type,
            retries=retries,
            retries_delay=retries_delay
        )
        self.client.request(
            "POST",
            f"{self._path}/subscribers",
            body=json_codec.encode_subscriber(subscriber)
        )

        logger.info("Subscribers added", queue=self.name, endpoints=len(urls), push_type=subscriber.push_type.value)

    def info(self) -> QueueInfo:
        """Fetch queue metadata."""
        return json_codec.decode_queue_info(self.client.request("GET", self._path))

    def size(self) -> int:
        """Number of messages currently on the queue."""
        return self.info().size

    def _decode_body(self, message: Message) -> Optional[str]:
        if message.body is None:
            return None
        try:
            return self.encoding.decode(message.body)
        except (ValueError, zlib.error) as e:
            raise MalformedResponseError(
                f"message body is not valid {self.encoding.name} data: {e}",
                message_id=message.id
            ) from e
