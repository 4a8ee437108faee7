"""
Module: message.py
Description: Message data models for the IronMQ client.

Defines the Message model and the Messages envelope used on the wire for
both push requests and fetch responses.

Key Components:
- Message: A single queue message
- Messages: JSON envelope {"messages": [...]}
- PushResponse: Identifiers returned by a push

Dependencies: pydantic, typing
"""

from typing import Any, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """
    Message model representing one item on a queue.

    Numeric fields are optional so that omitted values are left out of
    the request and the service applies its own defaults.

    Attributes:
        id: Identifier assigned by the service (absent on push)
        body: Message payload, raw or encoded by the queue's body encoding
        timeout: Seconds a reservation keeps the message invisible
        delay: Seconds after push before the message becomes visible
        expires_in: Seconds until automatic deletion; <= 0 means the
            service default
        push_status: Service-populated push delivery state (read-only)
    """

    model_config = ConfigDict(
        extra="ignore"
    )

    id: Optional[str] = Field(default=None, description="Service-assigned message ID")
    body: Optional[str] = Field(default=None, description="Message payload")
    timeout: Optional[int] = Field(default=None, description="Reservation timeout in seconds")
    delay: Optional[int] = Field(default=None, description="Visibility delay in seconds")
    expires_in: Optional[int] = Field(
        default=None,
        description="Expiration offset in seconds"
    )
    push_status: Optional[Any] = Field(
        default=None,
        exclude=True,
        description="Push delivery state reported by the service"
    )

    def __str__(self) -> str:
        return self.body or ""


class Messages(BaseModel):
    """Ordered collection of messages, the wire envelope for push and fetch."""

    model_config = ConfigDict(extra="ignore")

    messages: List[Message] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Message]:  # type: ignore[override]
        return iter(self.messages)

    def __getitem__(self, index: int) -> Message:
        return self.messages[index]


class PushResponse(BaseModel):
    """Response body of a push: the assigned message IDs."""

    model_config = ConfigDict(extra="ignore")

    ids: List[str] = Field(default_factory=list)
    msg: Optional[str] = None
