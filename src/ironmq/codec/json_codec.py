"""
Module: json_codec.py
Description: JSON encoding and decoding of wire payloads.

Serializes outgoing Messages and Subscriber values with the fixed wire
field names and parses response bodies into typed models. Absent optional
fields are omitted, and unknown response fields are ignored.
"""

from typing import Union

from pydantic import BaseModel

from ironmq.models import Messages, PushResponse, QueueInfo, Subscriber


def encode(value: BaseModel) -> str:
    """Serialize a model to request JSON, dropping unset optional fields."""
    return value.model_dump_json(by_alias=True, exclude_none=True)


def encode_messages(messages: Messages) -> str:
    return encode(messages)


def encode_subscriber(subscriber: Subscriber) -> str:
    return encode(subscriber)


def decode_messages(raw: Union[str, bytes]) -> Messages:
    """
    Parse a fetch response into Messages.

    Raises:
        pydantic.ValidationError: If the body is not a valid envelope
    """
    return Messages.model_validate_json(raw)


def decode_push_response(raw: Union[str, bytes]) -> PushResponse:
    return PushResponse.model_validate_json(raw)


def decode_queue_info(raw: Union[str, bytes]) -> QueueInfo:
    return QueueInfo.model_validate_json(raw)
