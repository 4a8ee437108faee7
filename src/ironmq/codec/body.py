"""
Module: body.py
Description: Message body encodings applied before bodies are wrapped in JSON.

A queue is bound to exactly one encoding when it is created. Bodies pushed
with one encoding can only be read back with the same one, so the choice
is always explicit and never inferred from content.

Key Components:
- PlainBodyEncoding: Bodies travel as-is
- DeflateBodyEncoding: zlib DEFLATE at best compression, then URL-safe
  base64 without padding
- get_body_encoding(): Resolve an encoding by name

Dependencies: zlib, base64
"""

import base64
import zlib
from abc import ABC, abstractmethod
from typing import Dict, Union

from ironmq.errors import InvalidArgumentError
from ironmq.utils.logger import get_logger

logger = get_logger(__name__)


class BodyEncoding(ABC):
    """Strategy interface for translating message bodies to and from the wire."""

    name = ""

    @abstractmethod
    def encode(self, body: str) -> str:
        """Turn a caller body into its wire form."""

    @abstractmethod
    def decode(self, body: str) -> str:
        """Turn a wire body back into the caller body."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PlainBodyEncoding(BodyEncoding):
    """Send and receive bodies unchanged."""

    name = "plain"

    def encode(self, body: str) -> str:
        return body

    def decode(self, body: str) -> str:
        return body


class DeflateBodyEncoding(BodyEncoding):
    """
    Compress bodies with DEFLATE and armor them with URL-safe base64.

    The compressed stream carries the zlib header, and the base64 text is
    emitted without '=' padding. Decoding accepts padded or unpadded input.
    """

    name = "deflate"

    def encode(self, body: str) -> str:
        raw = body.encode("utf-8")
        compressed = zlib.compress(raw, zlib.Z_BEST_COMPRESSION)
        encoded = base64.urlsafe_b64encode(compressed).rstrip(b"=").decode("ascii")

        logger.debug(
            "Message body compressed",
            original_bytes=len(raw),
            encoded_length=len(encoded)
        )

        return encoded

    def decode(self, body: str) -> str:
        padded = body + "=" * (-len(body) % 4)
        try:
            compressed = base64.urlsafe_b64decode(padded)
            return zlib.decompress(compressed).decode("utf-8")
        except (ValueError, zlib.error) as e:
            logger.error(
                "Failed to decode compressed message body",
                error=str(e),
                body_length=len(body)
            )
            raise


_ENCODINGS: Dict[str, BodyEncoding] = {
    PlainBodyEncoding.name: PlainBodyEncoding(),
    DeflateBodyEncoding.name: DeflateBodyEncoding(),
}


def get_body_encoding(encoding: Union[str, BodyEncoding]) -> BodyEncoding:
    """
    Resolve a body encoding.

    Args:
        encoding: Encoding instance, or its name ("deflate" or "plain")

    Returns:
        The matching BodyEncoding

    Raises:
        InvalidArgumentError: If the name is not a known encoding
    """
    if isinstance(encoding, BodyEncoding):
        return encoding
    try:
        return _ENCODINGS[str(encoding).lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown body encoding {encoding!r}, expected one of: {', '.join(_ENCODINGS)}"
        ) from None
