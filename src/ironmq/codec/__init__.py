"""
Package: codec
Description: Wire encoding for the IronMQ client.

- json_codec: JSON request/response bodies
- body: message body encodings (plain, deflate)
"""

from .body import (
    BodyEncoding,
    DeflateBodyEncoding,
    PlainBodyEncoding,
    get_body_encoding,
)

__all__ = [
    "BodyEncoding",
    "DeflateBodyEncoding",
    "PlainBodyEncoding",
    "get_body_encoding",
]
