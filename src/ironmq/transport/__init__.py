"""
Package: transport
Description: Request execution for the IronMQ client.

Provides the authenticated HTTP transport and the 503 retry policy.
"""

from .http import HTTPTransport
from .retry import InterruptibleSleep, build_retrying, wait_random_backoff

__all__ = [
    "HTTPTransport",
    "InterruptibleSleep",
    "build_retrying",
    "wait_random_backoff",
]
