"""
Module: subscriber.py
Description: Push subscriber registration model.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

RETRIES_COUNT = 3
RETRIES_DELAY = 60
URL_KEY = "url"


class PushType(str, Enum):
    """Fan-out mode for push queues."""

    UNICAST = "unicast"
    MULTICAST = "multicast"


class Subscriber(BaseModel):
    """
    Push subscriber registration for a queue.

    Attributes:
        push_type: unicast delivers to one endpoint, multicast to all
        retries: Delivery attempts per endpoint
        retries_delay: Seconds between delivery attempts
        endpoints: Endpoint records, each holding at least a "url" key
    """

    model_config = ConfigDict(
        populate_by_name=True
    )

    push_type: PushType = PushType.UNICAST
    retries: int = Field(default=RETRIES_COUNT, ge=0)
    retries_delay: int = Field(default=RETRIES_DELAY, ge=0)
    endpoints: List[Dict[str, str]] = Field(
        ...,
        min_length=1,
        alias="subscribers",
        description="Subscriber endpoints"
    )

    @classmethod
    def for_urls(cls, urls: List[str], **kwargs) -> "Subscriber":
        """Build a subscriber with one endpoint record per URL."""
        return cls(endpoints=[{URL_KEY: url} for url in urls], **kwargs)
