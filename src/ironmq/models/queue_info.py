"""
Module: queue_info.py
Description: Queue metadata snapshot.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class QueueInfo(BaseModel):
    """Read-only snapshot returned by GET queues/{name}."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    count: int = 0
    size: int = 0
    id: Optional[str] = None
    name: Optional[str] = None
