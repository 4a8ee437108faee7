"""
Module: client.py
Description: Entry point of the IronMQ client.

A Client holds the project credentials and cloud target for its whole
lifetime and hands out Queue objects bound to it.
"""

import random
import time
from typing import Any, Callable, Mapping, Optional, Union

from ironmq.codec.body import BodyEncoding
from ironmq.config.settings import Cloud, Settings, get_settings
from ironmq.errors import InvalidArgumentError
from ironmq.queue import Queue
from ironmq.transport.http import API_VERSION, USER_AGENT, HTTPTransport
from ironmq.transport.retry import MAX_RETRIES
from ironmq.utils.logger import get_logger

logger = get_logger(__name__)


class Client:
    """
    Access point to the IronMQ service for one project.

    The network is not accessed during construction, so this succeeds
    even if the credentials are invalid.

    Example:
        >>> client = Client("my-project", "my-token")
        >>> queue = client.queue("jobs")
        >>> message_id = queue.push("hello")
    """

    def __init__(
        self,
        project_id: str,
        token: str,
        cloud: Optional[Cloud] = None,
        body_encoding: Union[str, BodyEncoding] = "deflate",
        api_version: str = API_VERSION,
        user_agent: str = USER_AGENT,
        timeout: float = 60.0,
        max_retries: int = MAX_RETRIES,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize client.

        Args:
            project_id: IronMQ project identifier
            token: OAuth token
            cloud: Target cloud (defaults to Cloud.IRON_AWS_US_EAST)
            body_encoding: Default body encoding for queues from this client
            api_version: API version path segment
            user_agent: User-Agent header value
            timeout: Socket deadline in seconds for each exchange
            max_retries: Retries allowed on HTTP 503
            rng: Random source for backoff jitter
            sleep: Callable used for backoff waits
        """
        self.project_id = project_id
        self.body_encoding = body_encoding
        self.transport = HTTPTransport(
            project_id,
            token,
            cloud=cloud,
            api_version=api_version,
            user_agent=user_agent,
            timeout=timeout,
            max_retries=max_retries,
            rng=rng,
            sleep=sleep
        )

        logger.debug(
            "IronMQ client initialized",
            project_id=project_id,
            host=self.transport.cloud.host
        )

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None, **kwargs) -> "Client":
        """
        Build a client from IRON_* settings.

        Args:
            config: Settings to use (defaults to the environment)
            **kwargs: Overrides for rng, sleep or other constructor arguments

        Raises:
            InvalidArgumentError: If project_id or token is not configured
        """
        config = config or get_settings()
        if not config.project_id or not config.token:
            raise InvalidArgumentError(
                "IRON_PROJECT_ID and IRON_TOKEN must be configured"
            )

        options = dict(
            cloud=config.cloud,
            body_encoding=config.body_encoding,
            api_version=config.api_version,
            user_agent=config.user_agent,
            timeout=config.request_timeout,
            max_retries=config.max_retries,
        )
        options.update(kwargs)
        return cls(config.project_id, config.token, **options)

    @property
    def cloud(self) -> Cloud:
        return self.transport.cloud

    def queue(self, name: str, encoding: Optional[Union[str, BodyEncoding]] = None) -> Queue:
        """
        Return a Queue bound to this client. The network is not accessed.

        Args:
            name: Queue name
            encoding: Body encoding for this queue, overriding the client default
        """
        return Queue(self, name, encoding=encoding if encoding is not None else self.body_encoding)

    def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Execute a raw API call relative to the project path."""
        return self.transport.execute(method, endpoint, body=body, params=params)
