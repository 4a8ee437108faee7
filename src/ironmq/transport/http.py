"""
Module: transport/http.py
Description: Authenticated HTTP request execution against the IronMQ API.

Turns a logical operation into one HTTP exchange per attempt, classifies
the response and retries transparently on HTTP 503.

Key Components:
- HTTPTransport: Builds URLs and headers, sends requests, raises HTTPError
  on any status other than 200
- Retry loop from transport.retry (tenacity)

Dependencies: httpx, tenacity, logger
"""

import random
import time
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

from ironmq.config.settings import Cloud
from ironmq.errors import EMPTY_OR_NON_JSON, HTTPError, InvalidArgumentError
from ironmq.transport.retry import MAX_RETRIES, InterruptibleSleep, build_retrying
from ironmq.utils.logger import get_logger

logger = get_logger(__name__)

API_VERSION = "1"
USER_AGENT = "IronMQ Python Client"
JSON_TYPE = "application/json"


class HTTPTransport:
    """
    HTTP executor for IronMQ API calls.

    Every call opens its own httpx.Client, which is closed on every exit
    path. Instances hold only immutable configuration and may be shared
    between threads.

    Attributes:
        cloud: Target scheme, host and port
        base_path: "/{api_version}/projects/{project_id}/"
        max_retries: Retries allowed on HTTP 503

    Example:
        >>> transport = HTTPTransport("my-project", "my-token")
        >>> transport.execute("GET", "queues/jobs")
        '{"size": 3, ...}'
    """

    def __init__(
        self,
        project_id: str,
        token: str,
        cloud: Optional[Cloud] = None,
        api_version: str = API_VERSION,
        user_agent: str = USER_AGENT,
        timeout: float = 60.0,
        max_retries: int = MAX_RETRIES,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the transport. The network is not accessed.

        Args:
            project_id: IronMQ project identifier
            token: OAuth token
            cloud: Target cloud (defaults to Cloud.IRON_AWS_US_EAST)
            api_version: API version path segment
            user_agent: User-Agent header value
            timeout: Socket deadline in seconds for each exchange
            max_retries: Retries allowed on HTTP 503
            rng: Random source for backoff jitter
            sleep: Callable used for backoff waits

        Raises:
            InvalidArgumentError: If project_id or token is empty
        """
        if not project_id or not isinstance(project_id, str):
            raise InvalidArgumentError("project_id must be a non-empty string")
        if not token or not isinstance(token, str):
            raise InvalidArgumentError("token must be a non-empty string")

        self.cloud = cloud or Cloud.IRON_AWS_US_EAST
        self.base_path = f"/{api_version}/projects/{project_id}/"
        self.user_agent = user_agent
        self.max_retries = max_retries
        self.timeout = httpx.Timeout(timeout)
        self._oauth_header = f"OAuth {token}"
        self._rng = rng if rng is not None else random.Random()
        self._sleep = sleep

    def url(self, endpoint: str) -> str:
        """Absolute URL for an endpoint path relative to the project."""
        return (
            f"{self.cloud.scheme}://{self.cloud.host}:{self.cloud.port}"
            f"{self.base_path}{endpoint.lstrip('/')}"
        )

    def execute(
        self,
        method: str,
        endpoint: str,
        body: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Execute an API call, retrying on HTTP 503.

        Args:
            method: HTTP method
            endpoint: Path relative to /{api_version}/projects/{project_id}/
            body: JSON request body, or None to send no body
            params: Optional query parameters

        Returns:
            Raw response body text

        Raises:
            HTTPError: If the service answered with a status other than 200
            httpx.TransportError: If the connection or a stream operation failed
            KeyboardInterrupt: If a backoff sleep was interrupted
        """
        url = self.url(endpoint)
        sleeper = InterruptibleSleep(self._sleep)
        retrying = build_retrying(self.max_retries, self._rng, sleeper)
        try:
            return retrying(self._single_request, method, url, body, params)
        finally:
            sleeper.reraise_if_interrupted()

    def _headers(self, content: Optional[bytes]) -> Dict[str, str]:
        headers = {
            "Authorization": self._oauth_header,
            "User-Agent": self.user_agent,
        }
        if content is not None:
            headers["Content-Type"] = JSON_TYPE
            headers["Content-Length"] = str(len(content))
            headers["Connection"] = "close"
        return headers

    def _single_request(
        self,
        method: str,
        url: str,
        body: Optional[str],
        params: Optional[Mapping[str, Any]]
    ) -> str:
        content = body.encode("utf-8") if body is not None else None

        logger.debug("Sending request", method=method, url=url)

        with httpx.Client(timeout=self.timeout) as client:
            try:
                response = client.request(
                    method,
                    url,
                    params=params,
                    content=content,
                    headers=self._headers(content)
                )
            except httpx.TransportError as e:
                logger.error(
                    "Request to IronMQ failed",
                    method=method,
                    url=url,
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise

        if response.status_code != 200:
            raise self._classify(method, url, response)

        logger.debug(
            "Request succeeded",
            method=method,
            url=url,
            status_code=response.status_code,
            response_time_ms=response.elapsed.total_seconds() * 1000
        )

        return response.text

    @staticmethod
    def _classify(method: str, url: str, response: httpx.Response) -> HTTPError:
        """Turn a non-200 response into an HTTPError carrying the best available message."""
        content_type = response.headers.get("content-type", "")
        media_type = content_type.split(";")[0].strip().lower()

        # Raw text is used as-is so malformed JSON can never mask the status
        if response.content and media_type == JSON_TYPE:
            message = response.text
        else:
            message = EMPTY_OR_NON_JSON

        logger.warning(
            "IronMQ returned an error status",
            method=method,
            url=url,
            status_code=response.status_code,
            response=message[:500]
        )

        return HTTPError(response.status_code, message)
