"""
Module: transport/retry.py
Description: Retry policy for requests rejected with HTTP 503.

The service answers 503 when it is shedding load. Those requests are
retried with randomized exponential backoff: before retry n the caller
sleeps a uniform random time in [0, 4**n * 100) milliseconds. Every other
failure is raised immediately.
"""

import random
import time
from typing import Callable, Optional

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
)
from tenacity.wait import wait_base

from ironmq.errors import HTTPError
from ironmq.utils.logger import get_logger

logger = get_logger(__name__)

MAX_RETRIES = 5
BACKOFF_BASE_SECONDS = 0.1
BACKOFF_EXP_BASE = 4


class wait_random_backoff(wait_base):
    """
    Full-jitter exponential wait drawn from an injected random source.

    tenacity's attempt_number is 1 when the first retry is scheduled, so
    the bound before retry n is base * exp_base**n.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        base: float = BACKOFF_BASE_SECONDS,
        exp_base: int = BACKOFF_EXP_BASE
    ):
        self.rng = rng if rng is not None else random.Random()
        self.base = base
        self.exp_base = exp_base

    def upper_bound(self, retry_number: int) -> float:
        """Exclusive upper bound in seconds of the sleep before retry_number."""
        return self.base * self.exp_base ** retry_number

    def __call__(self, retry_state: RetryCallState) -> float:
        # random() is in [0.0, 1.0), keeping the bound exclusive
        return self.rng.random() * self.upper_bound(retry_state.attempt_number)


def is_retryable(exc: BaseException) -> bool:
    """Only HTTP 503 responses are retried."""
    return isinstance(exc, HTTPError) and exc.retryable


class InterruptibleSleep:
    """
    Backoff sleep that absorbs KeyboardInterrupt.

    An interrupt cuts the current wait short and is remembered. The retry
    loop carries on, and reraise_if_interrupted() surfaces the interrupt
    once the operation has finished.
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep):
        self._sleep = sleep
        self.interrupted = False

    def __call__(self, seconds: float) -> None:
        try:
            self._sleep(seconds)
        except KeyboardInterrupt:
            self.interrupted = True
            logger.warning("Backoff sleep interrupted", planned_seconds=seconds)

    def reraise_if_interrupted(self) -> None:
        if self.interrupted:
            raise KeyboardInterrupt


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Service overloaded, retrying request",
        status_code=getattr(exc, "status_code", None),
        retry=retry_state.attempt_number,
        delay_seconds=round(retry_state.next_action.sleep, 3) if retry_state.next_action else None
    )


def build_retrying(
    max_retries: int = MAX_RETRIES,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep
) -> Retrying:
    """
    Build the retry controller for one logical request.

    Args:
        max_retries: Retries allowed after the first attempt
        rng: Random source for backoff jitter
        sleep: Callable used to wait between attempts

    Returns:
        Configured tenacity Retrying instance. The last HTTPError is
        re-raised once retries are exhausted.
    """
    return Retrying(
        stop=stop_after_attempt(max_retries + 1),
        wait=wait_random_backoff(rng),
        retry=retry_if_exception(is_retryable),
        before_sleep=_log_retry,
        sleep=sleep,
        reraise=True
    )
