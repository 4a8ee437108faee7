"""
Module: test_retry.py
Description: Unit tests for the 503 backoff policy building blocks.
"""

import pytest
from tenacity import RetryCallState, Retrying

from ironmq.errors import HTTPError
from ironmq.transport.retry import (
    InterruptibleSleep,
    build_retrying,
    is_retryable,
    wait_random_backoff,
)


class FixedRandom:
    """Random source that always returns the same fraction."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _state_after(attempts):
    state = RetryCallState(Retrying(), fn=None, args=(), kwargs={})
    state.attempt_number = attempts
    return state


class TestWaitRandomBackoff:
    """Test cases for the jittered exponential wait."""

    @pytest.mark.parametrize("retry_number,bound", [(1, 0.4), (2, 1.6), (3, 6.4), (4, 25.6), (5, 102.4)])
    def test_upper_bound_is_four_to_the_n_times_100ms(self, retry_number, bound):
        """Test bound before retry n is 4**n * 100 milliseconds."""
        assert wait_random_backoff().upper_bound(retry_number) == pytest.approx(bound)

    def test_wait_scales_random_fraction(self):
        """Test the wait is the random fraction times the bound."""
        wait = wait_random_backoff(FixedRandom(0.5))
        assert wait(_state_after(1)) == pytest.approx(0.2)
        assert wait(_state_after(2)) == pytest.approx(0.8)

    def test_wait_bounds_are_half_open(self):
        """Test the wait is never negative and stays below the bound."""
        assert wait_random_backoff(FixedRandom(0.0))(_state_after(3)) == 0.0
        assert wait_random_backoff(FixedRandom(0.999999))(_state_after(3)) < 6.4


class TestRetryPredicate:
    """Test cases for choosing which failures are retried."""

    def test_only_503_is_retryable(self):
        assert is_retryable(HTTPError(503, "busy")) is True
        assert is_retryable(HTTPError(500, "boom")) is False
        assert is_retryable(HTTPError(404)) is False
        assert is_retryable(ValueError("nope")) is False


class TestBuildRetrying:
    """Test cases for the assembled retry controller."""

    def test_reraises_last_http_error(self):
        """Test the final HTTPError is raised, not a RetryError."""
        calls = []

        def always_busy():
            calls.append(1)
            raise HTTPError(503, "busy")

        retrying = build_retrying(max_retries=2, rng=FixedRandom(0.0), sleep=lambda s: None)

        with pytest.raises(HTTPError):
            retrying(always_busy)

        assert len(calls) == 3

    def test_other_exceptions_pass_through(self):
        """Test non-retryable exceptions propagate after one call."""
        calls = []

        def broken():
            calls.append(1)
            raise HTTPError(400, "bad")

        retrying = build_retrying(rng=FixedRandom(0.0), sleep=lambda s: None)

        with pytest.raises(HTTPError):
            retrying(broken)

        assert len(calls) == 1


class TestInterruptibleSleep:
    """Test cases for interrupt-absorbing sleep."""

    def test_records_interrupt_and_reraises_later(self):
        def interrupted(seconds):
            raise KeyboardInterrupt

        sleeper = InterruptibleSleep(interrupted)
        sleeper(1.0)

        assert sleeper.interrupted is True
        with pytest.raises(KeyboardInterrupt):
            sleeper.reraise_if_interrupted()

    def test_no_interrupt_is_silent(self):
        slept = []
        sleeper = InterruptibleSleep(slept.append)
        sleeper(0.25)

        assert slept == [0.25]
        sleeper.reraise_if_interrupted()
