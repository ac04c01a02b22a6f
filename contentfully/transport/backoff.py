"""Rate-limit retry strategies for the transport client.

Strategies answer ``decide(attempt, suggested_wait)`` after every
rate-limited response. ``create_rate_limit_retrying`` plugs a strategy into a
Tenacity ``Retrying`` as its stop and wait, so the decision stays testable
without any networking.
"""

import logging
import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from tenacity import RetryCallState, Retrying, before_sleep_log, retry_if_exception_type
from tenacity.stop import stop_base
from tenacity.wait import wait_base

logger = logging.getLogger(__name__)

DEFAULT_MIN_TIMEOUT = 1.0
DEFAULT_MAX_TIMEOUT = 3.0
DEFAULT_BACKOFF_MULTIPLIER = 0.1
DEFAULT_MAX_ATTEMPTS = 10


@dataclass(frozen=True)
class RetryDecision:
    """Outcome of a rate-limit decision: retry after ``delay`` seconds, or abort."""

    should_retry: bool
    delay: float = 0.0

    @classmethod
    def retry(cls, delay: float = 0.0) -> 'RetryDecision':
        return cls(True, max(0.0, delay))

    @classmethod
    def abort(cls) -> 'RetryDecision':
        return cls(False)


class RateLimitStrategy(ABC):
    """Decides whether a rate-limited request is retried."""

    @abstractmethod
    def decide(self, attempt: int, suggested_wait: float) -> RetryDecision:
        """Decide how to react to a rate-limited attempt.

        Args:
            attempt: 1-based number of the attempt that was rate limited.
            suggested_wait: Seconds the API suggested waiting.
        """


class FixedDelayStrategy(RateLimitStrategy):
    """Waits for the server's suggested time, up to ``max_attempts`` attempts."""

    def __init__(self, max_attempts: int = 3) -> None:
        if max_attempts < 0:
            raise ValueError('Attempts must be a non-negative integer.')
        self.max_attempts = max_attempts

    def decide(self, attempt: int, suggested_wait: float) -> RetryDecision:
        if attempt > self.max_attempts:
            return RetryDecision.abort()
        return RetryDecision.retry(suggested_wait)


class ExponentialBackoffHandler(RateLimitStrategy):
    """Exponential backoff with jitter, clamped to ``[min_timeout, max_timeout]``.

    The delay for an attempt is ``min_timeout``, plus
    ``2 ** (attempt - 2) * backoff_multiplier`` from the second attempt on,
    plus ``random() * backoff_multiplier`` of jitter. The server's suggested
    wait is ignored.

    Args:
        min_timeout: Minimum seconds between retries.
        max_timeout: Maximum seconds between retries.
        backoff_multiplier: Seconds multiplied against the exponential base.
        max_attempts: Attempts (including the first) before giving up.
        rng: Source of jitter in ``[0, 1)``.
    """

    def __init__(
        self,
        min_timeout: float = DEFAULT_MIN_TIMEOUT,
        max_timeout: float = DEFAULT_MAX_TIMEOUT,
        backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: Callable[[], float] = random.random,
    ) -> None:
        self.min_timeout = DEFAULT_MIN_TIMEOUT
        self.max_timeout = DEFAULT_MAX_TIMEOUT
        self.backoff_multiplier = DEFAULT_BACKOFF_MULTIPLIER
        self.max_attempts = DEFAULT_MAX_ATTEMPTS
        self._rng = rng

        self.with_timeout(min_timeout, max_timeout)
        self.with_multiplier(backoff_multiplier)
        self.fail_after(max_attempts)

    # ── Builder Methods ──────────────────────────────────────────────────

    def with_timeout(self, minimum: float, maximum: float) -> 'ExponentialBackoffHandler':
        if minimum < 0:
            raise ValueError('Minimum timeout must be a non-negative number.')
        if minimum > maximum:
            raise ValueError('Maximum timeout cannot be less than minimum.')
        self.min_timeout = minimum
        self.max_timeout = maximum
        return self

    def with_multiplier(self, multiplier: float) -> 'ExponentialBackoffHandler':
        if multiplier < 0:
            raise ValueError('Multiplier must be a non-negative number.')
        self.backoff_multiplier = multiplier
        return self

    def fail_after(self, attempts: int) -> 'ExponentialBackoffHandler':
        if not isinstance(attempts, int) or isinstance(attempts, bool) or attempts < 0:
            raise ValueError('Attempts must be a non-negative integer.')
        self.max_attempts = attempts
        return self

    # ── Strategy ─────────────────────────────────────────────────────────

    def next_timeout(self, attempt: int) -> float:
        """Compute the backoff delay for ``attempt`` (no attempt limit applied)."""
        timeout = self.min_timeout
        if attempt > 1:
            timeout += 2 ** (attempt - 2) * self.backoff_multiplier
        timeout += self._rng() * self.backoff_multiplier
        return min(timeout, self.max_timeout)

    def decide(self, attempt: int, suggested_wait: float) -> RetryDecision:
        if attempt > self.max_attempts:
            return RetryDecision.abort()
        return RetryDecision.retry(self.next_timeout(attempt))


# ── Tenacity Adapters ────────────────────────────────────────────────────

def _decide(strategy: RateLimitStrategy, retry_state: RetryCallState) -> RetryDecision:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    return strategy.decide(retry_state.attempt_number, getattr(error, 'wait_time', 0.0))


class _StrategyStop(stop_base):
    """Stops once the strategy declines to retry the failed attempt."""

    def __init__(self, strategy: RateLimitStrategy) -> None:
        self._strategy = strategy

    def __call__(self, retry_state: RetryCallState) -> bool:
        return not _decide(self._strategy, retry_state).should_retry


class _StrategyWait(wait_base):
    """Waits for the delay the strategy chose for the failed attempt."""

    def __init__(self, strategy: RateLimitStrategy) -> None:
        self._strategy = strategy

    def __call__(self, retry_state: RetryCallState) -> float:
        return _decide(self._strategy, retry_state).delay


def create_rate_limit_retrying(
    strategy: RateLimitStrategy,
    retry_on: type[BaseException] | tuple[type[BaseException], ...],
    sleep: Callable[[float], None] = time.sleep,
) -> Retrying:
    """Create a Tenacity retry policy driven by a rate-limit strategy.

    Only ``retry_on`` exceptions are retried; anything else propagates from
    the first attempt. The final rate-limit error is re-raised unwrapped.

    Args:
        strategy: Decides, per failed attempt, whether and how long to wait.
        retry_on: Exception type(s) carrying a ``wait_time`` suggestion.
        sleep: Blocking sleep used between attempts.

    Example:
        >>> retrying = create_rate_limit_retrying(FixedDelayStrategy(), RateLimitError)
        >>> payload = retrying(fetch, url)
    """
    return Retrying(
        retry=retry_if_exception_type(retry_on),
        stop=_StrategyStop(strategy),
        wait=_StrategyWait(strategy),
        sleep=sleep,
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
