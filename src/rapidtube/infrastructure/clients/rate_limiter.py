# src/rapidtube/infrastructure/clients/rate_limiter.py
"""
Rate Limiting for API Clients
Implements token bucket algorithm for steady request admission.

Features:
- Thread-safe rate limiting
- Steady admission of `count` permits per `per` seconds
- Configurable burst capacity (default: no burst)
- Decorator pattern for easy integration
"""

import time
import logging
import threading
from typing import Callable, Optional, Any
from functools import wraps
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


# ============================================================================
# Token Bucket Algorithm Implementation
# ============================================================================


@dataclass
class TokenBucket:
    """
    Token bucket for rate limiting

    Attributes:
        capacity: Maximum tokens (burst capacity)
        refill_rate: Tokens added per second
        tokens: Current available tokens
        last_refill: Last refill timestamp (monotonic clock)
    """

    capacity: float
    refill_rate: float
    tokens: float
    last_refill: float
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _refill(self) -> None:
        """Refill tokens based on elapsed time"""
        now = time.monotonic()
        elapsed = now - self.last_refill

        new_tokens = elapsed * self.refill_rate
        self.tokens = min(self.capacity, self.tokens + new_tokens)
        self.last_refill = now

    def consume(self, tokens: float = 1.0) -> bool:
        """
        Try to consume tokens

        Args:
            tokens: Number of tokens to consume

        Returns:
            True if tokens consumed, False if insufficient
        """
        with self.lock:
            self._refill()

            if self.tokens >= tokens:
                self.tokens -= tokens
                return True

            return False

    def wait_for_tokens(
        self, tokens: float = 1.0, timeout: Optional[float] = None
    ) -> bool:
        """
        Wait until tokens become available

        Args:
            tokens: Number of tokens needed
            timeout: Maximum wait time in seconds (None = infinite)

        Returns:
            True if tokens obtained, False if timeout
        """
        start_time = time.monotonic()

        while True:
            if self.consume(tokens):
                return True

            waited = time.monotonic() - start_time
            if timeout is not None and waited >= timeout:
                return False

            # Sleep outside the lock so other callers can refill/consume
            with self.lock:
                self._refill()
                deficit = tokens - self.tokens
            sleep_time = deficit / self.refill_rate if deficit > 0 else 0.001
            if timeout is not None:
                sleep_time = min(sleep_time, timeout - waited)
            time.sleep(max(min(sleep_time, 1.0), 0.0))


# ============================================================================
# Rate Limiter Class
# ============================================================================


class RateLimiter:
    """
    Token bucket rate limiter admitting `count` calls every `per` seconds

    With the default burst capacity of 1 calls are spaced evenly, so N + 1
    calls against an N/second limiter span roughly one second.
    """

    def __init__(self, count: float, per: float = 1.0, burst_capacity: int = 1):
        """
        Initialize rate limiter

        Args:
            count: Permits granted per interval
            per: Interval length in seconds
            burst_capacity: Permits that may be taken back-to-back
        """
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        if per <= 0:
            raise ValueError(f"per must be positive, got {per}")
        if burst_capacity < 1:
            raise ValueError(f"burst_capacity must be >= 1, got {burst_capacity}")

        self.count = count
        self.per = per
        self.calls_per_second = count / per
        self.burst_capacity = burst_capacity

        self.bucket = TokenBucket(
            capacity=float(burst_capacity),
            refill_rate=self.calls_per_second,
            tokens=float(burst_capacity),
            last_refill=time.monotonic(),
        )

        logger.info(
            f"🕐 Rate limiter initialized: {count} calls per {per}s, "
            f"burst={burst_capacity}"
        )

    def take(self) -> None:
        """Block until a permit is granted (no timeout)"""
        self.bucket.wait_for_tokens(1.0, None)

    def acquire(self, timeout: Optional[float] = None) -> bool:
        """
        Acquire permission to make a call

        Args:
            timeout: Maximum wait time (None = block indefinitely)

        Returns:
            True if permission acquired, False if timeout
        """
        return self.bucket.wait_for_tokens(1.0, timeout)

    def __repr__(self) -> str:
        return (
            f"RateLimiter(count={self.count}, per={self.per}, "
            f"burst_capacity={self.burst_capacity})"
        )


# ============================================================================
# Decorator
# ============================================================================


def rate_limit(
    count: float,
    per: float = 1.0,
    burst_capacity: int = 1,
    timeout: Optional[float] = None,
) -> Callable:
    """
    Rate limiting decorator

    Args:
        count: Permits granted per interval
        per: Interval length in seconds
        burst_capacity: Burst capacity (default: 1)
        timeout: Maximum wait time before raising TimeoutError (None = block)

    Returns:
        Decorated function with rate limiting

    Example:
        ```python
        @rate_limit(count=10)
        def api_call():
            ...
        ```
    """
    limiter = RateLimiter(count, per, burst_capacity)

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            if not limiter.acquire(timeout):
                raise TimeoutError(
                    f"Rate limit timeout after {timeout}s "
                    f"(limit: {count} calls per {per}s)"
                )

            return func(*args, **kwargs)

        wrapper.limiter = limiter
        return wrapper

    return decorator
