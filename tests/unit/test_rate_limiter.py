# tests/unit/test_rate_limiter.py
"""
Unit Tests for the token bucket rate limiter
"""

import threading
import time

import pytest

from rapidtube.domain.interfaces import RateLimiterProtocol
from rapidtube.infrastructure.clients.rate_limiter import (
    RateLimiter,
    TokenBucket,
    rate_limit,
)


# ============================================================================
# Token Bucket Tests
# ============================================================================


class TestTokenBucket:
    """Test token bucket algorithm"""

    def test_token_bucket_initialization(self):
        """Test token bucket initializes with full capacity"""
        bucket = TokenBucket(
            capacity=10.0, refill_rate=5.0, tokens=10.0, last_refill=time.monotonic()
        )

        assert bucket.capacity == 10.0
        assert bucket.tokens == 10.0
        assert bucket.refill_rate == 5.0

    def test_token_consumption(self):
        """Test consuming tokens"""
        bucket = TokenBucket(
            capacity=10.0, refill_rate=0.001, tokens=10.0, last_refill=time.monotonic()
        )

        assert bucket.consume(3.0) is True
        assert bucket.tokens == pytest.approx(7.0, abs=0.01)

        # Should fail when insufficient
        assert bucket.consume(8.0) is False
        assert bucket.tokens == pytest.approx(7.0, abs=0.01)

    def test_token_refill(self):
        """Test tokens refill over time, capped at capacity"""
        bucket = TokenBucket(
            capacity=10.0, refill_rate=5.0, tokens=0.0, last_refill=time.monotonic()
        )

        time.sleep(0.5)  # ~2.5 tokens

        bucket._refill()
        assert 2.0 <= bucket.tokens <= 10.0

        bucket.last_refill -= 60
        bucket._refill()
        assert bucket.tokens == 10.0

    def test_wait_for_tokens_times_out(self):
        """Test bounded wait gives up when tokens do not arrive in time"""
        bucket = TokenBucket(
            capacity=1.0, refill_rate=0.1, tokens=0.0, last_refill=time.monotonic()
        )

        start = time.monotonic()
        assert bucket.wait_for_tokens(1.0, timeout=0.2) is False
        elapsed = time.monotonic() - start

        assert 0.15 <= elapsed < 1.0


# ============================================================================
# Rate Limiter Tests
# ============================================================================


class TestRateLimiter:
    """Test rate limiter functionality"""

    def test_rate_limiter_initialization(self):
        """Test rate limiter initializes correctly"""
        limiter = RateLimiter(10)

        assert limiter.count == 10
        assert limiter.per == 1.0
        assert limiter.calls_per_second == 10
        assert limiter.burst_capacity == 1
        assert limiter.bucket.capacity == 1.0

    def test_rate_over_custom_interval(self):
        """Test count/per is converted to a per-second rate"""
        limiter = RateLimiter(30, per=60.0)

        assert limiter.calls_per_second == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"count": 0},
            {"count": -1},
            {"count": 1, "per": 0},
            {"count": 1, "burst_capacity": 0},
        ],
    )
    def test_invalid_arguments(self, kwargs):
        """Test non-positive rates are rejected"""
        with pytest.raises(ValueError):
            RateLimiter(**kwargs)

    def test_satisfies_protocol(self):
        """Test the limiter can be passed wherever a take() limiter is expected"""
        assert isinstance(RateLimiter(1), RateLimiterProtocol)

    def test_first_take_is_immediate(self):
        """Test a fresh limiter admits the first call without waiting"""
        limiter = RateLimiter(1)

        start = time.monotonic()
        limiter.take()

        assert time.monotonic() - start < 0.1

    def test_n_plus_one_calls_span_one_interval(self):
        """Test N + 1 takes on an N/second limiter take about one second"""
        limiter = RateLimiter(5)

        start = time.monotonic()
        for _ in range(6):
            limiter.take()
        elapsed = time.monotonic() - start

        assert 0.9 <= elapsed < 2.0

    def test_burst_capacity(self):
        """Test burst permits are granted back-to-back"""
        limiter = RateLimiter(1, burst_capacity=3)

        start = time.monotonic()
        for _ in range(3):
            limiter.take()

        assert time.monotonic() - start < 0.1

    def test_acquire_timeout(self):
        """Test bounded acquire returns False instead of blocking"""
        limiter = RateLimiter(1, per=10.0)
        assert limiter.acquire(timeout=0.1) is True

        start = time.monotonic()
        assert limiter.acquire(timeout=0.1) is False
        assert time.monotonic() - start >= 0.05

    def test_concurrent_takes_are_spaced(self):
        """Test threads sharing one limiter are admitted at the steady rate"""
        limiter = RateLimiter(10)
        admitted = []
        lock = threading.Lock()

        def worker():
            limiter.take()
            with lock:
                admitted.append(time.monotonic())

        start = time.monotonic()
        threads = [threading.Thread(target=worker) for _ in range(6)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(admitted) == 6
        # 6 permits at 10/s with no burst: the last is ~0.5s after the first
        assert max(admitted) - start >= 0.4


class TestRateLimitDecorator:
    """Test rate limit decorator"""

    def test_rate_limit_decorator(self):
        """Test decorated calls are spaced by the limiter"""
        call_times = []

        @rate_limit(count=5)
        def test_function():
            call_times.append(time.monotonic())
            return "success"

        for _ in range(6):
            assert test_function() == "success"

        assert call_times[-1] - call_times[0] >= 0.9
        assert test_function.limiter.calls_per_second == 5

    def test_rate_limit_decorator_timeout(self):
        """Test decorator raises TimeoutError when the wait is bounded"""

        @rate_limit(count=1, per=10.0, timeout=0.05)
        def test_function():
            return "success"

        assert test_function() == "success"
        with pytest.raises(TimeoutError, match="Rate limit timeout"):
            test_function()
