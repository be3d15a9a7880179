# src/rapidtube/infrastructure/clients/options.py
"""
Functional construction options shared by the RapidAPI clients.

Each option is a callable applied to a mutable ClientOptions builder and may
raise ConfigError. Options are applied strictly in the order given; the first
failure propagates unchanged and the partially applied builder is discarded.

Example:
    ```python
    client = TranscriptClient(
        api_key,
        with_host("my-proxy.example.com"),
        with_rate_limit(RateLimiter(5)),
    )
    ```
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import httpx

from rapidtube.domain.interfaces import RateLimiterProtocol
from rapidtube.domain.exceptions import ConfigError
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


# ============================================================================
# Configuration Containers
# ============================================================================


@dataclass
class ClientOptions:
    """Mutable builder the options are applied to"""

    host: str = ""
    rate_limiter: Optional[RateLimiterProtocol] = None
    http_client: Optional[httpx.Client] = None
    timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ClientConfig:
    """
    Resolved, immutable client configuration

    Attributes:
        api_key: Value sent in the X-RapidAPI-Key header
        host: Service host, also sent in the X-RapidAPI-Host header
        rate_limiter: Limiter taken once before every request
        http_client: Transport used for every request
        owns_http_client: True when the transport was created here and must
            be closed by the API client
    """

    api_key: str
    host: str
    rate_limiter: RateLimiterProtocol
    http_client: httpx.Client
    owns_http_client: bool = False


Option = Callable[[ClientOptions], None]


# ============================================================================
# Options
# ============================================================================


def with_host(host: str) -> Option:
    """Override the service host (bare host name, optionally with port)"""

    def apply(options: ClientOptions) -> None:
        if not isinstance(host, str):
            raise ConfigError(f"invalid host: expected str, got {type(host).__name__}")

        if host:
            if "://" in host:
                raise ConfigError(f"invalid host: {host!r} must not include a scheme")
            try:
                url = httpx.URL(f"https://{host}")
            except httpx.InvalidURL as e:
                raise ConfigError(f"invalid host: {e}") from e
            if not url.host:
                raise ConfigError(f"invalid host: {host!r}")

        options.host = host

    return apply


def with_rate_limit(rate_limiter: RateLimiterProtocol) -> Option:
    """Use the given limiter instead of the client's default rate"""

    def apply(options: ClientOptions) -> None:
        if not isinstance(rate_limiter, RateLimiterProtocol):
            raise ConfigError(
                f"invalid rate limiter: {type(rate_limiter).__name__} has no take()"
            )
        options.rate_limiter = rate_limiter

    return apply


def with_http_client(http_client: httpx.Client) -> Option:
    """Use a caller-owned transport; the API client never closes it"""

    def apply(options: ClientOptions) -> None:
        if not isinstance(http_client, httpx.Client):
            raise ConfigError(
                f"invalid http client: expected httpx.Client, "
                f"got {type(http_client).__name__}"
            )
        options.http_client = http_client

    return apply


def with_timeout(seconds: float) -> Option:
    """Request timeout for the transport the client creates itself"""

    def apply(options: ClientOptions) -> None:
        if seconds <= 0:
            raise ConfigError(f"invalid timeout: {seconds}")
        options.timeout = seconds

    return apply


# ============================================================================
# Builder
# ============================================================================


def build_config(
    api_key: str,
    options: Iterable[Option],
    default_host: str,
    default_requests_per_second: float,
) -> ClientConfig:
    """
    Fold options over a fresh builder and fill in defaults

    Args:
        api_key: RapidAPI key
        options: Option callables, applied in order
        default_host: Host used when no option sets one
        default_requests_per_second: Rate used when no limiter is given

    Returns:
        Frozen ClientConfig

    Raises:
        ConfigError: From the first option that rejects its input
    """
    builder = ClientOptions()
    for option in options:
        option(builder)

    host = builder.host or default_host
    rate_limiter = builder.rate_limiter
    if rate_limiter is None:
        rate_limiter = RateLimiter(default_requests_per_second)

    owns_http_client = builder.http_client is None
    http_client = builder.http_client
    if http_client is None:
        http_client = httpx.Client(timeout=builder.timeout, follow_redirects=True)

    return ClientConfig(
        api_key=api_key,
        host=host,
        rate_limiter=rate_limiter,
        http_client=http_client,
        owns_http_client=owns_http_client,
    )
