# src/rapidtube/infrastructure/clients/base.py
"""
Shared request cycle for RapidAPI-hosted services.

One call = take a rate-limit token, issue a GET with the RapidAPI headers,
require HTTP 200, decode the body into a pydantic model. No retries, no
caching: every failure is raised to the caller.
"""

import logging
from typing import Any, Dict, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from rapidtube.domain.exceptions import DecodeError, ExecutionError, HTTPStatusError
from .options import ClientConfig, Option, build_config

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

API_KEY_HEADER = "X-RapidAPI-Key"
API_HOST_HEADER = "X-RapidAPI-Host"


class BaseRapidAPIClient:
    """
    Base class for RapidAPI clients

    Subclasses set DEFAULT_HOST and DEFAULT_REQUESTS_PER_SECOND and build
    their endpoints on top of _request().
    """

    DEFAULT_HOST: str = ""
    DEFAULT_REQUESTS_PER_SECOND: float = 1.0

    def __init__(self, api_key: str, *options: Option):
        """
        Initialize client

        Args:
            api_key: RapidAPI key sent with every request
            *options: Construction options (with_host, with_rate_limit, ...)

        Raises:
            ConfigError: First option that rejects its input
        """
        self.config: ClientConfig = build_config(
            api_key,
            options,
            default_host=self.DEFAULT_HOST,
            default_requests_per_second=self.DEFAULT_REQUESTS_PER_SECOND,
        )

        logger.info(f"✅ {type(self).__name__} initialized for {self.config.host}")

    @property
    def host(self) -> str:
        return self.config.host

    def _headers(self) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self.config.api_key,
            API_HOST_HEADER: self.config.host,
        }

    def _request(
        self, path: str, params: Dict[str, Any], response_model: Type[ModelT]
    ) -> ModelT:
        """
        Make a single rate-limited GET request

        Args:
            path: Endpoint path, starting with "/"
            params: Query parameters, encoded in the given order
            response_model: Model the JSON body is decoded into

        Returns:
            Decoded response model

        Raises:
            ExecutionError: Transport failure
            HTTPStatusError: Any status other than 200
            DecodeError: Body does not match response_model
        """
        self.config.rate_limiter.take()

        url = f"https://{self.config.host}{path}"
        logger.debug(f"📡 GET {url} params={params}")

        try:
            response = self.config.http_client.get(
                url, params=params, headers=self._headers()
            )
        except httpx.RequestError as e:
            logger.error(f"❌ Request to {url} failed: {e}")
            raise ExecutionError(f"failed to execute request: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.error(f"❌ API error {response.status_code}: {response.text}")
            raise HTTPStatusError(response.status_code, response.text)

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"❌ Unexpected response body from {url}: {e}")
            raise DecodeError(
                f"failed to unmarshal response body: {e}", body=response.text
            ) from e

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def close(self) -> None:
        """Close the HTTP transport if this client created it"""
        if self.config.owns_http_client:
            self.config.http_client.close()
            logger.info(f"🔌 {type(self).__name__} closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
