# src/rapidtube/domain/exceptions.py
"""
Error taxonomy shared by the RapidAPI clients.

Every failure is terminal for the call that raised it: nothing here is
retried or recovered locally.
"""

from typing import Optional


class RapidAPIError(Exception):
    """Base class for all client errors"""


class ConfigError(RapidAPIError, ValueError):
    """Invalid construction option (e.g. malformed host, missing API key)"""


class ExecutionError(RapidAPIError):
    """Network or transport level failure while executing a request"""


class HTTPStatusError(RapidAPIError):
    """
    Remote API answered with a non-200 status

    Attributes:
        status_code: HTTP status returned by the API
        body: Raw response body, kept verbatim for diagnostics
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"http status code is not ok: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(RapidAPIError):
    """Response body is not valid JSON for the expected schema"""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body
