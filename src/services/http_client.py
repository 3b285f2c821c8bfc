"""
HTTP client for the Zonneplan API.
Adds the shared secret to every request and retries transient failures
with exponential backoff.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from src.exceptions import ConfigurationError, FetchError
from src.logging_config import get_logger


class UpstreamClient:
    """Authenticated GET client with bounded retry."""

    def __init__(
        self,
        base_url: Optional[str],
        secret: Optional[str],
        timeout: float = 10.0,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger=None,
    ):
        self.base_url = base_url
        self.secret = secret
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self._transport = transport
        self.logger = logger or get_logger(__name__)

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        GET `endpoint` and return the decoded JSON body.

        Transport errors and 5xx responses are retried; the delay starts at
        `backoff_seconds` and doubles before each further attempt.

        Raises:
            ConfigurationError: If the secret or base URL is not configured
            FetchError: On a 4xx response, an undecodable body, or when all attempts fail
        """
        if not self.secret:
            raise ConfigurationError("ZONNEPLAN_API_SECRET environment variable is not set")
        if not self.base_url:
            raise ConfigurationError("ZONNEPLAN_API_BASE_URL environment variable is not set")

        query = dict(params or {})
        query["secret"] = self.secret

        delay = self.backoff_seconds
        last_error: Optional[Exception] = None

        for attempt in range(1, self.max_attempts + 1):
            if attempt > 1:
                await asyncio.sleep(delay)
                delay *= 2

            try:
                async with httpx.AsyncClient(
                    base_url=self.base_url,
                    timeout=self.timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.get(endpoint, params=query)
                    response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if status < 500:
                    raise FetchError(f"Failed to fetch data from Zonneplan API: HTTP {status}") from e
                last_error = e
                self.logger.warning("Upstream server error", endpoint=endpoint, status=status,
                                    attempt=attempt, max_attempts=self.max_attempts)
                continue
            except httpx.TransportError as e:
                last_error = e
                self.logger.warning("Upstream transport error", endpoint=endpoint, error=str(e),
                                    attempt=attempt, max_attempts=self.max_attempts)
                continue

            try:
                return response.json()
            except ValueError as e:
                raise FetchError(f"Invalid JSON received from Zonneplan API: {e}") from e

        self.logger.error("Upstream request failed", endpoint=endpoint, attempts=self.max_attempts,
                          error=str(last_error))
        raise FetchError(
            f"Failed to fetch data from Zonneplan API after {self.max_attempts} attempts: {last_error}"
        ) from last_error
