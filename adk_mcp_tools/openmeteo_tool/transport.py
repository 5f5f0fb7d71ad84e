"""
HTTP transport for the Open-Meteo API.

Issues a single GET per call with a fixed timeout and no retries, classifies
non-2xx responses, and parses the body as JSON.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp
from yarl import URL

from .config import REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 200


class TransportError(Exception):
    """Base class for failures talking to the provider."""


class NetworkError(TransportError):
    """Connection, TLS or timeout failure before a response was received."""


class ApiError(TransportError):
    """The provider answered with a non-2xx status."""

    def __init__(self, label: str, status: int, reason: Optional[str] = None, body: Optional[str] = None):
        self.status = status
        self.reason = reason
        self.body = body
        message = f"{label} error: {status} {reason or ''}".rstrip()
        if body is not None:
            message += f". Body: {body}"
        super().__init__(message)


class ParseError(TransportError):
    """The provider answered 2xx but the body was not valid JSON."""

    def __init__(self, message: str, snippet: str = ""):
        self.snippet = snippet
        super().__init__(message)


class OpenMeteoClient:
    """
    Thin async client around aiohttp.

    The client holds only immutable configuration; each fetch opens its own
    session, so one instance can serve concurrent tool calls.
    """

    def __init__(self, timeout_seconds: float = REQUEST_TIMEOUT_SECONDS):
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_json(self, url: str, *, label: str = "OpenMeteo API", include_body: bool = False) -> Any:
        """
        GET a URL and return its decoded JSON body.

        Args:
            url: Fully built request URL (already percent-encoded)
            label: Endpoint name used in error messages
            include_body: Surface the response body in API errors and a
                body snippet in parse errors (used for geocoding)

        Returns:
            The parsed JSON value

        Raises:
            ApiError: Non-2xx status
            NetworkError: Connection failure or timeout
            ParseError: 2xx status with a body that is not valid JSON
        """
        logger.debug(f"{label} URL: {url}")

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(URL(url, encoded=True)) as response:
                    status = response.status
                    logger.debug(f"{label} response status: {status}")

                    if not 200 <= status < 300:
                        body = None
                        if include_body:
                            try:
                                body = await response.text()
                            except (aiohttp.ClientError, UnicodeDecodeError):
                                body = "Failed to read error body"
                            logger.error(f"{label} non-success. Status: {status}. Body: {body}")
                        raise ApiError(label, status, response.reason, body)

                    raw = await response.read()
        except asyncio.TimeoutError as e:
            raise NetworkError(f"{label} request timed out after {self.timeout.total:g} seconds") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"{label} network error: {e}") from e

        text = raw.decode("utf-8", errors="replace")
        try:
            return json.loads(text)
        except ValueError as e:
            snippet = text[:SNIPPET_LENGTH]
            if include_body:
                logger.error(f"Failed to parse {label} JSON. Error: {e}. Response text: {snippet}")
                raise ParseError(
                    f"Failed to parse {label} JSON response: {e}. Response text snippet: {snippet}",
                    snippet=snippet,
                ) from e
            raise ParseError(f"Failed to parse {label} JSON response: {e}", snippet=snippet) from e
