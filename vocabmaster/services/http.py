"""Shared outbound HTTP helper and error type for external providers."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "VocabMaster/0.1",
}


class ProviderUnavailableError(Exception):
    """Raised when an external dictionary or translation API call fails."""

    def __init__(self, message: str, provider: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.provider = provider
        self.details = details or {}
        super().__init__(f"[{provider}] {message}")


async def request_json(
    provider: str,
    method: str,
    url: str,
    *,
    timeout: float,
    params: dict[str, Any] | None = None,
    json: dict[str, Any] | None = None,
) -> Any | None:
    """
    Perform one HTTP request and decode the JSON body.

    Args:
        provider: Provider name used in errors and logs.
        method: HTTP method.
        url: Absolute request URL.
        timeout: Request timeout in seconds.
        params: Optional query parameters.
        json: Optional JSON body.

    Returns:
        Decoded JSON, or None when the server answers 404.

    Raises:
        ProviderUnavailableError: On timeouts, transport errors, other non-2xx
            statuses, or an undecodable body.
    """
    async with httpx.AsyncClient(timeout=timeout, headers=DEFAULT_HEADERS) as client:
        try:
            response = await client.request(method, url, params=params, json=json)
        except httpx.TimeoutException as e:
            raise ProviderUnavailableError(
                "Request timeout", provider, {"url": url, "error": str(e)}
            ) from e
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(
                "Connection to provider failed", provider, {"url": url, "error": str(e)}
            ) from e

    if response.status_code == 404:
        logger.debug(f"[{provider}] 404 for {url}")
        return None

    if response.status_code >= 400:
        raise ProviderUnavailableError(
            f"API error: {response.status_code}",
            provider,
            {"status_code": response.status_code, "response": response.text[:500]},
        )

    try:
        return response.json()
    except ValueError as e:
        raise ProviderUnavailableError(
            "Malformed JSON response", provider, {"error": str(e)}
        ) from e
