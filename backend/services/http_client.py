"""Shared outbound HTTP plumbing for the word source and similarity clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from services.errors import ServiceError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


def create_http_client(timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds), follow_redirects=True)


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    service: str,
    **kwargs: Any,
) -> Any:
    """
    Send one request and decode its JSON body.

    Stalls, transport failures, non-2xx statuses and undecodable bodies all
    become ServiceError; there are no retries.
    """
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.TimeoutException as exc:
        logger.error("[http] %s timed out: %s %s", service, method, url)
        raise ServiceError(f"{service} did not answer in time") from exc
    except httpx.HTTPError as exc:
        logger.error("[http] %s unreachable: %s %s (%s)", service, method, url, exc)
        raise ServiceError(f"{service} is unreachable") from exc

    if not response.is_success:
        logger.error(
            "[http] %s error: %s %s -> %d %s",
            service,
            method,
            url,
            response.status_code,
            response.text[:200],
        )
        raise ServiceError(f"{service} error: {response.status_code} {response.reason_phrase}")

    try:
        return response.json()
    except ValueError as exc:
        logger.error("[http] %s returned a non-JSON body: %.200s", service, response.text)
        raise ServiceError(f"Unexpected response format from {service}") from exc
