"""Shared async HTTP access for remote legends, pictures and attribute payloads."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from symbology.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def http_client(client: httpx.AsyncClient | None = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` untouched, or a fresh client that is closed on exit."""
    if client is not None:
        yield client
        return

    async with httpx.AsyncClient(
        timeout=settings.http_timeout_seconds,
        follow_redirects=True,
    ) as owned:
        yield owned


async def get_json(url: str, params: dict[str, str], client: httpx.AsyncClient | None = None) -> dict:
    """GET ``url`` and decode the JSON object body. Raises ``httpx.HTTPError``,
    or ``ValueError`` when the body is not a JSON object, for the caller to wrap."""
    async with http_client(client) as http:
        logger.debug("GET %s %s", url, params)
        response = await http.get(url, params=params)
        response.raise_for_status()
        result = response.json()
        if not isinstance(result, dict):
            raise ValueError(f"expected a JSON object from {url}, got {type(result).__name__}")
        return result


async def get_bytes(url: str, client: httpx.AsyncClient | None = None) -> tuple[bytes, str | None]:
    """GET ``url`` and return the body with its content type."""
    async with http_client(client) as http:
        logger.debug("GET %s", url)
        response = await http.get(url)
        response.raise_for_status()
        return response.content, response.headers.get("content-type")
