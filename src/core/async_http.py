"""Async HTTP fetching using httpx.

A single GET per call, no retries: retry policy belongs to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from config import settings

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": settings.DEFAULT_USER_AGENT,
    "Accept": "text/html",
}


class FetchError(RuntimeError):
    def __init__(self, message: str, *, url: str):
        super().__init__(message)
        self.url = url


class UpstreamUnavailable(FetchError):
    """The upstream answered with a non-2xx status."""

    def __init__(self, url: str, status: int):
        super().__init__(f"Upstream returned {status} for {url}", url=url)
        self.status = status


class NetworkError(FetchError):
    """The request failed before a usable response arrived."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Network error for {url}: {cause}", url=url)
        self.cause = cause


def make_client(
    *, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers=DEFAULT_HEADERS,
        timeout=timeout or settings.DEFAULT_TIMEOUT,
        follow_redirects=True,
        transport=transport,
    )


async def fetch(url: str, *, client: Optional[httpx.AsyncClient] = None) -> str:
    close_client = False
    if client is None:
        client = make_client()
        close_client = True
    try:
        logger.debug("GET %s", url)
        try:
            resp = await client.get(url, headers=DEFAULT_HEADERS)
        except httpx.RequestError as e:
            logger.warning("GET %s failed: %s", url, e)
            raise NetworkError(url, e) from e
        if not resp.is_success:
            logger.warning("GET %s returned %s", url, resp.status_code)
            raise UpstreamUnavailable(url, resp.status_code)
        return resp.text
    finally:
        if close_client:
            await client.aclose()
