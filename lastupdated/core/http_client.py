"""
lastupdated/core/http_client.py
Shared async httpx client.
  • github_client() → unauthenticated client for api.github.com

A client's pooled connections belong to the event loop that opened them.
Pages are often stamped one asyncio.run() at a time, so the client is
rebuilt whenever the running loop changes.
"""

import asyncio
import logging

import httpx
from lastupdated.core.config import GITHUB_HEADERS

log = logging.getLogger("http_client")

_github_client: httpx.AsyncClient | None = None
_github_loop:   asyncio.AbstractEventLoop | None = None

_LIMITS  = httpx.Limits(max_connections=10, max_keepalive_connections=5)
_TIMEOUT = httpx.Timeout(30.0, connect=15.0)


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def github_client() -> httpx.AsyncClient:
    global _github_client, _github_loop
    loop = _running_loop()
    if _github_client is None or _github_client.is_closed or _github_loop is not loop:
        # A client left over from a finished loop can't be closed from here;
        # drop it and let its connections be collected with the old loop.
        _github_client = httpx.AsyncClient(
            headers=GITHUB_HEADERS,
            timeout=_TIMEOUT,
            follow_redirects=True,
            limits=_LIMITS,
        )
        _github_loop = loop
        log.debug("Created GitHub client")
    return _github_client


async def close_all() -> None:
    global _github_client, _github_loop
    c = _github_client
    if c and not c.is_closed and _github_loop is _running_loop():
        await c.aclose()
    _github_client = None
    _github_loop = None
