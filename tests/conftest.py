from __future__ import annotations

import asyncio

import httpx
import pytest

from lastupdated.core.cache import CommitDateCache
from lastupdated.fetchers.github import LastUpdatedFetcher


class FakeGitHub:
    """Records every request and answers with a fixed status/body."""

    def __init__(self, status: int = 200, body=None, exc: Exception | None = None) -> None:
        self.status = status
        self.body = body if body is not None else []
        self.exc = exc
        self.requests: list[httpx.Request] = []
        self.clients: list[httpx.AsyncClient] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status, content=self.body)
        return httpx.Response(self.status, json=self.body)

    def fetcher(self, cache: CommitDateCache | None = None) -> LastUpdatedFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        self.clients.append(client)
        return LastUpdatedFetcher(cache=cache, client=client)

    def close(self) -> None:
        async def _close() -> None:
            for c in self.clients:
                await c.aclose()

        asyncio.run(_close())


def commit_list(*dates: str) -> list[dict]:
    return [{"sha": f"sha{i}", "commit": {"author": {"date": d}}} for i, d in enumerate(dates)]


@pytest.fixture
def make_github():
    made: list[FakeGitHub] = []

    def _make(**kwargs) -> FakeGitHub:
        gh = FakeGitHub(**kwargs)
        made.append(gh)
        return gh

    yield _make
    for gh in made:
        gh.close()


@pytest.fixture
def github_ok(make_github) -> FakeGitHub:
    return make_github(body=commit_list("2023-05-14T10:00:00Z"))
