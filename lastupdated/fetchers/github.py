"""
lastupdated/fetchers/github.py
═══════════════════════════════════════════════════════════════════════════════
GitHub REST API, commit history for a single file (no token).

Endpoint used:
  /repos/{owner}/{repo}/commits?path={path}&per_page=1   → newest commit only

Response shape we read:
  [ { "commit": { "author": { "date": "2023-05-14T10:00:00Z" } } } ]

Every failure (network, HTTP status, empty list, bad JSON / shape) is logged
and collapsed into None. The caller decides what to show instead.
═══════════════════════════════════════════════════════════════════════════════
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from lastupdated.core.cache import CommitDateCache
from lastupdated.core.config import GITHUB_API_BASE, GITHUB_HEADERS
from lastupdated.core.http_client import github_client

log = logging.getLogger("github")

# Same set encodeURIComponent leaves alone
_PATH_SAFE = "!~*'()"


def commits_url(owner: str, repo: str, path: str) -> str:
    return (
        f"{GITHUB_API_BASE}/repos/{owner}/{repo}/commits"
        f"?path={quote(path, safe=_PATH_SAFE)}&per_page=1"
    )


def _extract_date(data) -> str:
    """Pull commit.author.date out of the first element. Raises on bad shape."""
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    if not data:
        raise LookupError("no commits found")
    iso = data[0]["commit"]["author"]["date"]
    if not isinstance(iso, str) or not iso:
        raise ValueError(f"bad commit date {iso!r}")
    return iso


class LastUpdatedFetcher:
    """Looks up and caches the newest commit date per (owner, repo, path)."""

    def __init__(
        self,
        cache: Optional[CommitDateCache] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.cache  = cache if cache is not None else CommitDateCache()
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client if self._client is not None else github_client()

    async def fetch_last_commit_date(self, owner: str, repo: str, path: str) -> Optional[str]:
        key = CommitDateCache.make_key(owner, repo, path)
        cached = self.cache.get(key)
        if cached is not None:
            log.debug(f"Cache hit for {key}")
            return cached

        url = commits_url(owner, repo, path)
        try:
            resp = await self.client.get(url, headers=GITHUB_HEADERS)
            if not resp.is_success:
                raise RuntimeError(f"GitHub API {resp.status_code}")
            iso = _extract_date(resp.json())
        except Exception as ex:
            log.warning(f"Failed fetching commit date for {path}: {ex}")
            return None

        self.cache.set(key, iso)
        log.info(f"GitHub {owner}/{repo}: {path} last committed {iso}")
        return iso


# ── Process-wide default ──────────────────────────────────────────────────────

_default_fetcher: LastUpdatedFetcher | None = None


def default_fetcher() -> LastUpdatedFetcher:
    global _default_fetcher
    if _default_fetcher is None:
        _default_fetcher = LastUpdatedFetcher()
    return _default_fetcher
