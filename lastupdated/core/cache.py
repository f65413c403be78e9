"""
lastupdated/core/cache.py
═══════════════════════════════════════════════════════════════════════════
In-memory commit-date cache.
  • Key = "owner/repo/path", value = ISO-8601 commit date
  • Only the fetcher calls set() and only after a successful lookup
  • Failed lookups never write → next call retries the network
  • No eviction: lives as long as its owner
  • No lock: every access happens on one event loop, and writes never
    straddle an await
═══════════════════════════════════════════════════════════════════════════
"""

import time
from typing import Optional


class CommitDateCache:
    def __init__(self) -> None:
        self._store: dict[str, dict] = {}

    @staticmethod
    def make_key(owner: str, repo: str, path: str) -> str:
        return f"{owner}/{repo}/{path}"

    def get(self, key: str) -> Optional[str]:
        """Cached ISO date, or None if the key was never set."""
        e = self._store.get(key)
        return e["data"] if e else None

    def set(self, key: str, iso_date: str) -> None:
        self._store[key] = {"data": iso_date, "ts": time.time()}

    def age(self, key: str) -> Optional[float]:
        """Seconds since the entry was stored, or None."""
        e = self._store.get(key)
        return round(time.time() - e["ts"], 1) if e else None

    def summary(self) -> dict:
        """Metadata only, for logging / debugging."""
        return {k: {"age_s": round(time.time() - v["ts"], 1)} for k, v in self._store.items()}

    def __contains__(self, key: str) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)
