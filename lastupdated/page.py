"""
lastupdated/page.py
"Last updated" label writer.

Usage:
    soup = BeautifulSoup(html, "html.parser")
    await update_last_updated(
        soup,
        element_id="last-updated",
        owner="johnson-liu-code",
        repo="johnson-liu-code.github.io",
        file_path="projects/sentiment_analysis/sentiment.html",
    )

Concurrent calls against the same element are not coordinated; whichever
finishes last wins.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bs4 import BeautifulSoup

from lastupdated.core.config import LAST_UPDATED_PREFIX, UNKNOWN_MARKER
from lastupdated.core.dates import format_date
from lastupdated.fetchers.github import LastUpdatedFetcher, default_fetcher

log = logging.getLogger("page")


async def update_last_updated(
    document: BeautifulSoup,
    *,
    element_id: str,
    owner: str,
    repo: str,
    file_path: str,
    fallback_to_now: bool = True,
    fetcher: Optional[LastUpdatedFetcher] = None,
    now: Optional[datetime] = None,
) -> None:
    """
    Write "Last updated: <date>" into the element with id `element_id`.

    Lookup fails + fallback_to_now  → today's date (or `now`)
    Lookup fails + no fallback      → "Last updated: unknown"
    Element missing                 → nothing happens
    """
    el = document.find(id=element_id)
    if el is None:
        log.debug(f"No element #{element_id}, skipping")
        return

    fetcher = fetcher or default_fetcher()
    iso = await fetcher.fetch_last_commit_date(owner, repo, file_path)
    if iso:
        display = f"{LAST_UPDATED_PREFIX}{format_date(iso)}"
    elif fallback_to_now:
        display = f"{LAST_UPDATED_PREFIX}{format_date(now or datetime.now(timezone.utc))}"
    else:
        display = f"{LAST_UPDATED_PREFIX}{UNKNOWN_MARKER}"
    el.string = display


async def stamp_html(html: str, **options) -> str:
    """Parse `html`, fill in the label, return the serialized document."""
    soup = BeautifulSoup(html, "html.parser")
    await update_last_updated(soup, **options)
    return str(soup)
