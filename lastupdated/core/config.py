"""
lastupdated/core/config.py
═══════════════════════════════════════════════════════════════════════════════
SOURCE:

  GitHub REST API  →  newest commit touching a file
                      GET /repos/{owner}/{repo}/commits?path=...&per_page=1
                      Unauthenticated on purpose (60 req/h per IP).

DISPLAY:

  "Last updated: May 14, 2023"   ← commit date (or today, on fallback)
  "Last updated: unknown"        ← lookup failed and fallback disabled
═══════════════════════════════════════════════════════════════════════════════
"""

import pytz

# ── GitHub ────────────────────────────────────────────────────────────────────
# SECURITY: never add a token here. This runs wherever the page is built or
# rendered; for higher rate limits put a proxy in front of the API instead.
GITHUB_API_BASE = "https://api.github.com"
GITHUB_HEADERS  = {"Accept": "application/vnd.github+json"}

# ── Display ───────────────────────────────────────────────────────────────────
LAST_UPDATED_PREFIX = "Last updated: "
UNKNOWN_MARKER      = "unknown"
INVALID_DATE        = "Invalid Date"

# Fixed locale and zone so every viewer sees the same string
DISPLAY_TZ     = pytz.UTC
DISPLAY_LOCALE = "en-US"

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "en-US": (
        "January", "February", "March",     "April",   "May",      "June",
        "July",    "August",   "September", "October", "November", "December",
    ),
}
