"""
URL utilities for building absolute links in generated site files.

Primary source: SITE_BASE_URL (e.g., https://regima.site)
Fallback: SITE_HOST (adds scheme heuristically if missing).
"""
from __future__ import annotations

import os

DEFAULT_SITE_BASE_URL = "https://regima.site"


def _add_scheme_if_missing(host: str) -> str:
    h = host.strip()
    if not h:
        return DEFAULT_SITE_BASE_URL
    if h.startswith("http://") or h.startswith("https://"):
        return h
    # http for local previews, https everywhere else
    lower = h.lower()
    if lower.startswith("localhost") or lower.startswith("127.0.0.1"):
        return f"http://{h}"
    return f"https://{h}"


def _strip_trailing_slash(url: str) -> str:
    return url.rstrip("/")


def get_site_base_url() -> str:
    """Return the normalized public base URL of the site.

    Precedence:
    1. SITE_BASE_URL
    2. SITE_HOST, scheme added if missing
    Defaults to https://regima.site if neither is set.
    """
    base = os.getenv("SITE_BASE_URL")
    if base and base.strip():
        return _strip_trailing_slash(_add_scheme_if_missing(base))
    host = os.getenv("SITE_HOST")
    if host and host.strip():
        return _strip_trailing_slash(_add_scheme_if_missing(host))
    return DEFAULT_SITE_BASE_URL


def absolute_url(base_url: str, path: str) -> str:
    """Join a site path onto the base URL, keeping a single slash."""
    base = _strip_trailing_slash(base_url)
    if not path.startswith("/"):
        path = "/" + path
    return f"{base}{path}"
