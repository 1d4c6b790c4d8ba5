"""Environment-backed configuration helpers."""

import os
from typing import List, Optional


def env_int(name: str, default: int) -> int:
    """Return an integer sourced from the environment when available."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_list(name: str, default: Optional[List[str]] = None) -> List[str]:
    """Split a comma separated env var, dropping blanks and stray quotes."""
    raw = os.getenv(name, "")
    values: List[str] = []
    for entry in raw.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.append(cleaned)
    if not values:
        return list(default or [])
    return values
