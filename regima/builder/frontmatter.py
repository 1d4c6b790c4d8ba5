"""Front matter parsing for markdown pages.

Pages carry flat ``key: value`` lines between ``---`` fences. Each line is
split at its first colon, so titles such as ``Anti-Ageing: Night Serum`` and
values such as ``#1`` or ``1.10`` are kept as written. Blocks that use YAML
structure (indented lines, list items, comments) are loaded with PyYAML.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List, Tuple

import yaml

from .errors import FrontMatterError

FRONTMATTER_RE = re.compile(r"^---\n(.*?)\n---\n(.*)$", re.DOTALL)
_QUOTES = "\"'"


def _strip_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return text


def _coerce(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return _strip_quotes(str(value).strip())


def _is_flat_line(line: str) -> bool:
    if not line.strip():
        return True
    if line[0].isspace() or line.startswith(("-", "#")):
        return False
    return line.find(":") > 0


def _parse_flat(lines: List[str]) -> Dict[str, str]:
    front_matter: Dict[str, str] = {}
    for line in lines:
        if not line.strip():
            continue
        key, _, value = line.partition(":")
        front_matter[key.strip()] = _strip_quotes(value.strip())
    return front_matter


def _parse_yaml(raw_meta: str, source: str) -> Dict[str, str]:
    try:
        loaded = yaml.safe_load(raw_meta)
    except yaml.YAMLError as exc:
        raise FrontMatterError(source, str(exc)) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise FrontMatterError(source, f"expected key/value pairs, got {type(loaded).__name__}")
    return {str(key).strip(): _coerce(value) for key, value in loaded.items()}


def parse_frontmatter(content: str, source: str = "<page>") -> Tuple[Dict[str, str], str]:
    """Split a page into (front matter, markdown body).

    Keys and values are returned as strings. Content without a fence block is
    returned unchanged with an empty mapping.
    """
    normalized = content.replace("\r\n", "\n")
    match = FRONTMATTER_RE.match(normalized)
    if not match:
        return {}, content

    raw_meta, body = match.group(1), match.group(2)
    lines = raw_meta.split("\n")
    if all(_is_flat_line(line) for line in lines):
        return _parse_flat(lines), body
    return _parse_yaml(raw_meta, source), body
