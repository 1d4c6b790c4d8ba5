"""
File-backed key/value store with localStorage semantics.

Keys and values are strings; the whole store is one JSON object on disk,
rewritten atomically on every change.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

KNOWLEDGE_KEY = "skintwin_knowledge"
NAVIGATION_KEY = "skintwin_navigation"

DEFAULT_STORAGE_PATH = Path("~/.regima/skintwin_storage.json")


def resolve_storage_path() -> Path:
    raw = os.getenv("COGNITIVE_STORAGE_PATH")
    return Path(raw or DEFAULT_STORAGE_PATH).expanduser()


class LocalStorage:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path else resolve_storage_path()
        self._lock = threading.Lock()
        self._items: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}
        return {str(k): v if isinstance(v, str) else json.dumps(v) for k, v in raw.items()}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=str(self.path.parent), prefix=".storage-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._items, fh, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def __len__(self) -> int:
        return len(self._items)

    def keys(self) -> List[str]:
        return list(self._items.keys())

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = str(value)
            self._flush()

    def remove_item(self, key: str) -> None:
        with self._lock:
            if self._items.pop(key, None) is not None:
                self._flush()

    def clear(self) -> None:
        with self._lock:
            self._items = {}
            self._flush()

    def read_json_list(self, key: str) -> List[Any]:
        """Decode a stored JSON array; missing or corrupt values read as []."""
        raw = self.get_item(key)
        if raw is None:
            return []
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored value for %s is not valid JSON; treating as empty", key)
            return []
        if not isinstance(value, list):
            logger.warning("Stored value for %s is not a list; treating as empty", key)
            return []
        return value

    def write_json(self, key: str, value: Any) -> None:
        self.set_item(key, json.dumps(value, ensure_ascii=False))
