"""Feed pages produced by the site builder through the cognitive layer."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from .extraction import parse_page
from .layer import CognitiveLayer

logger = logging.getLogger(__name__)


def url_for_page(public_dir: Path, page_path: Path) -> str:
    """Map public/<dir>/index.html to /<dir>/ (and public/index.html to /)."""
    relative = page_path.relative_to(public_dir)
    parent = relative.parent.as_posix()
    if page_path.name == "index.html":
        return "/" if parent == "." else f"/{parent}/"
    return "/" + relative.as_posix()


def iter_built_pages(public_dir: Path) -> Iterator[Tuple[str, Path]]:
    for page_path in sorted(public_dir.rglob("index.html")):
        # assets may ship their own demo pages
        if "assets" in page_path.relative_to(public_dir).parts:
            continue
        yield url_for_page(public_dir, page_path), page_path


def ingest_directory(layer: CognitiveLayer, public_dir: Path) -> List[dict]:
    if not public_dir.is_dir():
        raise FileNotFoundError(f"Public directory not found: {public_dir}")
    ingested: List[dict] = []
    for url, page_path in iter_built_pages(public_dir):
        document = parse_page(page_path.read_text(encoding="utf-8"), url)
        page_data = layer.extract_page_knowledge(document)
        logger.info(
            "Ingested %s: %d keyword(s), %d entit(ies)",
            url,
            len(page_data["keywords"]),
            len(page_data["entities"]),
        )
        ingested.append(page_data)
    return ingested
