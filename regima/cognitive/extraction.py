"""
Lightweight knowledge extraction for dermatology pages.

Dependency-free heuristics: a fixed keyword vocabulary and regular
expressions for products, ingredients and skin concerns.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Dict, List, Optional

DERMATOLOGY_KEYWORDS: List[str] = [
    "skin", "skincare", "dermatology", "anti-aging", "wrinkles",
    "acne", "pigmentation", "moisturizer", "serum", "treatment",
    "cleansing", "toning", "rejuvenation", "collagen", "elastin",
    "vitamin", "antioxidant", "peptides", "retinol", "hyaluronic",
    "sunscreen", "spf", "exfoliation", "inflammation", "repair",
]

PRODUCT_PATTERN = re.compile(r"RégimA\s+[A-Z][^.!?]*(?=[.!?]|$)")
INGREDIENT_PATTERN = re.compile(
    r"\b(?:vitamin [A-E]|retinol|hyaluronic acid|collagen|peptides|antioxidants)\b",
    re.IGNORECASE,
)
CONCERN_PATTERN = re.compile(
    r"\b(?:acne|wrinkles|pigmentation|aging|scars|dryness|oily skin)\b",
    re.IGNORECASE,
)

RELATIONSHIP_STRENGTH = 0.8


@dataclass
class PageDocument:
    url: str
    title: str = ""
    description: str = ""
    text: str = ""


class _PageParser(HTMLParser):
    """Collects <title>, meta tags and visible text from a document."""

    _SKIP = {"script", "style", "noscript", "template"}

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.title_parts: List[str] = []
        self.text_parts: List[str] = []
        self.meta: Dict[str, str] = {}
        self._in_title = False
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in self._SKIP:
            self._skip_depth += 1
        elif tag == "title":
            self._in_title = True
        elif tag == "meta":
            attr_map = {k.lower(): (v or "") for k, v in attrs}
            name = attr_map.get("name")
            if name and name.lower() not in self.meta:
                self.meta[name.lower()] = attr_map.get("content", "")

    def handle_endtag(self, tag):
        if tag in self._SKIP and self._skip_depth:
            self._skip_depth -= 1
        elif tag == "title":
            self._in_title = False

    def handle_data(self, data):
        if self._skip_depth:
            return
        if self._in_title:
            self.title_parts.append(data)
            return
        self.text_parts.append(data)


def parse_page(html: str, url: str) -> PageDocument:
    """Build a PageDocument from a rendered HTML page."""
    parser = _PageParser()
    parser.feed(html or "")
    parser.close()
    text = re.sub(r"[ \t\r\f\v]+", " ", "".join(parser.text_parts))
    text = re.sub(r"\n\s*\n+", "\n", text).strip()
    return PageDocument(
        url=url,
        title="".join(parser.title_parts).strip(),
        description=parser.meta.get("description", ""),
        text=text,
    )


def extract_keywords(text: Optional[str]) -> List[str]:
    """Vocabulary keywords present in the text, in vocabulary order."""
    if not text:
        return []
    lowered = text.lower()
    return [keyword for keyword in DERMATOLOGY_KEYWORDS if keyword in lowered]


def extract_entities(text: Optional[str]) -> List[Dict[str, str]]:
    """Products, then ingredients, then concerns, each in order of appearance."""
    if not text:
        return []
    entities: List[Dict[str, str]] = []
    entities += [{"type": "product", "value": m.group(0).strip()} for m in PRODUCT_PATTERN.finditer(text)]
    entities += [{"type": "ingredient", "value": m.group(0)} for m in INGREDIENT_PATTERN.finditer(text)]
    entities += [{"type": "concern", "value": m.group(0)} for m in CONCERN_PATTERN.finditer(text)]
    return entities


def extract_relationships(entities: List[Dict[str, str]]) -> List[Dict[str, object]]:
    """Pair every product with every concern as a `treats` relationship."""
    products = [e for e in entities if e.get("type") == "product"]
    concerns = [e for e in entities if e.get("type") == "concern"]
    return [
        {
            "type": "treats",
            "source": product["value"],
            "target": concern["value"],
            "strength": RELATIONSHIP_STRENGTH,
        }
        for product in products
        for concern in concerns
    ]
