"""
SkinTwin cognitive layer.

Extracts dermatology knowledge from rendered pages, keeps it in a local
key/value store and answers simple reasoning, pattern and navigation queries
over what was stored.
"""

from .extraction import (
    DERMATOLOGY_KEYWORDS,
    PageDocument,
    extract_entities,
    extract_keywords,
    extract_relationships,
    parse_page,
)
from .layer import CognitiveLayer, get_cognitive_layer, reset_cognitive_layer_for_tests
from .storage import KNOWLEDGE_KEY, NAVIGATION_KEY, LocalStorage

__all__ = [
    "DERMATOLOGY_KEYWORDS",
    "PageDocument",
    "extract_entities",
    "extract_keywords",
    "extract_relationships",
    "parse_page",
    "CognitiveLayer",
    "get_cognitive_layer",
    "reset_cognitive_layer_for_tests",
    "KNOWLEDGE_KEY",
    "NAVIGATION_KEY",
    "LocalStorage",
]
