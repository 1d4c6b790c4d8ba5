"""
SkinTwin cognitive layer.

Turns pages into AtomSpace-style concept atoms and runs the three simulated
engines over the stored atoms:

- PLN reasoning: keyword match against a query, scored with a random relevance
- MOSES pattern mining: counts of product/concern pairs and ingredients
- ESN temporal prediction: first-order transition counts over navigation
"""
from __future__ import annotations

import logging
import random
import re
import time
from collections import Counter
from typing import Any, Dict, List, Optional

from regima.utils.env import env_int

from .extraction import (
    PageDocument,
    extract_entities,
    extract_keywords,
    extract_relationships,
)
from .storage import KNOWLEDGE_KEY, NAVIGATION_KEY, LocalStorage

logger = logging.getLogger(__name__)

DOMAIN = "dermatology"
DEFAULT_TRUTH_VALUE = {"strength": 0.9, "confidence": 0.8}
DEFAULT_NAVIGATION_LIMIT = 50
MAX_PREDICTIONS = 3


def atom_name_for(url: str) -> str:
    return "Page_" + re.sub(r"[^a-zA-Z0-9]", "_", url)


def _dicts(items: Any) -> List[Dict[str, Any]]:
    """Keep the mapping entries of a stored list; anything else is skipped."""
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def _attributes_of(node: Dict[str, Any]) -> Dict[str, Any]:
    attributes = node.get("attributes")
    return attributes if isinstance(attributes, dict) else {}


class CognitiveLayer:
    """Knowledge extraction plus simulated reasoning over a LocalStorage."""

    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        current_page: str = "/",
        rng: Optional[random.Random] = None,
        navigation_limit: Optional[int] = None,
        clock=time.time,
    ) -> None:
        self.storage = storage if storage is not None else LocalStorage()
        self.current_page = current_page
        self.rng = rng or random.Random()
        if navigation_limit is None:
            navigation_limit = env_int("COGNITIVE_NAVIGATION_LIMIT", DEFAULT_NAVIGATION_LIMIT)
        if navigation_limit <= 0:
            logger.warning(
                "Ignoring navigation limit %s; using %s", navigation_limit, DEFAULT_NAVIGATION_LIMIT
            )
            navigation_limit = DEFAULT_NAVIGATION_LIMIT
        self.navigation_limit = navigation_limit
        self._clock = clock
        self.knowledge_nodes: Dict[str, Dict[str, Any]] = {}

    # Knowledge extraction

    def extract_page_knowledge(self, page: PageDocument) -> Dict[str, Any]:
        """Extract, cache and store the knowledge carried by one page."""
        self.current_page = page.url
        entities = extract_entities(page.text)
        page_data = {
            "url": page.url,
            "title": page.title,
            "description": page.description,
            "keywords": extract_keywords(page.text),
            "entities": entities,
            "relationships": extract_relationships(entities),
            "domain": DOMAIN,
        }
        self.knowledge_nodes[page.url] = page_data
        self.send_to_atomspace(page_data)
        return page_data

    def send_to_atomspace(self, data: Dict[str, Any]) -> Dict[str, Any]:
        atom = {
            "type": "ConceptNode",
            "name": atom_name_for(data["url"]),
            "truthValue": dict(DEFAULT_TRUTH_VALUE),
            "attributes": {
                "url": data["url"],
                "title": data["title"],
                "domain": data["domain"],
                "keywords": data["keywords"],
                "entities": data["entities"],
                "relationships": data["relationships"],
            },
        }
        logger.debug("Storing atom %s", atom["name"])
        self.store_knowledge_node(atom)
        return atom

    def store_knowledge_node(self, atom: Dict[str, Any]) -> None:
        stored = self.storage.read_json_list(KNOWLEDGE_KEY)
        stored.append(atom)
        self.storage.write_json(KNOWLEDGE_KEY, stored)

    def _stored_atoms(self) -> List[Dict[str, Any]]:
        return _dicts(self.storage.read_json_list(KNOWLEDGE_KEY))

    # PLN reasoning

    def perform_reasoning(self, query: str) -> List[Dict[str, Any]]:
        """Atoms sharing a keyword with the query, most relevant first."""
        lowered = (query or "").lower()
        results: List[Dict[str, Any]] = []
        for node in self._stored_atoms():
            attributes = _attributes_of(node)
            keywords = attributes.get("keywords")
            if not isinstance(keywords, list):
                keywords = []
            if any(str(keyword).lower() in lowered for keyword in keywords):
                results.append(
                    {
                        "node": node.get("name"),
                        "relevance": self.rng.random() * 0.8 + 0.2,
                        "attributes": attributes,
                    }
                )
        results.sort(key=lambda r: r["relevance"], reverse=True)
        return results

    # MOSES pattern mining

    def mine_patterns(self) -> Dict[str, Any]:
        product_concern_pairs: Counter = Counter()
        common_ingredients: Counter = Counter()
        for node in self._stored_atoms():
            attributes = _attributes_of(node)
            for rel in _dicts(attributes.get("relationships")):
                if rel.get("type") == "treats":
                    product_concern_pairs[f"{rel.get('source')}_{rel.get('target')}"] += 1
            for entity in _dicts(attributes.get("entities")):
                if entity.get("type") == "ingredient":
                    common_ingredients[str(entity.get("value", "")).lower()] += 1

        history = _dicts(self.storage.read_json_list(NAVIGATION_KEY))
        transitions = self._count_transitions(history)
        return {
            "productConcernPairs": dict(product_concern_pairs),
            "commonIngredients": dict(common_ingredients),
            "pageNavigationPatterns": [
                {"from": source, "to": target, "count": count}
                for (source, target), count in transitions.items()
            ],
        }

    # ESN temporal prediction

    def predict_user_journey(self, current_path: str) -> List[Dict[str, Any]]:
        """Record a visit to `current_path` and predict the next pages."""
        history = _dicts(self.storage.read_json_list(NAVIGATION_KEY))
        history.append({"path": current_path, "timestamp": int(self._clock() * 1000)})
        if len(history) > self.navigation_limit:
            history = history[-self.navigation_limit:]
        self.storage.write_json(NAVIGATION_KEY, history)
        return self.generate_navigation_predictions(history)

    @staticmethod
    def _count_transitions(history: List[Dict[str, Any]]) -> Counter:
        transitions: Counter = Counter()
        for prev, nxt in zip(history, history[1:]):
            transitions[(prev.get("path"), nxt.get("path"))] += 1
        return transitions

    def generate_navigation_predictions(self, history: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not history:
            return []
        transitions = self._count_transitions(history)
        current_path = history[-1].get("path")
        predictions = [
            {"path": target, "probability": count / len(history)}
            for (source, target), count in transitions.items()
            if source == current_path
        ]
        # stable sort keeps first-seen order among equal probabilities
        predictions.sort(key=lambda p: p["probability"], reverse=True)
        return predictions[:MAX_PREDICTIONS]

    # Public API

    def query(self, search_term: str) -> List[Dict[str, Any]]:
        return self.perform_reasoning(search_term)

    def get_knowledge_graph(self) -> List[Dict[str, Any]]:
        return self._stored_atoms()

    def get_navigation_predictions(self) -> List[Dict[str, Any]]:
        return self.predict_user_journey(self.current_page)


_cognitive_layer: Optional[CognitiveLayer] = None


def get_cognitive_layer() -> CognitiveLayer:
    global _cognitive_layer
    if _cognitive_layer is None:
        _cognitive_layer = CognitiveLayer()
    return _cognitive_layer


def reset_cognitive_layer_for_tests() -> None:  # pragma: no cover - used in tests
    global _cognitive_layer
    _cognitive_layer = None
