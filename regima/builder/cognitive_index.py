"""
SkinTwin knowledge index published with the site.

`index.json` describes the knowledge graph seed (entities, relationships,
categories and inference rules); `api.html` documents how to query it.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .sitemap import PRODUCT_CATEGORIES

KNOWLEDGE_ENTITIES = [
    "skincare", "anti-ageing", "acne", "pigmentation", "wrinkles",
    "moisturizer", "serum", "cleanser", "sunscreen", "retinol",
    "vitamin-c", "hyaluronic-acid", "collagen", "peptides",
]

KNOWLEDGE_RELATIONSHIPS = [
    {"source": "retinol", "target": "anti-ageing", "type": "treats", "strength": 0.9},
    {"source": "vitamin-c", "target": "pigmentation", "type": "treats", "strength": 0.8},
    {"source": "hyaluronic-acid", "target": "hydration", "type": "provides", "strength": 0.95},
    {"source": "sunscreen", "target": "prevention", "type": "enables", "strength": 0.9},
]

INFERENCE_RULES = [
    "IF age > 30 AND concern = wrinkles THEN recommend anti-ageing",
    "IF skin-type = oily AND concern = acne THEN recommend problem-skin",
    "IF concern = pigmentation THEN recommend vitamin-c + sunscreen",
]

# The published category list spells day-preparations correctly even though
# the legacy product URL does not.
KNOWLEDGE_CATEGORIES = [
    "day-preparations" if slug == "day-preperations" else slug for slug in PRODUCT_CATEGORIES
]


def build_cognitive_index(generated_at: Optional[datetime] = None) -> Dict[str, Any]:
    generated_at = generated_at or datetime.now(timezone.utc)
    return {
        "version": "1.0",
        "generatedAt": generated_at.isoformat(),
        "architecture": "SkinTwin",
        "components": {
            "atomspace": "Knowledge representation layer",
            "pln": "Probabilistic logic networks for reasoning",
            "moses": "Pattern mining and optimization",
            "esn": "Echo state networks for temporal prediction",
        },
        "domain": "dermatology",
        "knowledge": {
            "entities": list(KNOWLEDGE_ENTITIES),
            "relationships": [dict(rel) for rel in KNOWLEDGE_RELATIONSHIPS],
            "categories": list(KNOWLEDGE_CATEGORIES),
        },
        "inference": {"rules": list(INFERENCE_RULES)},
        "api": {
            "endpoint": "/cognitive/api/",
            "methods": ["GET", "POST"],
            "capabilities": ["search", "recommend", "analyze", "predict"],
        },
    }


API_DOC_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>SkinTwin Cognitive API - RégimA</title>
    <link rel="stylesheet" href="/assets/css/main.css">
</head>
<body>
    <div class="content-section">
        <h1>SkinTwin Cognitive Architecture API</h1>
        <p>Access the cognitive layer powering RegimA's intelligent skincare recommendations.</p>

        <h2>Knowledge Graph Access</h2>
        <pre><code>GET /cognitive/index.json</code></pre>
        <p>Returns the complete knowledge graph structure and inference rules.</p>

        <h2>Product Recommendation</h2>
        <pre><code>POST /cognitive/api/recommend
{
  "skinType": "oily",
  "concerns": ["acne", "pigmentation"],
  "age": 28
}</code></pre>

        <h2>Knowledge Search</h2>
        <pre><code>GET /cognitive/api/search?query=anti-ageing</code></pre>

        <p>This API enables integration with the SkinTwin cognitive architecture for advanced skincare personalization.</p>
    </div>
</body>
</html>
"""
