import random
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from regima.cognitive import CognitiveLayer, LocalStorage, reset_cognitive_layer_for_tests
from regima.gateway.config import GatewaySettings, load_gateway_config
from regima.gateway.main import create_app

REPO_ROOT = Path(__file__).resolve().parents[1]
VALID_API_KEY = "regima_test_key_0123456789"

LAYOUT = """<!DOCTYPE html>
<html>
<head>
<title>{{title}}</title>
<meta name="description" content="{{description}}">
<link rel="canonical" href="https://regima.site{{path}}">
<script type="application/ld+json">{"@type": "{{schemaType}}"}</script>
</head>
<body>
<main>{{content}}</main>
</body>
</html>
"""

# Variables read by the site, gateway and cognitive layer
_ENV_VARS = [
    "SITE_BASE_URL",
    "SITE_HOST",
    "SITE_TITLE",
    "SITE_DESCRIPTION",
    "SITE_ROOT",
    "SITE_PUBLIC_DIR",
    "GATEWAY_CONFIG_PATH",
    "GATEWAY_HOST",
    "PORT",
    "GATEWAY_MAX_BODY_BYTES",
    "ALLOWED_ORIGINS",
    "COGNITIVE_STORAGE_PATH",
    "COGNITIVE_NAVIGATION_LIMIT",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # fallback storage never touches the home directory
    monkeypatch.setenv("COGNITIVE_STORAGE_PATH", str(tmp_path / "default-storage.json"))
    reset_cognitive_layer_for_tests()
    yield
    reset_cognitive_layer_for_tests()


@pytest.fixture
def gateway_config():
    return load_gateway_config(REPO_ROOT / "config" / "gateway.json")


@pytest.fixture
def gateway_app(gateway_config):
    return create_app(config=gateway_config, settings=GatewaySettings())


@pytest.fixture
def client(gateway_app):
    with TestClient(gateway_app) as c:
        yield c


@pytest.fixture
def api_key():
    return VALID_API_KEY


@pytest.fixture
def api_headers(api_key):
    return {"X-API-Key": api_key}


@pytest.fixture
def site_root(tmp_path):
    """A minimal site: two pages, a layout and one asset."""
    root = tmp_path / "site"
    pages = root / "content" / "pages"
    pages.mkdir(parents=True)
    (root / "templates").mkdir()
    (root / "assets" / "css").mkdir(parents=True)

    (root / "templates" / "layout.html").write_text(LAYOUT, encoding="utf-8")
    (root / "assets" / "css" / "main.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (pages / "index.md").write_text(
        "---\ntitle: Home\ndescription: Welcome home\npath: /\nschemaType: WebSite\n---\n"
        "# Welcome\n\nRégimA Zone Serum treats acne and wrinkles.\n",
        encoding="utf-8",
    )
    (pages / "products.md").write_text(
        "---\ntitle: Products\npath: /products/\n---\n# Products\n\nWith retinol and collagen.\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "storage.json")


@pytest.fixture
def layer(storage):
    ticks = iter(range(1_000, 1_000_000))
    return CognitiveLayer(
        storage=storage,
        rng=random.Random(42),
        navigation_limit=50,
        clock=lambda: float(next(ticks)),
    )
