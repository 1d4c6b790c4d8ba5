import pytest

from regima.gateway.auth import validate_api_key


@pytest.mark.parametrize(
    "key,expected",
    [
        ("regima_test_key_0123456789", True),
        ("regima_" + "x" * 14, True),
        ("regima_" + "x" * 13, False),
        ("other_prefix_0123456789", False),
        ("", False),
        (None, False),
    ],
)
def test_validate_api_key(key, expected):
    assert validate_api_key(key) is expected


def test_missing_key_returns_401(client):
    r = client.get("/v1/services")
    assert r.status_code == 401
    assert r.json() == {
        "error": "Authentication required",
        "message": "API key must be provided in X-API-Key header or apiKey query parameter",
    }


def test_invalid_key_returns_403(client):
    r = client.get("/agents/capabilities", headers={"X-API-Key": "regima_short"})
    assert r.status_code == 403
    assert r.json() == {"error": "Invalid API key", "message": "The provided API key is not valid"}


def test_key_accepted_from_header(client, api_headers):
    assert client.get("/data/services", headers=api_headers).status_code == 200


def test_key_accepted_from_query_param(client, api_key):
    r = client.get("/tools/available", params={"apiKey": api_key})
    assert r.status_code == 200


@pytest.mark.parametrize("path", ["/health", "/gateway/info", "/gateway/config", "/cognitive/status", "/metrics", "/policies", "/docs"])
def test_public_routes_need_no_key(client, path):
    assert client.get(path).status_code == 200


def test_failed_auth_counts_as_error(client):
    client.get("/v1/services")
    stats = client.get("/metrics").json()["requests"]
    assert stats["errors"] == 1
    assert stats["total"] == 2
