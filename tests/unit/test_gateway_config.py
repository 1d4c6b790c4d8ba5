import json

import pytest

from regima.gateway.config import (
    DEFAULT_MAX_BODY_BYTES,
    GatewayConfigError,
    GatewaySettings,
    load_gateway_config,
    resolve_config_path,
)


def test_repository_config_loads(gateway_config):
    assert gateway_config.gateway.name == "RegimAI Gateway"
    assert set(gateway_config.category("ai-agents")) == {
        "skincare-consultant",
        "dermatology-assistant",
        "product-advisor",
    }
    assert gateway_config.category("missing") == {}
    assert gateway_config.integration.skintwin.enabled is True


def test_config_path_from_env(tmp_path, monkeypatch):
    target = tmp_path / "gateway.json"
    target.write_text(json.dumps({"gateway": {"name": "Staging", "version": "0.1"}}), encoding="utf-8")
    monkeypatch.setenv("GATEWAY_CONFIG_PATH", str(target))

    assert resolve_config_path() == target
    config = load_gateway_config()
    assert config.gateway.name == "Staging"
    assert config.services == {}
    assert config.integration.skintwin.enabled is False


def test_missing_config_file(tmp_path):
    with pytest.raises(GatewayConfigError, match="not found"):
        load_gateway_config(tmp_path / "absent.json")


def test_malformed_json(tmp_path):
    target = tmp_path / "gateway.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(GatewayConfigError, match="not valid JSON"):
        load_gateway_config(target)


def test_config_without_gateway_section(tmp_path):
    target = tmp_path / "gateway.json"
    target.write_text(json.dumps({"services": {}}), encoding="utf-8")
    with pytest.raises(GatewayConfigError, match="invalid"):
        load_gateway_config(target)


def test_service_without_endpoint_is_rejected(tmp_path):
    target = tmp_path / "gateway.json"
    target.write_text(
        json.dumps({"gateway": {"name": "G", "version": "1"}, "services": {"tools": {"x": {}}}}),
        encoding="utf-8",
    )
    with pytest.raises(GatewayConfigError):
        load_gateway_config(target)


def test_settings_defaults():
    settings = GatewaySettings.from_env()
    assert settings.port == 8080
    assert settings.allowed_origins == ["http://localhost:3000"]
    assert settings.max_body_bytes == DEFAULT_MAX_BODY_BYTES


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://regima.site,https://www.regima.site")
    monkeypatch.setenv("GATEWAY_MAX_BODY_BYTES", "1024")
    settings = GatewaySettings.from_env()
    assert settings.port == 9090
    assert settings.allowed_origins == ["https://regima.site", "https://www.regima.site"]
    assert settings.max_body_bytes == 1024
