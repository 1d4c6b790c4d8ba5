"""
Gateway configuration.

The service catalogue, policies and integration toggles come from a JSON file
(`config/gateway.json`, override with GATEWAY_CONFIG_PATH); runtime knobs come
from the environment.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from regima.utils.env import env_int, env_list, env_str

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "gateway.json"
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024


class GatewayConfigError(Exception):
    """Raised when the gateway configuration file is missing or malformed."""


class GatewayIdentity(BaseModel):
    name: str
    version: str
    description: str = ""


class ServiceDefinition(BaseModel):
    endpoint: str
    description: str = ""
    capabilities: List[str] = Field(default_factory=list)
    model_config = ConfigDict(extra="allow")


class SkinTwinIntegration(BaseModel):
    enabled: bool = False
    model_config = ConfigDict(extra="allow")


class IntegrationConfig(BaseModel):
    skintwin: SkinTwinIntegration = Field(default_factory=SkinTwinIntegration)
    model_config = ConfigDict(extra="allow")


class GatewayConfig(BaseModel):
    gateway: GatewayIdentity
    services: Dict[str, Dict[str, ServiceDefinition]] = Field(default_factory=dict)
    policies: Dict[str, Any] = Field(default_factory=dict)
    routing: Dict[str, Any] = Field(default_factory=dict)
    integration: IntegrationConfig = Field(default_factory=IntegrationConfig)

    def category(self, name: str) -> Dict[str, ServiceDefinition]:
        return self.services.get(name, {})


def resolve_config_path() -> Path:
    raw = os.getenv("GATEWAY_CONFIG_PATH")
    return Path(raw).expanduser() if raw else DEFAULT_CONFIG_PATH


def load_gateway_config(path: Optional[Path] = None) -> GatewayConfig:
    config_path = path or resolve_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise GatewayConfigError(f"Gateway config not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise GatewayConfigError(f"Gateway config is not valid JSON ({config_path}): {exc}") from exc
    try:
        return GatewayConfig.model_validate(raw)
    except ValidationError as exc:
        raise GatewayConfigError(f"Gateway config is invalid ({config_path}): {exc}") from exc


@dataclass(frozen=True)
class GatewaySettings:
    """Runtime settings read from the environment."""

    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        return cls(
            host=env_str("GATEWAY_HOST", "0.0.0.0"),
            port=env_int("PORT", 8080),
            allowed_origins=env_list("ALLOWED_ORIGINS", ["http://localhost:3000"]),
            max_body_bytes=env_int("GATEWAY_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        )
