"""
Gateway introspection endpoints: info, health and raw configuration.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends

from ..config import GatewayConfig
from ..deps import get_config, get_stats, get_uptime_seconds
from ..stats import RequestStats

router = APIRouter(tags=["gateway"])

SERVICE_CATEGORIES = ["ai-models", "ai-agents", "data-services", "tools", "cognitive"]


def get_service_health() -> Dict[str, str]:
    return {category: "healthy" for category in SERVICE_CATEGORIES}


@router.get("/gateway/info")
def gateway_info(
    config: GatewayConfig = Depends(get_config),
    stats: RequestStats = Depends(get_stats),
    uptime: float = Depends(get_uptime_seconds),
):
    return {
        "gateway": config.gateway.model_dump(),
        "services": [
            {"category": category, "services": list(services.keys())}
            for category, services in config.services.items()
        ],
        "policies": list(config.policies.keys()),
        "status": "operational",
        "uptime": uptime,
        "stats": stats.snapshot(),
    }


@router.get("/health")
def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": get_service_health(),
    }


@router.get("/gateway/config")
def gateway_config(config: GatewayConfig = Depends(get_config)):
    return config.model_dump()
