"""
Monitoring and documentation endpoints: metrics, policies and the JSON
API reference served at /docs.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ..config import GatewayConfig
from ..deps import get_config, get_stats
from ..policies import get_active_policy_rules
from ..stats import RequestStats
from .cognitive import get_cognitive_metrics

router = APIRouter(tags=["monitoring"])


def get_service_metrics(stats: RequestStats) -> Dict[str, Any]:
    snapshot = stats.snapshot()
    return {
        "totalRequests": snapshot["total"],
        "requestsByService": snapshot["byService"],
        "errorRate": stats.error_rate(),
    }


def generate_endpoint_documentation() -> List[Dict[str, str]]:
    return [
        {
            "endpoint": "/v1/openai/chat/completions",
            "method": "POST",
            "description": "OpenAI chat completions for dermatology consultations",
            "authentication": "required",
        },
        {
            "endpoint": "/agents/skincare-consultant",
            "method": "POST",
            "description": "AI agent for personalized skincare consultations",
            "authentication": "required",
        },
        {
            "endpoint": "/tools/image-analysis",
            "method": "POST",
            "description": "Analyze skin images for conditions and recommendations",
            "authentication": "required",
        },
    ]


def generate_api_examples() -> Dict[str, Any]:
    return {
        "skincareConsultation": {
            "endpoint": "/agents/skincare-consultant",
            "request": {
                "skinType": "combination",
                "concerns": ["acne", "dark-spots"],
                "routine": "basic",
                "goals": ["clear-skin", "even-tone"],
            },
        },
        "imageAnalysis": {
            "endpoint": "/tools/image-analysis",
            "request": {
                "imageData": "base64_encoded_image_data",
                "analysisType": "skin-assessment",
            },
        },
    }


@router.get("/metrics")
def metrics(
    config: GatewayConfig = Depends(get_config),
    stats: RequestStats = Depends(get_stats),
):
    return {
        "gateway": config.gateway.name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "requests": stats.snapshot(),
        "services": get_service_metrics(stats),
        "cognitive": get_cognitive_metrics(),
    }


@router.get("/policies")
def policies(config: GatewayConfig = Depends(get_config)):
    return {
        "policies": config.policies,
        "routing": config.routing,
        "activeRules": get_active_policy_rules(),
    }


@router.get("/docs")
def api_documentation(config: GatewayConfig = Depends(get_config)):
    return {
        "title": f"{config.gateway.name} API Documentation",
        "version": config.gateway.version,
        "description": config.gateway.description,
        "endpoints": generate_endpoint_documentation(),
        "authentication": {
            "type": "API Key",
            "header": "X-API-Key",
            "description": "Provide your RegimA API key in the X-API-Key header",
        },
        "examples": generate_api_examples(),
    }
