"""
AI agent endpoints.

The skincare consultant returns a canned consultation shaped by the caller's
skin profile; the other agents are not wired yet.
"""
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..auth import require_api_key
from ..config import GatewayConfig
from ..deps import get_config, get_stats
from ..schemas import ConsultationRequest, describe_services
from ..stats import RequestStats
from .pending import pending_endpoint

router = APIRouter(prefix="/agents", tags=["agents"], dependencies=[Depends(require_api_key)])

CONSULTATION_DISCLAIMER = (
    "This consultation is for informational purposes only and does not replace "
    "professional dermatological advice."
)


@router.post("/skincare-consultant")
def skincare_consultant(
    payload: Optional[ConsultationRequest] = Body(default=None),
    stats: RequestStats = Depends(get_stats),
):
    payload = payload or ConsultationRequest()
    consultation = {
        "id": f"consultation-{int(time.time() * 1000)}",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "analysis": {
            "skinType": payload.skin_type or "combination",
            "primaryConcerns": payload.concerns or ["hydration", "anti-aging"],
            "currentRoutine": payload.routine or "basic",
        },
        "recommendations": [
            {
                "type": "product",
                "category": "cleanser",
                "recommendation": "Gentle foaming cleanser for combination skin",
                "reasoning": "Based on your skin type and current routine",
            },
            {
                "type": "routine",
                "timeOfDay": "morning",
                "steps": ["cleanser", "vitamin-c-serum", "moisturizer", "sunscreen"],
                "reasoning": "Protective morning routine for anti-aging goals",
            },
        ],
        "confidence": 0.85,
        "disclaimer": CONSULTATION_DISCLAIMER,
    }
    stats.update_service("skincare-consultant")
    return consultation


router.add_api_route(
    "/dermatology-assistant", pending_endpoint("Dermatology assistant"), methods=["POST"]
)
router.add_api_route("/product-advisor", pending_endpoint("Product advisor"), methods=["POST"])


@router.get("/capabilities")
def agent_capabilities(config: GatewayConfig = Depends(get_config)):
    return {"agents": describe_services(config.category("ai-agents"))}
