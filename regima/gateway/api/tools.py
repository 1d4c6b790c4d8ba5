"""Tool endpoints: skin image analysis and routine generation."""
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..auth import require_api_key
from ..config import GatewayConfig
from ..deps import get_config, get_stats
from ..schemas import ImageAnalysisRequest, describe_services
from ..stats import RequestStats
from .pending import pending_endpoint

router = APIRouter(prefix="/tools", tags=["tools"], dependencies=[Depends(require_api_key)])

ANALYSIS_DISCLAIMER = (
    "This analysis is for informational purposes only. "
    "Consult a dermatologist for medical diagnosis."
)


@router.post("/image-analysis")
def image_analysis(
    payload: Optional[ImageAnalysisRequest] = Body(default=None),
    stats: RequestStats = Depends(get_stats),
):
    payload = payload or ImageAnalysisRequest()
    analysis = {
        "id": f"analysis-{int(time.time() * 1000)}",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "analysisType": payload.analysis_type or "skin-assessment",
        "results": {
            "conditions": ["mild-acne", "hyperpigmentation"],
            "severity": "mild",
            "recommendations": ["gentle-exfoliation", "targeted-treatment"],
            "confidence": 0.78,
        },
        "disclaimer": ANALYSIS_DISCLAIMER,
    }
    stats.update_service("image-analysis")
    return analysis


router.add_api_route("/routine-generator", pending_endpoint("Routine generator"), methods=["POST"])


@router.get("/available")
def available_tools(config: GatewayConfig = Depends(get_config)):
    return {"tools": describe_services(config.category("tools"))}
