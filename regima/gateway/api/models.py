"""
AI model endpoints under /v1.

Chat completions are answered with a fixed dermatology assistant reply in
the OpenAI response shape.
"""
import logging
import time
from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from ..auth import require_api_key
from ..config import GatewayConfig
from ..deps import get_config, get_stats
from ..policies import CONTENT_SAFETY, DERMATOLOGY_DOMAIN, apply_policies
from ..schemas import ChatCompletionRequest
from ..stats import RequestStats
from .pending import pending_endpoint

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["models"], dependencies=[Depends(require_api_key)])

DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"
ASSISTANT_GREETING = (
    "I'm a specialized dermatology AI assistant. "
    "How can I help you with your skincare concerns today?"
)

AVAILABLE_ENDPOINTS = [
    "/v1/openai/chat/completions",
    "/v1/azure-openai/chat/completions",
    "/v1/cognitive/analyze",
    "/agents/skincare-consultant",
    "/agents/dermatology-assistant",
    "/agents/product-advisor",
    "/data/vectors/search",
    "/data/knowledge/query",
    "/tools/image-analysis",
    "/tools/routine-generator",
]


def get_available_endpoints() -> List[str]:
    return list(AVAILABLE_ENDPOINTS)


@router.post("/openai/chat/completions")
def openai_chat_completions(
    payload: Optional[ChatCompletionRequest] = Body(default=None),
    stats: RequestStats = Depends(get_stats),
):
    request = apply_policies(payload or ChatCompletionRequest(), [CONTENT_SAFETY, DERMATOLOGY_DOMAIN])
    now = time.time()
    response = {
        "id": f"chatcmpl-{int(now * 1000)}",
        "object": "chat.completion",
        "created": int(now),
        "model": request.model or DEFAULT_CHAT_MODEL,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": ASSISTANT_GREETING},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 20, "completion_tokens": 25, "total_tokens": 45},
    }
    stats.update_service("openai")
    return response


router.add_api_route(
    "/azure-openai/chat/completions", pending_endpoint("Azure OpenAI"), methods=["POST"]
)
router.add_api_route("/cognitive/analyze", pending_endpoint("Cognitive analysis"), methods=["POST"])


@router.get("/services")
def list_services(config: GatewayConfig = Depends(get_config)):
    return {
        "services": {
            category: {name: service.model_dump() for name, service in services.items()}
            for category, services in config.services.items()
        },
        "availableEndpoints": get_available_endpoints(),
    }
