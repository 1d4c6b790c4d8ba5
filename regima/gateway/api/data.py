"""Data service endpoints (vector search, knowledge queries)."""
from fastapi import APIRouter, Depends

from ..auth import require_api_key
from ..config import GatewayConfig
from ..deps import get_config
from ..schemas import describe_services
from .pending import pending_endpoint

router = APIRouter(prefix="/data", tags=["data"], dependencies=[Depends(require_api_key)])

router.add_api_route("/vectors/search", pending_endpoint("Vector search"), methods=["GET"])
router.add_api_route("/knowledge/query", pending_endpoint("Knowledge query"), methods=["POST"])


@router.get("/services")
def data_services(config: GatewayConfig = Depends(get_config)):
    return {"services": describe_services(config.category("data-services"))}
