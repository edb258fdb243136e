from fastapi import APIRouter, Depends

from .deps import get_fresh_content_service
from ..schemas.content import InfoResponse
from ..services.fresh_content import FreshContentService

router = APIRouter(prefix="/api", tags=["content"])


@router.api_route("/info", methods=["GET", "HEAD"], response_model=InfoResponse, summary="Origin server info")
async def info(service: FreshContentService = Depends(get_fresh_content_service)) -> InfoResponse:
    """Return a greeting stamped with the current UTC instant."""
    return service.build_info()
