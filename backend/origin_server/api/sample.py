from fastapi import APIRouter, Depends

from .deps import get_fresh_content_service
from ..schemas.content import SampleResponse
from ..services.fresh_content import FreshContentService

router = APIRouter(tags=["content"])


@router.api_route(
    "/sample.json",
    methods=["GET", "HEAD"],
    response_model=SampleResponse,
    summary="Freshly generated sample payload",
)
async def sample(service: FreshContentService = Depends(get_fresh_content_service)) -> SampleResponse:
    return service.build_sample()
