from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_class=PlainTextResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> str:
    """
    Health check endpoint to verify the origin is running.

    Returns:
        str: Fixed plain-text status line
    """
    return "Origin Server OK"
