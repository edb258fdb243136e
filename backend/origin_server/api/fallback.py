"""Catch-all for requests that neither the static files nor the named routes answered."""
import logging

from fastapi import APIRouter, HTTPException, Request, status

logger = logging.getLogger(__name__)

router = APIRouter()

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# Must stay the last route registered: anything listed after it is unreachable.
@router.api_route("/{path:path}", methods=_ALL_METHODS, include_in_schema=False)
async def log_unmatched(request: Request) -> None:
    logger.info("Origin Server: %s %s", request.method, request.url.path)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
