from fastapi import APIRouter
from . import fallback, health, info, sample

api_router = APIRouter()
api_router.include_router(info.router)
api_router.include_router(sample.router)
api_router.include_router(health.router)
# Registered last so it only sees requests no other route matched.
api_router.include_router(fallback.router)

# Paths the static responder may rewrite case and trailing slash onto.
NAMED_ROUTE_PATHS = ("/api/info", "/sample.json", "/health")
