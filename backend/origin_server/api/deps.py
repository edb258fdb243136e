"""
Dependency injection for FastAPI routes.
"""
from fastapi import Request

from ..services.fresh_content import FreshContentService


def get_fresh_content_service(request: Request) -> FreshContentService:
    """
    Return the FreshContentService bound to the running application.

    The service is created once by the application factory and stored on
    ``app.state`` so tests can swap in a deterministic clock or random source.
    """
    return request.app.state.fresh_content
