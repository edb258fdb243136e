import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
import uvicorn

from .api.routes import NAMED_ROUTE_PATHS, api_router
from .core.config import Settings, get_settings
from .core.log_config import configure_logging
from .services.fresh_content import create_fresh_content_service
from .static_content import StaticContentMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        logger.info("Origin Server running on port %s", settings.PORT)
        yield

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="Origin server serving static content and sample JSON",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.fresh_content = create_fresh_content_service(settings)

    # Static files are looked up before any route, so a file named like a
    # route shadows it.
    app.add_middleware(
        StaticContentMiddleware,
        directory=settings.CONTENT_DIR,
        route_paths=NAMED_ROUTE_PATHS,
    )

    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
