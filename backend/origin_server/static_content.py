"""Static file responder that runs ahead of the API routes."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from starlette.exceptions import HTTPException
from starlette.responses import PlainTextResponse
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

# Statuses StaticFiles raises when it has nothing to serve for the request.
_MISS_STATUSES = {404, 405}


def match_route_path(path: str, route_paths: Iterable[str]) -> Optional[str]:
    """Return the route path ``path`` resolves to, ignoring case and one trailing slash."""
    candidate = path.lower()
    if len(candidate) > 1 and candidate.endswith("/"):
        candidate = candidate[:-1]
    return candidate if candidate in route_paths else None


class StaticContentMiddleware:
    """Serve a file from ``directory`` when one matches, otherwise pass the request on.

    Path normalisation, traversal protection, MIME types, conditional requests
    and ``index.html`` for directories are all handled by ``StaticFiles``.
    Requests handed on for one of ``route_paths`` are rewritten to the route's
    canonical path, so ``/Health`` and ``/health/`` reach ``/health``.
    """

    def __init__(self, app: ASGIApp, directory: str | Path, route_paths: Iterable[str] = ()) -> None:
        self.app = app
        self.directory = Path(directory)
        self.route_paths = frozenset(route_paths)
        # check_config() is never called, so a missing root just means every lookup misses.
        self.static = StaticFiles(directory=self.directory, html=True, check_dir=False)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in ("GET", "HEAD"):
            await self.app(scope, receive, send)
            return

        try:
            response = await self.static.get_response(self.static.get_path(scope), scope)
        except HTTPException as exc:
            if exc.status_code in _MISS_STATUSES:
                await self.pass_on(scope, receive, send)
                return
            logger.warning("Static lookup for %s failed with %s", scope["path"], exc.status_code)
            response = PlainTextResponse(exc.detail, status_code=exc.status_code)

        if response.status_code == 404:
            # 404.html from the content root; let the routes have a go first.
            await self.pass_on(scope, receive, send)
            return

        await response(scope, receive, send)

    async def pass_on(self, scope: Scope, receive: Receive, send: Send) -> None:
        route_path = match_route_path(scope["path"], self.route_paths)
        if route_path is not None and route_path != scope["path"]:
            scope = dict(scope, path=route_path, raw_path=route_path.encode("ascii"))
        await self.app(scope, receive, send)
