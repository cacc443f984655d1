import logging
from collections.abc import Collection

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


def is_origin_allowed(origin: str | None, allowed_origins: Collection[str]) -> bool:
    """Запросы без Origin (не из браузера) пропускаются всегда"""
    if not origin:
        return True
    return origin in allowed_origins


class OriginGateMiddleware(BaseHTTPMiddleware):
    """Отклоняет запросы с Origin не из списка разрешённых до маршрутизации"""

    def __init__(self, app: ASGIApp, allowed_origins: Collection[str]):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get('origin')
        if not is_origin_allowed(origin, self.allowed_origins):
            logger.warning(f"Origin {origin} rejected for {request.method} {request.url.path}")
            return PlainTextResponse('Not allowed by CORS', status_code=403)
        return await call_next(request)
