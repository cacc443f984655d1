import logging

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from movies_api.services.validation import ValidationFailure

logger = logging.getLogger(__name__)


class ValidationFailed(Exception):
    """Тело запроса не прошло проверку схемы фильма"""

    def __init__(self, failure: ValidationFailure):
        super().__init__(failure)
        self.failure = failure


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=400,
        content={'error': [error.model_dump() for error in exc.failure.errors]},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=exc.status_code,
        content={'message': exc.detail},
        headers=getattr(exc, 'headers', None),
    )
