import logging
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from movies_api.models.movie import FieldError, MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)

# Сообщения, которые отличаются от стандартных сообщений pydantic
MESSAGES: dict[tuple[str, str], str] = {
    ('title', 'missing'): 'Movie title is required.',
    ('title', 'string_type'): 'Movie title must be a string',
    ('genre', 'missing'): 'Movie genre is required.',
    ('genre', 'list_type'): 'Movie genre must be an array of enum Genre',
}

BODY_FIELD = 'body'


class ValidationSuccess(BaseModel):
    ok: Literal[True] = True
    data: dict[str, Any]


class ValidationFailure(BaseModel):
    ok: Literal[False] = False
    errors: list[FieldError]


ValidationResult = ValidationSuccess | ValidationFailure


def _field_name(loc: tuple[int | str, ...]) -> str:
    if not loc:
        return BODY_FIELD
    return '.'.join(str(part) for part in loc)


def _to_field_errors(exc: ValidationError) -> list[FieldError]:
    errors = []
    for error in exc.errors():
        field = _field_name(error['loc'])
        message = MESSAGES.get((field, error['type']), error['msg'])
        errors.append(FieldError(field=field, message=message))
    return errors


def _validate(schema: type[BaseModel], payload: Any, exclude_unset: bool) -> ValidationResult:
    try:
        movie = schema.model_validate(payload)
    except ValidationError as e:
        errors = _to_field_errors(e)
        logger.info(f"{schema.__name__} validation failed: {[error.field for error in errors]}")
        return ValidationFailure(errors=errors)
    return ValidationSuccess(data=movie.model_dump(exclude_unset=exclude_unset))


def validate_movie(payload: Any) -> ValidationResult:
    """Проверка всех полей фильма перед созданием, rate по умолчанию 5"""
    return _validate(MovieCreate, payload, exclude_unset=False)


def validate_partial_movie(payload: Any) -> ValidationResult:
    """Проверка только тех полей, которые пришли в запросе"""
    return _validate(MovieUpdate, payload, exclude_unset=True)


def malformed_body() -> ValidationFailure:
    return ValidationFailure(errors=[FieldError(field=BODY_FIELD, message='Malformed JSON body')])
