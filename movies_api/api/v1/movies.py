from http import HTTPStatus
from typing import Any

import orjson
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel

from movies_api.core.exceptions import ValidationFailed
from movies_api.models.movie import Movie
from movies_api.services.movies import MovieService, get_movie_service
from movies_api.services.validation import malformed_body

router = APIRouter()

NOT_FOUND_MESSAGE = 'Movie not found'


class MessageResponse(BaseModel):
    message: str


async def json_body(request: Request) -> Any:
    """Пустое тело считается пустым объектом, невалидный JSON это ошибка валидации"""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        raise ValidationFailed(malformed_body())


@router.get('', response_model=list[Movie])
async def movies_list(
        genre: str | None = Query(default=None, description='Фильтр по жанру без учёта регистра'),
        movie_service: MovieService = Depends(get_movie_service)
) -> list[Movie]:
    return movie_service.get_movies(genre)


@router.get('/{movie_id}', response_model=Movie)
async def movie_details(movie_id: str, movie_service: MovieService = Depends(get_movie_service)) -> Movie:
    movie = movie_service.get_by_id(movie_id)
    if not movie:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return movie


@router.post('', response_model=Movie, status_code=HTTPStatus.CREATED)
async def movie_create(
        payload: Any = Depends(json_body),
        movie_service: MovieService = Depends(get_movie_service)
) -> Movie:
    return movie_service.create_movie(payload)


@router.patch('/{movie_id}', response_model=Movie)
async def movie_update(
        movie_id: str,
        payload: Any = Depends(json_body),
        movie_service: MovieService = Depends(get_movie_service)
) -> Movie:
    movie = movie_service.update_movie(movie_id, payload)
    if not movie:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return movie


@router.delete('/{movie_id}', response_model=MessageResponse)
async def movie_delete(movie_id: str, movie_service: MovieService = Depends(get_movie_service)) -> MessageResponse:
    if not movie_service.delete_movie(movie_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return MessageResponse(message='Movie deleted')
