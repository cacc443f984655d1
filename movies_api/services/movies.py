import logging
from functools import lru_cache
from typing import Any

from fastapi import Depends

from movies_api.core.exceptions import ValidationFailed
from movies_api.db.repository import MovieRepository, get_repository
from movies_api.models.movie import Movie
from movies_api.services.validation import ValidationFailure, validate_movie, validate_partial_movie

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, repository: MovieRepository):
        self.repository = repository

    def get_movies(self, genre: str | None = None) -> list[Movie]:
        return self.repository.list(genre)

    def get_by_id(self, movie_id: str) -> Movie | None:
        movie = self.repository.get_by_id(movie_id)
        if movie is None:
            logger.warning(f"Movie {movie_id} not found")
        return movie

    def create_movie(self, payload: Any) -> Movie:
        """Проверка тела запроса и создание фильма с новым id"""
        result = validate_movie(payload)
        if isinstance(result, ValidationFailure):
            raise ValidationFailed(result)
        return self.repository.create(result.data)

    def update_movie(self, movie_id: str, payload: Any) -> Movie | None:
        """Тело проверяется до поиска фильма, поэтому ошибка схемы важнее 404"""
        result = validate_partial_movie(payload)
        if isinstance(result, ValidationFailure):
            raise ValidationFailed(result)

        movie = self.repository.update_by_id(movie_id, result.data)
        if movie is None:
            logger.warning(f"Movie {movie_id} not found for update")
        return movie

    def delete_movie(self, movie_id: str) -> bool:
        deleted = self.repository.delete_by_id(movie_id)
        if not deleted:
            logger.warning(f"Movie {movie_id} not found for delete")
        return deleted


@lru_cache()
def get_movie_service(
        repository: MovieRepository = Depends(get_repository),
) -> MovieService:
    return MovieService(repository)
