import logging
import uuid
from pathlib import Path
from threading import RLock
from typing import Any

from fastapi import Request
from pydantic import TypeAdapter

from movies_api.models.movie import Movie

logger = logging.getLogger(__name__)

_seed_adapter = TypeAdapter(list[Movie])


class MovieRepository:
    """Упорядоченная коллекция фильмов в памяти.

    Каждая операция держит блокировку целиком, запрос не видит
    наполовину применённых изменений.
    """

    def __init__(self, movies: list[Movie] | None = None):
        self._movies: list[Movie] = list(movies or [])
        self._lock = RLock()

    @classmethod
    def from_seed(cls, path: Path) -> 'MovieRepository':
        """Загрузка начальных данных из JSON-файла"""
        movies = _seed_adapter.validate_json(Path(path).read_bytes())
        ids = {movie.id for movie in movies}
        if len(ids) != len(movies):
            raise ValueError(f"Duplicate movie ids in seed file {path}")
        logger.info(f"Loaded {len(movies)} movies from {path}")
        return cls(movies)

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def _index_of(self, movie_id: str) -> int | None:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None

    def list(self, genre: str | None = None) -> list[Movie]:
        with self._lock:
            if not genre:
                return list(self._movies)
            wanted = genre.lower()
            return [
                movie for movie in self._movies
                if any(g.lower() == wanted for g in movie.genre)
            ]

    def get_by_id(self, movie_id: str) -> Movie | None:
        with self._lock:
            index = self._index_of(movie_id)
            return None if index is None else self._movies[index]

    def create(self, fields: dict[str, Any]) -> Movie:
        with self._lock:
            movie_id = str(uuid.uuid4())
            while self._index_of(movie_id) is not None:
                movie_id = str(uuid.uuid4())

            movie = Movie(**{**fields, 'id': movie_id})
            self._movies.append(movie)
            logger.info(f"Movie {movie_id} created")
            return movie

    def delete_by_id(self, movie_id: str) -> bool:
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return False
            del self._movies[index]
            logger.info(f"Movie {movie_id} deleted")
            return True

    def update_by_id(self, movie_id: str, fields: dict[str, Any]) -> Movie | None:
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return None
            changes = {key: value for key, value in fields.items() if key != 'id'}
            movie = self._movies[index].model_copy(update=changes)
            self._movies[index] = movie
            logger.info(f"Movie {movie_id} updated: {sorted(changes)}")
            return movie


def get_repository(request: Request) -> MovieRepository:
    """Репозиторий создаётся в lifespan приложения"""
    return request.app.state.repository
