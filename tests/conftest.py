from functional.settings import test_settings
import httpx
import pytest
import pytest_asyncio

from movies_api.core.config import settings
from movies_api.db.repository import MovieRepository
from movies_api.main import app


@pytest.fixture
def repository():
    """Свежая коллекция из seed-файла для каждого теста"""
    return MovieRepository.from_seed(settings.seed_path)


@pytest.fixture
def movies_app(repository):
    app.state.repository = repository
    try:
        yield app
    finally:
        app.state.repository = None


@pytest.fixture
def movie_payload():
    return {
        'title': 'Inception',
        'year': 2010,
        'director': 'Nolan',
        'duration': 148,
        'poster': 'https://x.com/p.jpg',
        'genre': ['Action', 'Sci-Fi'],
    }


@pytest_asyncio.fixture
async def api_client(movies_app):
    transport = httpx.ASGITransport(app=movies_app)
    async with httpx.AsyncClient(transport=transport, base_url=test_settings.service_url) as client:
        yield client


@pytest_asyncio.fixture
async def make_request(api_client):
    async def inner(
            method: str,
            path: str = '',
            json: dict | list | None = None,
            content: str | bytes | None = None,
            query_data: dict | None = None,
            headers: dict | None = None,
    ):
        response = await api_client.request(
            method,
            f'{test_settings.movies_path}{path}',
            json=json,
            content=content,
            params=query_data,
            headers=headers,
        )
        if response.headers.get('content-type', '').startswith('application/json'):
            body = response.json()
        else:
            body = response.text
        return {
            'body': body,
            'headers': dict(response.headers),
            'status': response.status_code
        }
    return inner


@pytest_asyncio.fixture
async def make_get_request(make_request):
    async def inner(path: str = '', query_data: dict | None = None, headers: dict | None = None):
        return await make_request('GET', path, query_data=query_data, headers=headers)
    return inner


@pytest_asyncio.fixture
async def create_movie(make_request, movie_payload):
    """Создаёт фильм через API и возвращает ответ сервиса"""
    async def inner(**overrides):
        return await make_request('POST', json={**movie_payload, **overrides})
    return inner
