from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from movies_api.api.v1 import movies
from movies_api.core import config, logger
from movies_api.core.cors import OriginGateMiddleware
from movies_api.core.exceptions import ValidationFailed, http_exception_handler, validation_failed_handler
from movies_api.db.repository import MovieRepository

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    # Коллекция живёт ровно столько, сколько живёт приложение
    application.state.repository = MovieRepository.from_seed(config.settings.seed_path)
    log.info(f"✅ Movie repository ready: {len(application.state.repository)} movies")
    log.info(f"✅ Serving {config.settings.project_name} on {config.settings.base_url}")

    yield

    application.state.repository = None
    log.info("✅ Movie repository released")


app = FastAPI(
    title=config.settings.project_name,
    docs_url='/api/openapi',
    openapi_url='/api/openapi.json',
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

app.add_exception_handler(ValidationFailed, validation_failed_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

# Последний добавленный middleware выполняется первым: сначала проверка Origin, затем CORS-заголовки
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.settings.allowed_origins,
    allow_methods=['*'],
    allow_headers=['*'],
)
app.add_middleware(OriginGateMiddleware, allowed_origins=config.settings.allowed_origins)


@app.get('/')
async def read_root() -> dict:
    return {'message': 'hello world'}


app.include_router(movies.router, prefix='/movies', tags=['movies'])

if __name__ == '__main__':
    uvicorn.run(
        'movies_api.main:app',
        host=config.settings.host,
        port=config.settings.port,
        log_config=logger.LOGGING,
        log_level=config.settings.log_level.lower(),
    )
