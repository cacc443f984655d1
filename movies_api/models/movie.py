# Схема фильма: одни и те же типы полей используются для создания и для частичного обновления
from typing import Annotated, Literal, get_args

from pydantic import AfterValidator, AnyUrl, BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

Genre = Literal['Action', 'Adventure', 'Crime', 'Comedy', 'Drama', 'Fantasy', 'Horror', 'Thriller', 'Sci-Fi']
GENRES: tuple[str, ...] = get_args(Genre)

DEFAULT_RATE = 5

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Проверяет URL, но хранит строку в том виде, в котором её прислали"""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError('url_parsing', 'Poster must be a valid URL') from None
    return value


def _whole_number(value):
    """Строки и bool не числа, а 2010.0 из JSON это целое 2010"""
    if isinstance(value, (str, bool)):
        raise PydanticCustomError('int_type', 'Input should be a valid integer')
    return value


Title = Annotated[str, Field(description='Название фильма')]
Year = Annotated[
    int,
    Field(strict=False, ge=1900, le=2024, description='Год выхода'),
    BeforeValidator(_whole_number),
]
Director = Annotated[str, Field(description='Режиссёр')]
Duration = Annotated[
    int,
    Field(strict=False, gt=0, description='Длительность, мин'),
    BeforeValidator(_whole_number),
]
Rate = Annotated[float, Field(ge=0, le=10, description='Рейтинг')]
Poster = Annotated[str, AfterValidator(_check_url), Field(description='URL постера')]
Genres = Annotated[list[Genre], Field(min_length=1, description='Жанры')]


class MovieCreate(BaseModel):
    """Все поля фильма, кроме id"""

    model_config = ConfigDict(strict=True, extra='ignore')

    title: Title
    year: Year
    director: Director
    duration: Duration
    rate: Rate = DEFAULT_RATE
    poster: Poster
    genre: Genres


class MovieUpdate(BaseModel):
    """Частичное обновление.

    Значение по умолчанию None не проверяется: пропущенное поле просто
    отсутствует, а явный null остаётся ошибкой типа.
    """

    model_config = ConfigDict(strict=True, extra='ignore')

    title: Title = None
    year: Year = None
    director: Director = None
    duration: Duration = None
    rate: Rate = None
    poster: Poster = None
    genre: Genres = None


class Movie(MovieCreate):
    id: str


class FieldError(BaseModel):
    field: str
    message: str
