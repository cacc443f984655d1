import json
import uuid

import pytest

from movies_api.db.repository import MovieRepository
from movies_api.services.validation import validate_movie

SHAWSHANK_ID = 'dcdd0fad-a94c-4810-8acc-5f108d3b18c3'


@pytest.fixture
def fields():
    return validate_movie({
        'title': 'Alien',
        'year': 1979,
        'director': 'Ridley Scott',
        'duration': 117,
        'poster': 'https://img.fruugo.com/product/7/41/14405417_max.jpg',
        'genre': ['Horror', 'Sci-Fi'],
    }).data


class TestMovieRepository:

    def test_seed_is_loaded_in_order(self, repository):
        movies = repository.list()

        assert len(repository) == 9
        assert movies[0].id == SHAWSHANK_ID
        assert len({movie.id for movie in movies}) == len(movies)

    @pytest.mark.parametrize('genre, expected', [('Horror', 0), ('crime', 2), ('ACTION', 5), (None, 9), ('', 9)])
    def test_list_by_genre(self, repository, genre, expected):
        assert len(repository.list(genre)) == expected

    def test_list_returns_copy(self, repository):
        repository.list().clear()

        assert len(repository) == 9

    def test_get_by_id(self, repository):
        assert repository.get_by_id(SHAWSHANK_ID).title == 'The Shawshank Redemption'
        assert repository.get_by_id('missing') is None

    def test_create_appends_with_new_id(self, repository, fields):
        movie = repository.create(fields)

        uuid.UUID(movie.id)
        assert repository.list()[-1] == movie
        assert movie.rate == 5
        assert repository.list('horror') == [movie]

    def test_delete_by_id(self, repository):
        ids = [movie.id for movie in repository.list()]

        assert repository.delete_by_id(ids[1]) is True
        assert repository.delete_by_id(ids[1]) is False
        assert [movie.id for movie in repository.list()] == [ids[0]] + ids[2:]

    def test_update_by_id_merges_in_place(self, repository):
        ids = [movie.id for movie in repository.list()]

        movie = repository.update_by_id(ids[2], {'rate': 7.0, 'genre': ['Thriller']})

        assert movie.id == ids[2]
        assert movie.rate == 7.0
        assert movie.genre == ['Thriller']
        assert movie.title == 'Inception'
        assert repository.list()[2] == movie
        assert [m.id for m in repository.list()] == ids

    def test_update_keeps_id(self, repository):
        movie = repository.update_by_id(SHAWSHANK_ID, {'id': 'other'})

        assert movie.id == SHAWSHANK_ID
        assert repository.get_by_id('other') is None

    def test_update_missing(self, repository):
        assert repository.update_by_id('missing', {'rate': 1.0}) is None

    def test_seed_with_duplicate_ids(self, tmp_path):
        record = {
            'id': 'same',
            'title': 'Heat',
            'year': 1995,
            'director': 'Michael Mann',
            'duration': 170,
            'poster': 'https://x.com/heat.jpg',
            'genre': ['Crime'],
            'rate': 8.3,
        }
        seed = tmp_path / 'movies.json'
        seed.write_text(json.dumps([record, record]))

        with pytest.raises(ValueError):
            MovieRepository.from_seed(seed)
