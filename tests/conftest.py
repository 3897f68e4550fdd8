"""
Shared fixtures: a small in-memory catalog, the bundled sample, and a loguru capture sink.
"""

from pathlib import Path
from typing import List

import pytest
from loguru import logger

from catalog.catalog_store import CatalogStore
from catalog.models import Movie
from catalog.search_engine import SearchEngine

SAMPLE_PATH = Path(__file__).resolve().parents[1] / 'data' / 'movies.json'


def make_movie(id: int, movie_name: str, genre: str = 'Drama', **overrides) -> Movie:
    fields = dict(
        id=id,
        movie_name=movie_name,
        director='Some Director',
        year=1994,
        genre=genre,
        description='A movie.',
        duration=120,
        imdb_rating=8.0,
    )
    fields.update(overrides)
    return Movie(**fields)


@pytest.fixture
def two_movie_store() -> CatalogStore:
    return CatalogStore([
        make_movie(1, 'The Prison Escape', 'Drama'),
        make_movie(2, 'The Family Boss', 'Crime'),
    ])


@pytest.fixture
def two_movie_engine(two_movie_store) -> SearchEngine:
    return SearchEngine(two_movie_store)


@pytest.fixture(scope='session')
def sample_store() -> CatalogStore:
    return CatalogStore.from_json_file(SAMPLE_PATH)


@pytest.fixture
def sample_engine(sample_store) -> SearchEngine:
    return SearchEngine(sample_store)


@pytest.fixture
def log_records() -> List[dict]:
    """Collect loguru records emitted during the test."""
    records: List[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level='DEBUG')
    yield records
    logger.remove(handler_id)
