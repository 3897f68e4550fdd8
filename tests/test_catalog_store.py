"""
Tests for the catalog store: ordering, id index, fail-closed lookups and duplicates.
"""

import pytest

from catalog.catalog_store import CatalogStore

from conftest import SAMPLE_PATH, make_movie


def test_get_all_keeps_source_order(two_movie_store):
    assert [m.id for m in two_movie_store.get_all()] == [1, 2]
    assert len(two_movie_store) == 2
    assert two_movie_store.size() == 2


def test_get_all_is_shared_not_copied(two_movie_store):
    assert two_movie_store.get_all() is two_movie_store.get_all()


def test_get_by_id(two_movie_store):
    movie = two_movie_store.get_by_id(1)
    assert movie is two_movie_store.get_all()[0]
    assert movie.movie_name == 'The Prison Escape'


@pytest.mark.parametrize('movie_id', [None, 0, -1, 999, True, '1', 1.0])
def test_get_by_id_fails_closed(two_movie_store, movie_id):
    assert two_movie_store.get_by_id(movie_id) is None


def test_duplicate_ids_last_write_wins(log_records):
    first = make_movie(7, 'First')
    second = make_movie(7, 'Second')
    store = CatalogStore([first, make_movie(8, 'Other'), second])

    assert store.get_by_id(7) is second
    assert store.get_all() == (first, store.get_by_id(8), second)  # both kept
    assert store.ids() == [7, 8]
    assert any(r['level'].name == 'WARNING' and 'Duplicate movie id 7' in r['message'] for r in log_records)


def test_empty_store():
    store = CatalogStore()
    assert store.get_all() == ()
    assert store.get_by_id(1) is None


def test_from_records():
    store = CatalogStore.from_records([{
        'id': 3, 'movieName': 'X', 'director': 'D', 'year': 2000, 'genre': 'Drama',
        'description': '', 'duration': 90, 'imdbRating': 7.5,
    }])
    assert store.get_by_id(3).movie_name == 'X'


def test_from_malformed_records_is_empty():
    assert len(CatalogStore.from_records([{'id': 3}])) == 0


def test_from_json_file():
    store = CatalogStore.from_json_file(SAMPLE_PATH)
    assert len(store) == 12
    assert store.get_by_id(2).movie_name == 'The Family Boss'


def test_from_missing_json_file(tmp_path):
    store = CatalogStore.from_json_file(tmp_path / 'missing.json')
    assert len(store) == 0
    assert store.get_by_id(1) is None
