"""
Tests for the FastAPI layer using the bundled sample catalog.
"""

import pytest
from fastapi.testclient import TestClient

from api import create_app

from conftest import SAMPLE_PATH


@pytest.fixture
def client():
    with TestClient(create_app(data_path=SAMPLE_PATH)) as c:  # runs the startup hook
        yield c


def test_health(client):
    body = client.get('/health').json()
    assert body['status'] == 'ok'
    assert body['engine_ready'] is True
    assert body['movie_count'] == 12


def test_list_movies(client):
    movies = client.get('/movies').json()
    assert [m['id'] for m in movies] == list(range(1, 13))
    assert movies[0]['movie_name'] == 'The Prison Escape'
    assert movies[0]['imdb_rating'] == 9.3


def test_movie_details(client):
    resp = client.get('/movies/2')
    assert resp.status_code == 200
    assert resp.json()['movie_name'] == 'The Family Boss'


def test_movie_details_not_found(client):
    resp = client.get('/movies/999')
    assert resp.status_code == 404
    assert resp.json()['detail'] == 'Movie with ID 999 was not found.'


def test_search_single_result(client):
    body = client.get('/movies/search', params={'name': 'prison'}).json()
    assert [m['id'] for m in body['movies']] == [1]
    assert body['search_message'] == 'Found 1 movie.'
    assert body['search_error'] is None
    assert body['search_name'] == 'prison'


def test_search_multiple_results(client):
    body = client.get('/movies/search', params={'genre': 'sci-fi'}).json()
    assert [m['id'] for m in body['movies']] == [6, 7, 10]
    assert body['search_message'] == 'Found 3 movies.'


def test_search_by_id(client):
    body = client.get('/movies/search', params={'id': '2'}).json()
    assert [m['movie_name'] for m in body['movies']] == ['The Family Boss']
    assert body['search_id'] == '2'


def test_search_no_matches(client):
    body = client.get('/movies/search', params={'name': 'The Prison Escape', 'id': '2'}).json()
    assert body['movies'] == []
    assert body['search_message'] == 'No movies found matching your search.'


def test_search_no_criteria(client):
    body = client.get('/movies/search', params={'name': '  ', 'genre': ''}).json()
    assert body['movies'] == []
    assert body['search_error'] == 'Provide at least one search criterion.'


@pytest.mark.parametrize('bad_id,error', [
    ('abc', 'Invalid movie ID format. Use numbers only.'),
    ('0', 'Invalid movie ID. Movie IDs must be greater than 0.'),
    ('-3', 'Invalid movie ID. Movie IDs must be greater than 0.'),
])
def test_search_invalid_id(client, bad_id, error):
    resp = client.get('/movies/search', params={'id': bad_id, 'name': 'x'})
    assert resp.status_code == 200
    body = resp.json()
    assert body['search_error'] == error
    assert len(body['movies']) == 12  # falls back to the full catalog
    assert body['search_id'] == ''
    assert body['search_name'] == 'x'


def test_genres(client):
    genres = client.get('/genres').json()
    assert genres == sorted(set(genres))
    assert 'Drama' in genres and 'Action/Sci-Fi' in genres


def test_missing_catalog_serves_empty(tmp_path):
    with TestClient(create_app(data_path=tmp_path / 'missing.json')) as c:
        assert c.get('/health').json()['movie_count'] == 0
        assert c.get('/movies').json() == []
        assert c.get('/movies/1').status_code == 404


def test_startup_keeps_existing_log_handlers(log_records):
    with TestClient(create_app(data_path=SAMPLE_PATH)) as c:
        c.get('/movies/search', params={'name': 'prison'})
    assert any('[API] /movies/search' in r['message'] for r in log_records)
    assert any('[API] Startup complete' in r['message'] for r in log_records)
