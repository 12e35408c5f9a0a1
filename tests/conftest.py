import os
import sys
import pytest

# Ensure the project root (containing the `game_manager` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from game_manager import create_app


class TestConfig:
    TESTING = True
    LOG_LEVEL = 'WARNING'
    CORS_ORIGINS = '*'
    SEED_GAMES = True
    API_VERSION = '1.0.0'


@pytest.fixture()
def flask_app():
    # A fresh app reseeds the shared store, so every test starts from ids 1 and 2
    application = create_app(TestConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def valid_game():
    return {
        'title': 'Hollow Knight',
        'description': 'Hand-drawn metroidvania',
        'genre': 'Metroidvania',
        'platform': 'PC',
        'rating': 9.0,
        'releaseDate': '2017-02-24T00:00:00Z',
        'imageUrl': 'https://example.com/hollow-knight.jpg',
    }
