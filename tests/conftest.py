import pytest
from fastapi.testclient import TestClient

from placeholder_tiles.app import create_app
from placeholder_tiles.lib import load_font


@pytest.fixture(scope="session")
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def fresh_font_cache():
    load_font.cache_clear()
    yield
    load_font.cache_clear()
