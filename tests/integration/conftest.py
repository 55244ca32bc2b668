import pytest
from fastapi.testclient import TestClient

from app import deps
from app.http_handler import app
from app.repositories.post import PostRepository


@pytest.fixture
def post_repository(posts_table) -> PostRepository:
    return PostRepository()


@pytest.fixture
def test_client(post_repository: PostRepository):
    app.dependency_overrides[deps.post_repository] = lambda: post_repository
    yield TestClient(app)
    app.dependency_overrides = {}
