import pytest

from app.auth import StaticCredentialVerifier
from app.repositories.post import PostRepository
from app.services.post import PostService


@pytest.fixture
def credential_verifier() -> StaticCredentialVerifier:
    return StaticCredentialVerifier("admin", "password123")


@pytest.fixture
def post_repository(posts_table) -> PostRepository:
    return PostRepository()


@pytest.fixture
def post_service(post_repository: PostRepository) -> PostService:
    return PostService(post_repository)
