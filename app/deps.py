from functools import lru_cache

from fastapi import Depends

from app.auth import CredentialVerifier, StaticCredentialVerifier
from app.repositories.post import PostRepository
from app.services.post import PostService
from app.settings import Settings


@lru_cache
def settings() -> Settings:
    return Settings()


@lru_cache
def post_repository() -> PostRepository:
    return PostRepository()


@lru_cache
def credential_verifier() -> CredentialVerifier:
    return StaticCredentialVerifier(
        settings().admin_username, settings().admin_password
    )


def post_service(
    repository: PostRepository = Depends(post_repository),
) -> PostService:
    return PostService(repository)
