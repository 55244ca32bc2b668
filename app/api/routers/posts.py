from fastapi import APIRouter, Depends, status

from app import deps
from app.models.post import Post
from app.schemas.post import CreatePost
from app.services.post import PostService

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
def get_posts(post_service: PostService = Depends(deps.post_service)) -> list[Post]:
    return post_service.get_posts()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    create_model: CreatePost | None = None,
    post_service: PostService = Depends(deps.post_service),
) -> Post:
    return post_service.create_post(create_model or CreatePost())
