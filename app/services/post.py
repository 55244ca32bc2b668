import pendulum
from botocore.exceptions import BotoCoreError, ClientError

from app.exceptions import InvalidPostException, PostStoreException
from app.models.post import DEFAULT_AUTHOR, Post
from app.repositories.post import PostRepository
from app.schemas.post import CreatePost
from app.utils import logger

ORDER_BY_PUBLISH_DATE = "publish_date"


class PostService:
    ERROR_MESSAGE_CREATE_FAILED: str = "Error creating post."
    ERROR_MESSAGE_FETCH_FAILED: str = "Error fetching posts from database."
    ERROR_MESSAGE_TITLE_AND_CONTENT_REQUIRED: str = "Title and content are required."

    def __init__(self, post_repository: PostRepository):
        self._logger = logger
        self._post_repository = post_repository

    def create_post(self, create_post: CreatePost) -> Post:
        if not create_post.title or not create_post.content:
            self._logger.warning("Rejected post without title or content")
            raise InvalidPostException(
                PostService.ERROR_MESSAGE_TITLE_AND_CONTENT_REQUIRED
            )
        data = {
            "title": create_post.title,
            "content": create_post.content,
            "author": create_post.author or DEFAULT_AUTHOR,
            "publish_date": pendulum.now("UTC").to_iso8601_string(),
        }
        try:
            post_id = self._post_repository.add(data)
        except (BotoCoreError, ClientError) as err:
            self._logger.exception("Error creating post")
            raise PostStoreException(PostService.ERROR_MESSAGE_CREATE_FAILED) from err
        self._logger.info(f"Post successfully created {post_id=}")
        return Post(id=post_id, **data)

    def get_posts(self) -> list[Post]:
        try:
            items = self._post_repository.get_all(ORDER_BY_PUBLISH_DATE)
        except (BotoCoreError, ClientError) as err:
            self._logger.exception("Error fetching posts")
            raise PostStoreException(PostService.ERROR_MESSAGE_FETCH_FAILED) from err
        return [Post(**item) for item in items]
