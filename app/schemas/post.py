from app.models.camel_model import CamelModel


class CreatePost(CamelModel):
    title: str | None = None
    content: str | None = None
    author: str | None = None
