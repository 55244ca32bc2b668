from app.models.camel_model import CamelModel

DEFAULT_AUTHOR = "Admin"


class Post(CamelModel):
    id: str
    title: str
    content: str
    author: str = DEFAULT_AUTHOR
    publish_date: str
