from typing import Any

from app.models.camel_model import CamelModel


class Login(CamelModel):
    username: Any = None
    password: Any = None
