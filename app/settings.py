from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    debug: bool = False
    app_name: str = "blog-backend"
    admin_password: str = "password123"
    admin_username: str = "admin"
    aws_region: str = Field(default="eu-central-1", alias="AWS_DEFAULT_REGION")
    cors_allow_origins: list[str] = ["*"]
    port: int = 5001
    stage: str = "dev"

    @property
    def posts_table_name(self) -> str:
        return f"{self.stage}-posts"
