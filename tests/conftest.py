import os
import uuid

import boto3
import pendulum
import pytest
from moto import mock_aws

from app.models.post import Post
from app.settings import Settings


def pytest_configure():
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-central-1"
    os.environ["STAGE"] = "test"


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def dynamodb_resource(settings: Settings):
    with mock_aws():
        yield boto3.Session(region_name=settings.aws_region).resource("dynamodb")


@pytest.fixture
def posts_table(dynamodb_resource, settings: Settings):
    return dynamodb_resource.create_table(
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        TableName=settings.posts_table_name,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def make_post(faker):
    def make(publish_date: pendulum.DateTime | None = None) -> Post:
        publish_date = publish_date or pendulum.now("UTC")
        return Post(
            id=str(uuid.uuid4()),
            title=faker.sentence(),
            content=faker.text(),
            author=faker.name(),
            publish_date=publish_date.to_iso8601_string(),
        )

    return make


@pytest.fixture
def posts(make_post) -> list[Post]:
    now = pendulum.now("UTC")
    return [make_post(now.subtract(days=days)) for days in range(10)]


@pytest.fixture
def initialize_posts_table(posts_table, posts: list[Post]):
    with posts_table.batch_writer() as batch:
        for post in posts:
            batch.put_item(Item=post.model_dump())
    return posts_table
