import uuid
from typing import Any

import boto3
import pendulum
from boto3.dynamodb.conditions import Attr

from app.settings import Settings
from app.utils import logger


class PostRepository:
    """DynamoDB backed ``posts`` collection.

    The repository owns identifier assignment: every ``add`` stores the
    document under a fresh UUID and refuses to overwrite an existing item.
    """

    def __init__(self, table=None):
        self._logger = logger
        if table is None:
            settings = Settings()
            table = (
                boto3.Session(region_name=settings.aws_region)
                .resource("dynamodb")
                .Table(settings.posts_table_name)
            )
        self._table = table

    def add(self, data: dict[str, Any]) -> str:
        item_id = str(uuid.uuid4())
        self._table.put_item(
            Item={**data, "id": item_id},
            ConditionExpression=Attr("id").not_exists(),
        )
        self._logger.debug(f"Item stored {item_id=}")
        return item_id

    def get_all(self, order_by: str, descending: bool = True) -> list[dict[str, Any]]:
        """Return every item ordered by the ISO-8601 timestamp in ``order_by``."""
        response = self._table.scan()
        items = response["Items"]
        while "LastEvaluatedKey" in response:
            response = self._table.scan(
                ExclusiveStartKey=response["LastEvaluatedKey"]
            )
            items.extend(response["Items"])
        return sorted(
            items, key=lambda item: pendulum.parse(item[order_by]), reverse=descending
        )
