import uuid
from typing import Any, Sequence

from app.models.camel_model import CamelModel


class ErrorResponse(CamelModel):
    status: int
    id: uuid.UUID
    message: str


class ValidationErrorResponse(ErrorResponse):
    errors: Sequence[Any]
