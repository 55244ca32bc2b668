import uuid
from contextvars import ContextVar

from fastapi.requests import Request
from fastapi.responses import Response
from starlette.middleware.base import (BaseHTTPMiddleware,
                                       RequestResponseEndpoint)
from starlette.types import ASGIApp

from app.utils import logger

X_CORRELATION_ID = "X-Correlation-ID"

correlation_id: ContextVar[str] = ContextVar(X_CORRELATION_ID)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id.set(
            request.headers.get(X_CORRELATION_ID) or self._lambda_request_id(request)
        )
        logger.set_correlation_id(correlation_id.get())
        response = await call_next(request)
        response.headers[X_CORRELATION_ID] = correlation_id.get()
        return response

    @staticmethod
    def _lambda_request_id(request: Request) -> str:
        aws_context = request.scope.get("aws.context")
        if aws_context:
            return aws_context.aws_request_id
        return str(uuid.uuid4())
