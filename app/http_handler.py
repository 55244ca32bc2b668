import uuid

import uvicorn
from aws_lambda_powertools.logging.logger import set_package_logger
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import UJSONResponse
from mangum import Mangum
from starlette.exceptions import HTTPException

from app.api.api import router as api_router
from app.middlewares import CorrelationIdMiddleware
from app.models.response import ErrorResponse, ValidationErrorResponse
from app.settings import Settings
from app.utils import logger

ERROR_MESSAGE_INTERNAL_SERVER_ERROR = "Internal Server Error"
ERROR_MESSAGE_INVALID_REQUEST = "Invalid request body"

settings = Settings()

if settings.debug:
    set_package_logger()

app = FastAPI(debug=settings.debug, title="BlogBackendApplication", version="1.0.0")
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(GZipMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)

handler = Mangum(app)
handler.__name__ = "handler"
handler = logger.inject_lambda_context(handler, clear_state=True, log_event=True)


def _error_response(
    status_code: int, message: str, error_id: uuid.UUID
) -> UJSONResponse:
    return UJSONResponse(
        content=jsonable_encoder(
            ErrorResponse(status=status_code, id=error_id, message=message)
        ),
        status_code=status_code,
    )


@app.exception_handler(BotoCoreError)
@app.exception_handler(ClientError)
async def botocore_error_handler(
    request: Request, error: BotoCoreError
) -> UJSONResponse:
    error_id = uuid.uuid4()
    logger.exception(f"Received botocore error {error_id=}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ERROR_MESSAGE_INTERNAL_SERVER_ERROR,
        error_id,
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(
    request: Request, error: HTTPException
) -> UJSONResponse:
    error_id = uuid.uuid4()
    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Received http exception {error_id=} {error.detail=}")
    else:
        logger.warning(f"Received http exception {error_id=} {error.detail=}")
    return _error_response(error.status_code, error.detail, error_id)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> UJSONResponse:
    error_id = uuid.uuid4()
    status_code = status.HTTP_400_BAD_REQUEST
    logger.warning(f"Received request validation error {error_id=}")
    return UJSONResponse(
        content=jsonable_encoder(
            ValidationErrorResponse(
                status=status_code,
                id=error_id,
                message=ERROR_MESSAGE_INVALID_REQUEST,
                errors=error.errors(),
            )
        ),
        status_code=status_code,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, error: Exception
) -> UJSONResponse:
    error_id = uuid.uuid4()
    logger.exception(f"Received unhandled exception {error_id=}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ERROR_MESSAGE_INTERNAL_SERVER_ERROR,
        error_id,
    )


if __name__ == "__main__":
    uvicorn.run("app.http_handler:app", host="localhost", port=settings.port)
