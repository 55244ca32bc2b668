from typing import Any

from fastapi import HTTPException, status


class InvalidPostException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)


class PostStoreException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
