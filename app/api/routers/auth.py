from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from app import deps
from app.auth import CredentialVerifier
from app.models.auth import (MESSAGE_INVALID_CREDENTIALS,
                             MESSAGE_LOGIN_SUCCESSFUL, LoginResponse)
from app.schemas.auth import Login

router = APIRouter()


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": LoginResponse}},
)
def login(
    response: Response,
    body: Any = Body(None),
    credential_verifier: CredentialVerifier = Depends(deps.credential_verifier),
) -> LoginResponse:
    login_model = Login.model_validate(body) if isinstance(body, dict) else Login()
    if credential_verifier.verify(login_model.username, login_model.password):
        return LoginResponse(success=True, message=MESSAGE_LOGIN_SUCCESSFUL)
    response.status_code = status.HTTP_401_UNAUTHORIZED
    return LoginResponse(success=False, message=MESSAGE_INVALID_CREDENTIALS)
