from app.models.camel_model import CamelModel

MESSAGE_LOGIN_SUCCESSFUL = "Login successful"
MESSAGE_INVALID_CREDENTIALS = "Invalid credentials"


class LoginResponse(CamelModel):
    success: bool
    message: str
