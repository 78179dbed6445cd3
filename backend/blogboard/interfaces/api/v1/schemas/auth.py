from pydantic import BaseModel, ConfigDict, Field

from blogboard.interfaces.api.v1.schemas.user import UserResponse


class LoginRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(min_length=1, max_length=50)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
