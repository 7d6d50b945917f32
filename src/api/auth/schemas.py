from pydantic import BaseModel, EmailStr, Field

from src.api.core.messages import APIResponse
from src.api.user.schemas import UserModel
from src.database.models.users import UserRole


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=256)
    role: UserRole = UserRole.DONOR
    phone: str | None = Field(None, max_length=32)
    address: str | None = Field(None, max_length=255)
    organization_name: str | None = Field(None, min_length=1, max_length=200)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthTokenModel(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserModel


RegisterResponse = APIResponse[UserModel]
LoginResponse = APIResponse[AuthTokenModel]
