"""Auth Schemas — login payload and principal envelopes."""

from pydantic import BaseModel, Field

from wms.schemas.admin import Principal


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=128)


class PrincipalEnvelope(BaseModel):
    user: Principal


class LogoutResponse(BaseModel):
    success: bool = True
