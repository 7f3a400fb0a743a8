"""Administration Schemas — organizations, roles, users and the authenticated principal.

Invariants:
    - Passwords are write-only: no response model carries password or hash
    - Role permissions must be known permission strings or the "all" wildcard
    - Principal = UserResponse + resolved role (or None)
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from wms.core.domain_types import RoleScope
from wms.core.permissions import Permission, WILDCARD_PERMISSION
from wms.schemas.base import ResponseModel, UpdateModel

_KNOWN_PERMISSIONS = {p.value for p in Permission} | {WILDCARD_PERMISSION}


def _check_permissions(values: list[str] | None) -> list[str] | None:
    if values is None:
        return values
    unknown = [v for v in values if v not in _KNOWN_PERMISSIONS]
    if unknown:
        raise ValueError(f"unknown permissions: {', '.join(unknown)}")
    return values


# --- Organizations ----------------------------------------------------------

class OrganizationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    is_active: bool = True
    parent_id: int | None = None


class OrganizationUpdate(UpdateModel):
    non_nullable = ("name", "is_active")

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    is_active: bool | None = None
    parent_id: int | None = None


class OrganizationResponse(ResponseModel):
    id: int
    name: str
    description: str | None
    is_active: bool
    parent_id: int | None


# --- Roles ------------------------------------------------------------------

class RoleCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    permissions: list[str] = Field(default_factory=list)
    scope: RoleScope = RoleScope.ORGANIZATION

    @field_validator("permissions")
    @classmethod
    def check_permissions(cls, v: list[str] | None) -> list[str] | None:
        return _check_permissions(v)


class RoleUpdate(UpdateModel):
    non_nullable = ("name", "permissions", "scope")

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    permissions: list[str] | None = None
    scope: RoleScope | None = None

    @field_validator("permissions")
    @classmethod
    def check_permissions(cls, v: list[str] | None) -> list[str] | None:
        return _check_permissions(v)


class RoleResponse(ResponseModel):
    id: int
    name: str
    description: str | None
    permissions: list[str]
    scope: RoleScope


# --- Users ------------------------------------------------------------------

def _stripped_username(v: str) -> str:
    v = v.strip()
    if len(v) < 3:
        raise ValueError("username must have at least 3 characters")
    return v


class UserCreate(BaseModel):
    """User creation — password is hashed before storage."""
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6, max_length=128)
    email: EmailStr
    full_name: str = Field(min_length=1, max_length=200)
    is_active: bool = True
    organization_id: int | None = None
    role_id: int | None = None

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return _stripped_username(v)


class UserUpdate(UpdateModel):
    non_nullable = ("username", "password", "email", "full_name", "is_active")

    username: str | None = Field(None, min_length=3, max_length=100)
    password: str | None = Field(None, min_length=6, max_length=128)
    email: EmailStr | None = None
    full_name: str | None = Field(None, min_length=1, max_length=200)
    is_active: bool | None = None
    organization_id: int | None = None
    role_id: int | None = None

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str | None) -> str | None:
        return v if v is None else _stripped_username(v)


class UserResponse(ResponseModel):
    id: int
    username: str
    email: str
    full_name: str
    is_active: bool
    organization_id: int | None
    role_id: int | None


class UserSummary(ResponseModel):
    """Compact user reference embedded in expanded rows."""
    id: int
    username: str
    full_name: str


class Principal(UserResponse):
    """Authenticated user plus the role it acts with."""
    role: RoleResponse | None = None

    @property
    def permissions(self) -> list[str]:
        return list(self.role.permissions) if self.role else []
