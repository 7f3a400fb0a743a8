"""User Routes — user administration. Password hashes never leave the server."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal, UserCreate, UserResponse, UserUpdate
from wms.services.admin import create_user, update_user
from wms.services.repositories import UserRepository

router = APIRouter(
    prefix="/api/v1/users", tags=["users"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[UserResponse])
async def list_users(
    organization_id: int | None = None, db: AsyncSession = Depends(get_db),
):
    return await UserRepository(db).list(organization_id=organization_id)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await UserRepository(db).require(user_id)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user_route(
    body: UserCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    user = await create_user(db, body, principal)
    await db.commit()
    return user


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user_route(
    user_id: int,
    body: UserUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    user = await update_user(db, user_id, body, principal)
    await db.commit()
    return user
