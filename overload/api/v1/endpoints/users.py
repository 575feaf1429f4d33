"""User registration and lookup."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from overload.api.deps import get_current_user_id
from overload.core.security import hash_password
from overload.db.session import get_db
from overload.models.user import User
from overload.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=UserRead, status_code=201)
async def register_user(payload: UserCreate, db: AsyncSession = Depends(get_db)):
    """Create a user. The password is stored only as a bcrypt hash."""
    existing = await db.execute(select(User.id).where(User.username == payload.username))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail="Username already exists")
    user = User(username=payload.username, password_hash=hash_password(payload.password))
    db.add(user)
    await db.flush()
    await db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


@router.get("/me", response_model=UserRead)
async def current_user(
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
