"""Shared API dependencies."""

from fastapi import Header

from overload.core.config import get_settings


async def get_current_user_id(x_user_id: int | None = Header(default=None)) -> int:
    """
    User every record is scoped to. An upstream auth layer sets X-User-Id;
    without it the configured singleton user is used.
    """
    if x_user_id is not None:
        return x_user_id
    return get_settings().default_user_id
