"""Bodyweight tracking endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from overload.api.deps import get_current_user_id
from overload.db.session import get_db
from overload.models.weight_log import WeightLog
from overload.schemas.weight_log import WeightLogCreate, WeightLogRead

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[WeightLogRead])
async def list_weight_logs(
    days: Optional[int] = Query(None, ge=1, description="Filter to last N days (7, 30, 90). Omit for all."),
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Bodyweight history, oldest first."""
    stmt = select(WeightLog).where(WeightLog.user_id == user_id)
    if days is not None:
        cutoff = datetime.now(timezone.utc) - timedelta(days=days)
        stmt = stmt.where(WeightLog.date >= cutoff)
    result = await db.execute(stmt.order_by(WeightLog.date, WeightLog.id))
    return list(result.scalars().all())


@router.post("", response_model=WeightLogRead, status_code=201)
async def create_weight_log(
    payload: WeightLogCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    log = WeightLog(user_id=user_id, weight=payload.weight)
    if payload.date is not None:
        log.date = payload.date
    db.add(log)
    await db.flush()
    await db.refresh(log)
    logger.info("Logged bodyweight %s for user %s", payload.weight, user_id)
    return log


@router.delete("/{log_id}", status_code=204)
async def delete_weight_log(
    log_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Delete a bodyweight entry."""
    result = await db.execute(
        select(WeightLog).where(WeightLog.id == log_id, WeightLog.user_id == user_id)
    )
    log = result.scalar_one_or_none()
    if not log:
        raise HTTPException(status_code=404, detail="Weight log not found")
    await db.delete(log)
