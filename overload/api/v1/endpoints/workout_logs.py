"""Workout log endpoints. Each log stores the 1RM estimate computed on write."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from overload.api.deps import get_current_user_id
from overload.db.session import get_db
from overload.models.workout_log import WorkoutLog
from overload.schemas.workout_log import WorkoutLogCreate, WorkoutLogRead
from overload.services.estimation import estimate_one_rep_max

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[WorkoutLogRead])
async def list_workout_logs(
    exercise: str | None = Query(None, description="Only logs for this exercise name"),
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Workout logs, oldest first."""
    stmt = select(WorkoutLog).where(WorkoutLog.user_id == user_id)
    if exercise:
        stmt = stmt.where(WorkoutLog.exercise == exercise)
    result = await db.execute(stmt.order_by(WorkoutLog.date, WorkoutLog.id))
    return list(result.scalars().all())


@router.post("", response_model=WorkoutLogRead, status_code=201)
async def create_workout_log(
    payload: WorkoutLogCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Log a performance (guided or entered after the fact)."""
    estimated = estimate_one_rep_max(
        payload.weight,
        payload.target_reps,
        payload.completed_sets,
        payload.failed_rep,
    )
    log = WorkoutLog(
        user_id=user_id,
        exercise=payload.exercise,
        weight=payload.weight,
        target_reps=payload.target_reps,
        completed_sets=payload.completed_sets,
        failed_rep=payload.failed_rep,
        estimated_one_rm=estimated,
    )
    if payload.date is not None:
        log.date = payload.date
    db.add(log)
    await db.flush()
    await db.refresh(log)
    logger.info(
        "Logged %s: %s x %s x %s (failed at %s) -> 1RM %s for user %s",
        log.exercise,
        payload.completed_sets,
        payload.target_reps,
        payload.weight,
        payload.failed_rep,
        estimated,
        user_id,
    )
    return log


@router.delete("/{log_id}", status_code=204)
async def delete_workout_log(
    log_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    result = await db.execute(
        select(WorkoutLog).where(WorkoutLog.id == log_id, WorkoutLog.user_id == user_id)
    )
    log = result.scalar_one_or_none()
    if not log:
        raise HTTPException(status_code=404, detail="Workout log not found")
    await db.delete(log)
    logger.info("Deleted workout log %s for user %s", log_id, user_id)
    return None
