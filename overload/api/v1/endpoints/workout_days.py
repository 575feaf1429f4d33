"""Workout day CRUD, reordering and completion."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from overload.api.deps import get_current_user_id
from overload.db.session import get_db
from overload.models.workout_day import WorkoutDay
from overload.schemas.workout_day import (
    WorkoutDayCreate,
    WorkoutDayRead,
    WorkoutDayReorder,
    WorkoutDayUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def _next_display_order(db: AsyncSession, user_id: int) -> int:
    """One past the current highest display_order (0 for the first day)."""
    result = await db.execute(
        select(func.max(WorkoutDay.display_order)).where(WorkoutDay.user_id == user_id)
    )
    current = result.scalar()
    return 0 if current is None else int(current) + 1


async def _get_owned_day(db: AsyncSession, user_id: int, day_id: int) -> WorkoutDay:
    result = await db.execute(
        select(WorkoutDay).where(WorkoutDay.id == day_id, WorkoutDay.user_id == user_id)
    )
    day = result.scalar_one_or_none()
    if not day:
        raise HTTPException(status_code=404, detail="Workout day not found")
    return day


async def _list_days(db: AsyncSession, user_id: int) -> list[WorkoutDay]:
    result = await db.execute(
        select(WorkoutDay)
        .where(WorkoutDay.user_id == user_id)
        .order_by(WorkoutDay.display_order, WorkoutDay.id)
    )
    return list(result.scalars().all())


@router.get("", response_model=list[WorkoutDayRead])
async def list_workout_days(
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """List workout days in rotation order."""
    return await _list_days(db, user_id)


@router.post("", response_model=WorkoutDayRead, status_code=201)
async def create_workout_day(
    payload: WorkoutDayCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Create a workout day at the end of the rotation."""
    day = WorkoutDay(
        user_id=user_id,
        day_name=payload.day_name,
        exercises=payload.exercises,
        display_order=await _next_display_order(db, user_id),
        progression_schemes={
            name: scheme.model_dump(mode="json", exclude_none=True)
            for name, scheme in payload.progression_schemes.items()
        },
    )
    db.add(day)
    await db.flush()
    await db.refresh(day)
    logger.info("Created workout day %s (%s) for user %s", day.id, day.day_name, user_id)
    return day


# Declared before /{day_id} so "reorder" is never parsed as an id
@router.patch("/reorder", response_model=list[WorkoutDayRead])
async def reorder_workout_days(
    payload: WorkoutDayReorder,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Apply new display orders in one transaction (rolled back by get_db on 404)."""
    ids = [w.id for w in payload.workouts]
    result = await db.execute(
        select(WorkoutDay).where(WorkoutDay.user_id == user_id, WorkoutDay.id.in_(ids))
    )
    days = {d.id: d for d in result.scalars().all()}
    missing = [i for i in ids if i not in days]
    if missing:
        logger.warning("Reorder for user %s references unknown days %s", user_id, missing)
        raise HTTPException(status_code=404, detail=f"Workout day(s) not found: {missing}")
    for update in payload.workouts:
        days[update.id].display_order = update.display_order
    await db.flush()
    logger.info("Reordered %d workout days for user %s", len(ids), user_id)
    return await _list_days(db, user_id)


@router.get("/{day_id}", response_model=WorkoutDayRead)
async def get_workout_day(
    day_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return await _get_owned_day(db, user_id, day_id)


@router.patch("/{day_id}", response_model=WorkoutDayRead)
async def update_workout_day(
    day_id: int,
    payload: WorkoutDayUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Update a workout day (partial)."""
    day = await _get_owned_day(db, user_id, day_id)
    data = payload.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    if "last_completed" in data:
        data["last_completed"] = payload.last_completed
    for k, v in data.items():
        setattr(day, k, v)
    await db.flush()
    await db.refresh(day)
    logger.info("Updated workout day %s for user %s", day_id, user_id)
    return day


@router.post("/{day_id}/complete", response_model=WorkoutDayRead)
async def complete_workout_day(
    day_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Mark the day done now and move it to the end of the rotation."""
    day = await _get_owned_day(db, user_id, day_id)
    day.last_completed = datetime.now(timezone.utc)
    day.display_order = await _next_display_order(db, user_id)
    await db.flush()
    await db.refresh(day)
    logger.info("Completed workout day %s for user %s", day_id, user_id)
    return day


@router.delete("/{day_id}", status_code=204)
async def delete_workout_day(
    day_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    day = await _get_owned_day(db, user_id, day_id)
    await db.delete(day)
    logger.info("Deleted workout day %s for user %s", day_id, user_id)
    return None
