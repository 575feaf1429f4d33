"""Exercise CRUD endpoints plus per-exercise 1RM trend and next-workout suggestions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from overload.api.deps import get_current_user_id
from overload.core.config import get_settings
from overload.core.enums import StartingWeightType
from overload.db.session import get_db
from overload.models.exercise import Exercise
from overload.models.workout_log import WorkoutLog
from overload.schemas.estimation import NextWorkoutRead, TrendRead, WorkoutSuggestionRead
from overload.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from overload.services.estimation import compute_trend
from overload.services.planning import exercise_parameters, plan_next_workout

logger = logging.getLogger(__name__)
router = APIRouter()


async def _get_owned_exercise(db: AsyncSession, user_id: int, exercise_id: int) -> Exercise:
    result = await db.execute(
        select(Exercise).where(Exercise.id == exercise_id, Exercise.user_id == user_id)
    )
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


async def _recent_logs(db: AsyncSession, user_id: int, exercise_name: str, limit: int) -> list[WorkoutLog]:
    """Last `limit` logs for the exercise, oldest first."""
    result = await db.execute(
        select(WorkoutLog)
        .where(WorkoutLog.user_id == user_id, WorkoutLog.exercise == exercise_name)
        .order_by(WorkoutLog.date.desc(), WorkoutLog.id.desc())
        .limit(limit)
    )
    return list(reversed(result.scalars().all()))


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
    skip: int = 0,
    limit: int = 100,
):
    """List the user's exercises by name."""
    result = await db.execute(
        select(Exercise)
        .where(Exercise.user_id == user_id)
        .order_by(Exercise.name)
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all())


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Create a new exercise."""
    data = payload.model_dump()
    data["sets_range"] = list(data["sets_range"])
    data["reps_range"] = list(data["reps_range"])
    exercise = Exercise(user_id=user_id, **data)
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    logger.info("Created exercise %s (%s) for user %s", exercise.id, exercise.name, user_id)
    return exercise


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Get a single exercise by id."""
    return await _get_owned_exercise(db, user_id, exercise_id)


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: int,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Update an exercise (partial)."""
    exercise = await _get_owned_exercise(db, user_id, exercise_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if k in ("sets_range", "reps_range") and v is not None:
            v = list(v)
        setattr(exercise, k, v)
    if exercise.starting_weight_type == StartingWeightType.CUSTOM and exercise.custom_starting_weight is None:
        raise HTTPException(
            status_code=400,
            detail="Custom starting weight is required when using Custom type",
        )
    await db.flush()
    await db.refresh(exercise)
    logger.info("Updated exercise %s for user %s", exercise_id, user_id)
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Delete an exercise. Its logs are kept (they reference the name)."""
    exercise = await _get_owned_exercise(db, user_id, exercise_id)
    await db.delete(exercise)
    logger.info("Deleted exercise %s for user %s", exercise_id, user_id)
    return None


@router.get("/{exercise_id}/trend", response_model=TrendRead)
async def exercise_trend(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Regression trend over the most recent 1RM estimates for this exercise."""
    settings = get_settings()
    exercise = await _get_owned_exercise(db, user_id, exercise_id)
    logs = await _recent_logs(db, user_id, exercise.name, settings.one_rm_history_size)
    return TrendRead.model_validate(compute_trend(logs))


@router.get("/{exercise_id}/suggestions", response_model=NextWorkoutRead)
async def exercise_suggestions(
    exercise_id: int,
    custom_one_rm: float | None = Query(None, gt=0, description="Use this 1RM instead of the trend"),
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """
    Next-workout suggestions. The starting 1RM is custom_one_rm when given,
    otherwise the trend projection, otherwise the configured default.
    An empty suggestions list means nothing fits the exercise's ranges.
    """
    settings = get_settings()
    exercise = await _get_owned_exercise(db, user_id, exercise_id)
    logs = await _recent_logs(db, user_id, exercise.name, settings.one_rm_history_size)
    plan = plan_next_workout(
        exercise_parameters(exercise, settings.equipment_minimum_weights),
        logs,
        default_one_rm=settings.default_one_rm,
        custom_one_rm=custom_one_rm,
        history_size=settings.one_rm_history_size,
        limit=settings.max_suggestions,
    )
    return NextWorkoutRead(
        exercise_id=exercise.id,
        exercise=exercise.name,
        current_one_rm=plan.current_one_rm,
        source=plan.source,
        minimum_weight=plan.minimum_weight,
        trend=TrendRead.model_validate(plan.trend) if plan.trend else None,
        suggestions=[WorkoutSuggestionRead.model_validate(s) for s in plan.suggestions],
    )
