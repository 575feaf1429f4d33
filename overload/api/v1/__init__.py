"""API v1 router aggregation."""

from fastapi import APIRouter

from overload.api.v1.endpoints import (
    estimation,
    exercises,
    health,
    users,
    weight_logs,
    workout_days,
    workout_logs,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workout_days.router, prefix="/workout-days", tags=["workout-days"])
api_router.include_router(workout_logs.router, prefix="/workout-logs", tags=["workout-logs"])
api_router.include_router(weight_logs.router, prefix="/weight-logs", tags=["weight-logs"])
api_router.include_router(estimation.router, prefix="/estimation", tags=["estimation"])
