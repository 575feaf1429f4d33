"""Bodyweight log schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WeightLogCreate(BaseModel):
    weight: float = Field(..., gt=0, description="Body weight in kg")
    date: datetime | None = Field(None, description="Defaults to now")


class WeightLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    date: datetime
    weight: float
