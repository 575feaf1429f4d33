"""WorkoutDay model - named group of exercises in a user-defined rotation order."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from overload.db.base import Base


class WorkoutDay(Base):
    """A workout day: ordered exercise names plus optional progression schemes.

    Completing a day moves it to the end of the rotation (highest display_order).
    """

    __tablename__ = "workout_days"
    __table_args__ = (Index("ix_workout_days_user_order", "user_id", "display_order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    day_name: Mapped[str] = mapped_column(String(255), nullable=False)
    exercises: Mapped[list[str]] = mapped_column(JSONB, nullable=False)  # exercise names, in order
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_completed: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # {"Bench Press": {"type": "STRAIGHT_SETS", "straight_sets": {...}}, ...}
    progression_schemes: Mapped[dict] = mapped_column(JSONB, nullable=False, default=dict)

    user: Mapped["User"] = relationship("User", back_populates="workout_days")
