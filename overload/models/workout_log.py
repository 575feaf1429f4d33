"""WorkoutLog model - one logged exercise performance with its 1RM estimate."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from overload.db.base import Base


class WorkoutLog(Base):
    """Sets completed at weight x target_reps, plus reps reached on a failed extra set.

    estimated_one_rm is computed on write and feeds the trend regression.
    """

    __tablename__ = "workout_logs"
    __table_args__ = (Index("ix_workout_logs_user_exercise_date", "user_id", "exercise", "date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
    exercise: Mapped[str] = mapped_column(String(255), nullable=False)  # exercise name
    completed_sets: Mapped[int] = mapped_column(Integer, nullable=False)
    failed_rep: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    target_reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Numeric(8, 2), nullable=False)
    estimated_one_rm: Mapped[float] = mapped_column(Numeric(8, 2), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="workout_logs")
