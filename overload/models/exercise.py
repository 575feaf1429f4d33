"""Exercise model - per-user exercise with the ranges the suggestion search runs over."""

from __future__ import annotations

from sqlalchemy import Enum, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from overload.core.enums import StartingWeightType
from overload.db.base import Base


class Exercise(Base):
    """Exercise definition: sets/reps ranges, weight increment and equipment."""

    __tablename__ = "exercises"
    __table_args__ = (Index("ix_exercises_user_name", "user_id", "name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    body_part: Mapped[str] = mapped_column(String(100), nullable=False)
    sets_range: Mapped[list[int]] = mapped_column(JSONB, nullable=False)  # [min, max]
    reps_range: Mapped[list[int]] = mapped_column(JSONB, nullable=False)  # [min, max]
    weight_increment: Mapped[float] = mapped_column(Numeric(6, 2), nullable=False)
    rest_timer: Mapped[int] = mapped_column(Integer, nullable=False, default=60)  # seconds
    starting_weight_type: Mapped[StartingWeightType] = mapped_column(
        Enum(StartingWeightType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=StartingWeightType.BARBELL,
    )
    custom_starting_weight: Mapped[float | None] = mapped_column(Numeric(8, 2), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="exercises")
