"""WeightLog model - bodyweight over time."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from overload.db.base import Base


class WeightLog(Base):
    __tablename__ = "weight_log"
    __table_args__ = (Index("ix_weight_log_user_date", "user_id", "date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
    weight: Mapped[float] = mapped_column(Numeric(6, 2), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="weight_logs")
