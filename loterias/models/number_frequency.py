"""Per-number frequency rows (the stored heat map)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from loterias.models.base import Base, utcnow


class NumberFrequency(Base):
    """Derived from lottery_draws; rebuilt wholesale by the frequency service."""

    __tablename__ = "number_frequency"
    __table_args__ = (UniqueConstraint("lottery_id", "number", name="uq_number_frequency_lottery_number"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lottery_id: Mapped[str] = mapped_column(String(32), ForeignKey("lottery_types.id"), index=True)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    frequency: Mapped[int] = mapped_column(Integer, default=0)
    last_drawn: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    draws_since_last_seen: Mapped[int] = mapped_column(Integer, default=0)
    temperature: Mapped[str] = mapped_column(String(8), nullable=False)  # hot | warm | cold
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
