"""Lottery draw model.

One row per contest. Drawn numbers are kept as a JSON list so the same
table works on SQLite and Postgres.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from loterias.models.base import Base, utcnow


class LotteryDraw(Base):
    """A single official result."""

    __tablename__ = "lottery_draws"
    __table_args__ = (UniqueConstraint("lottery_id", "contest_number", name="uq_lottery_draw_contest"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lottery_id: Mapped[str] = mapped_column(String(32), ForeignKey("lottery_types.id"), index=True)
    contest_number: Mapped[int] = mapped_column(Integer, nullable=False)
    draw_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    drawn_numbers: Mapped[list[int]] = mapped_column(JSON, default=list)
    prize_amount: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    winners: Mapped[Any | None] = mapped_column(JSON, nullable=True)
    is_official: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
