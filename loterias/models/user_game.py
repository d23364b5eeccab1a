"""Games saved by a user."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from loterias.models.base import Base, utcnow


class UserGame(Base):
    """A chosen set of numbers for one contest.

    ``matches`` and ``prize_won`` stay at zero until the contest is drawn and
    the game is checked.
    """

    __tablename__ = "user_games"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), ForeignKey("users.id"), index=True)
    lottery_id: Mapped[str] = mapped_column(String(32), ForeignKey("lottery_types.id"), index=True)
    selected_numbers: Mapped[list[int]] = mapped_column(JSON, default=list)
    contest_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    strategy: Mapped[str | None] = mapped_column(String(16), nullable=True)
    is_played: Mapped[bool] = mapped_column(Boolean, default=False)
    matches: Mapped[int] = mapped_column(Integer, default=0)
    prize_won: Mapped[Decimal] = mapped_column(Numeric(15, 2), default=Decimal("0.00"))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
