"""Lottery type reference table."""

from __future__ import annotations

from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from loterias.models.base import Base


class LotteryType(Base):
    """One lottery game (Mega-Sena, Lotofácil, ...)."""

    __tablename__ = "lottery_types"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    min_numbers: Mapped[int] = mapped_column(Integer, nullable=False)
    max_numbers: Mapped[int] = mapped_column(Integer, nullable=False)
    total_numbers: Mapped[int] = mapped_column(Integer, nullable=False)
    draw_days: Mapped[list[str]] = mapped_column(JSON, default=list)
    draw_time: Mapped[str | None] = mapped_column(String(5), nullable=True)  # HH:MM
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
