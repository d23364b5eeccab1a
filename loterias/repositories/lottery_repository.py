"""Repository layer for lottery types and draws."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from loterias.lotteries import LotteryConfig
from loterias.models.lottery_draw import LotteryDraw
from loterias.models.lottery_type import LotteryType


class LotteryTypeRepository:
    """Read/seed operations for lottery types."""

    def list_active(self, session: Session) -> Sequence[LotteryType]:
        stmt = select(LotteryType).where(LotteryType.is_active.is_(True)).order_by(LotteryType.id.asc())
        return list(session.scalars(stmt).all())

    def get(self, session: Session, lottery_id: str) -> LotteryType | None:
        return session.get(LotteryType, lottery_id)

    def add_missing(self, session: Session, configs: Sequence[LotteryConfig]) -> int:
        """Insert catalogue entries that are not stored yet. Returns how many were added."""

        existing = set(session.scalars(select(LotteryType.id)).all())
        added = 0
        for config in configs:
            if config.id in existing:
                continue
            session.add(
                LotteryType(
                    id=config.id,
                    name=config.name,
                    display_name=config.display_name,
                    min_numbers=config.min_numbers,
                    max_numbers=config.max_numbers,
                    total_numbers=config.total_numbers,
                    draw_days=list(config.draw_days),
                    draw_time=config.draw_time,
                    is_active=config.is_active,
                )
            )
            added += 1
        if added:
            session.flush()
        return added


class DrawRepository:
    """Read/write operations for lottery draws."""

    def latest(self, session: Session, lottery_id: str, limit: int) -> Sequence[LotteryDraw]:
        """Newest first."""

        stmt = (
            select(LotteryDraw)
            .where(LotteryDraw.lottery_id == lottery_id)
            .order_by(desc(LotteryDraw.contest_number))
            .limit(int(limit))
        )
        return list(session.scalars(stmt).all())

    def count(self, session: Session, lottery_id: str) -> int:
        stmt = select(func.count()).select_from(LotteryDraw).where(LotteryDraw.lottery_id == lottery_id)
        return int(session.scalar(stmt) or 0)

    def latest_contest_number(self, session: Session, lottery_id: str) -> int | None:
        stmt = select(func.max(LotteryDraw.contest_number)).where(LotteryDraw.lottery_id == lottery_id)
        value = session.scalar(stmt)
        return int(value) if value is not None else None

    def get_by_contest(self, session: Session, lottery_id: str, contest_number: int) -> LotteryDraw | None:
        stmt = select(LotteryDraw).where(
            LotteryDraw.lottery_id == lottery_id,
            LotteryDraw.contest_number == int(contest_number),
        )
        return session.scalars(stmt).first()

    def upsert(
        self,
        session: Session,
        *,
        lottery_id: str,
        contest_number: int,
        draw_date: datetime,
        drawn_numbers: list[int],
        prize_amount: Decimal | None = None,
        winners: Any | None = None,
        is_official: bool = False,
    ) -> tuple[LotteryDraw, bool]:
        """Insert or update by (lottery, contest). Returns (draw, created)."""

        draw = self.get_by_contest(session, lottery_id, contest_number)
        created = draw is None
        if draw is None:
            draw = LotteryDraw(lottery_id=lottery_id, contest_number=int(contest_number))
            session.add(draw)

        draw.draw_date = draw_date
        draw.drawn_numbers = list(drawn_numbers)
        draw.prize_amount = prize_amount
        draw.winners = winners
        draw.is_official = bool(is_official)
        session.flush()
        return draw, created
