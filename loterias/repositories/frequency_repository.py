"""Repository layer for stored number frequencies."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from loterias.models.number_frequency import NumberFrequency


class FrequencyRepository:
    def list_for_lottery(self, session: Session, lottery_id: str) -> Sequence[NumberFrequency]:
        stmt = (
            select(NumberFrequency)
            .where(NumberFrequency.lottery_id == lottery_id)
            .order_by(NumberFrequency.number.asc())
        )
        return list(session.scalars(stmt).all())

    def replace_all(self, session: Session, lottery_id: str, rows: Sequence[NumberFrequency]) -> None:
        """Drop the lottery's rows and store ``rows`` in their place."""

        session.execute(delete(NumberFrequency).where(NumberFrequency.lottery_id == lottery_id))
        session.add_all(rows)
        session.flush()
