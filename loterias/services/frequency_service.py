"""Business logic for lottery number frequency analysis (heat map data)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from loterias.models.lottery_draw import LotteryDraw
from loterias.models.number_frequency import NumberFrequency
from loterias.models.base import utcnow
from loterias.repositories.frequency_repository import FrequencyRepository
from loterias.repositories.lottery_repository import DrawRepository
from loterias.services.frequency_classifier import (
    DEFAULT_COLD_FRACTION,
    DEFAULT_HOT_FRACTION,
    Temperature,
    classify,
)
from loterias.services.lottery_service import LotteryService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumberHeat:
    number: int
    frequency: int
    temperature: str
    last_drawn: datetime | None
    draws_since_last_seen: int


@dataclass(frozen=True)
class FrequencyAnalysisResult:
    lottery_id: str
    total_numbers: int
    draws_used: int
    stored: bool
    numbers: list[NumberHeat]

    @property
    def min_count(self) -> int:
        return min((n.frequency for n in self.numbers), default=0)

    @property
    def max_count(self) -> int:
        return max((n.frequency for n in self.numbers), default=0)

    def numbers_with(self, temperature: Temperature) -> list[int]:
        picked = [n for n in self.numbers if n.temperature == temperature.value]
        picked.sort(key=lambda n: (-n.frequency, n.number))
        return [n.number for n in picked]


def _last_seen(number: int, draws_newest_first: Sequence[LotteryDraw]) -> tuple[datetime | None, int]:
    for idx, draw in enumerate(draws_newest_first):
        if number in (draw.drawn_numbers or ()):
            return draw.draw_date, idx
    return None, len(draws_newest_first)


class FrequencyService:
    """Compute and store the per-number heat map of a lottery."""

    def __init__(
        self,
        *,
        window: int = 100,
        hot_fraction: float = DEFAULT_HOT_FRACTION,
        cold_fraction: float = DEFAULT_COLD_FRACTION,
        lottery_service: LotteryService | None = None,
        draws: DrawRepository | None = None,
        frequencies: FrequencyRepository | None = None,
    ) -> None:
        if window <= 0:
            raise ValueError("window must be positive")
        self._window = int(window)
        self._hot_fraction = float(hot_fraction)
        self._cold_fraction = float(cold_fraction)
        self._lotteries = lottery_service or LotteryService()
        self._draws = draws or DrawRepository()
        self._frequencies = frequencies or FrequencyRepository()

    def analyze(self, session: Session, lottery_id: str) -> FrequencyAnalysisResult:
        """Heat map from the most recent draws, without touching stored rows."""

        lottery = self._lotteries.get_lottery(session, lottery_id)
        draws = self._draws.latest(session, lottery_id, self._window)

        stats = classify(
            (d.drawn_numbers or () for d in draws),
            lottery.total_numbers,
            hot_fraction=self._hot_fraction,
            cold_fraction=self._cold_fraction,
        )

        numbers: list[NumberHeat] = []
        for number, stat in stats.items():
            last_drawn, since = _last_seen(number, draws)
            numbers.append(
                NumberHeat(
                    number=number,
                    frequency=stat.count,
                    temperature=stat.temperature.value,
                    last_drawn=last_drawn,
                    draws_since_last_seen=since,
                )
            )

        return FrequencyAnalysisResult(
            lottery_id=lottery_id,
            total_numbers=lottery.total_numbers,
            draws_used=len(draws),
            stored=False,
            numbers=numbers,
        )

    def update_frequencies(self, session: Session, lottery_id: str) -> FrequencyAnalysisResult:
        """Recompute the heat map and replace the stored rows."""

        result = self.analyze(session, lottery_id)
        now = utcnow()
        rows = [
            NumberFrequency(
                lottery_id=lottery_id,
                number=n.number,
                frequency=n.frequency,
                last_drawn=n.last_drawn,
                draws_since_last_seen=n.draws_since_last_seen,
                temperature=n.temperature,
                updated_at=now,
            )
            for n in result.numbers
        ]
        self._frequencies.replace_all(session, lottery_id, rows)

        logger.info("Updated frequencies for %s from %s draws", lottery_id, result.draws_used)
        return FrequencyAnalysisResult(
            lottery_id=result.lottery_id,
            total_numbers=result.total_numbers,
            draws_used=result.draws_used,
            stored=True,
            numbers=result.numbers,
        )

    def get_frequencies(self, session: Session, lottery_id: str) -> FrequencyAnalysisResult:
        """Stored heat map, or a freshly computed one when nothing is stored."""

        lottery = self._lotteries.get_lottery(session, lottery_id)
        rows = self._frequencies.list_for_lottery(session, lottery_id)
        if not rows:
            return self.analyze(session, lottery_id)

        return FrequencyAnalysisResult(
            lottery_id=lottery_id,
            total_numbers=lottery.total_numbers,
            draws_used=min(self._window, self._draws.count(session, lottery_id)),
            stored=True,
            numbers=[
                NumberHeat(
                    number=int(r.number),
                    frequency=int(r.frequency or 0),
                    temperature=str(r.temperature),
                    last_drawn=r.last_drawn,
                    draws_since_last_seen=int(r.draws_since_last_seen or 0),
                )
                for r in rows
            ],
        )
