"""Lottery catalogue, draw history and next-draw scheduling."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

import pytz
from sqlalchemy.orm import Session

from loterias.errors import NotFoundError, ValidationError
from loterias.lotteries import get_all_lottery_configs
from loterias.models.lottery_draw import LotteryDraw
from loterias.models.lottery_type import LotteryType
from loterias.repositories.lottery_repository import DrawRepository, LotteryTypeRepository

logger = logging.getLogger(__name__)

WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

MAX_DRAWS_LIMIT = 500


@dataclass(frozen=True)
class TimeRemaining:
    days: int
    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class NextDrawInfo:
    lottery_id: str
    contest_number: int
    draw_date: datetime
    time_remaining: TimeRemaining


def _parse_draw_time(raw: str | None) -> tuple[int, int]:
    try:
        hh, mm = (raw or "20:00").split(":", 1)
        hour, minute = int(hh), int(mm)
    except ValueError:
        return 20, 0
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return 20, 0
    return hour, minute


def next_draw_datetime(draw_days: Iterable[str], draw_time: str | None, now: datetime, tz_name: str) -> datetime:
    """Next scheduled draw at or after ``now``, in the draw timezone.

    A draw happening today counts only while its time has not passed.
    Without usable draw days the draw is assumed for tomorrow.
    """

    tz = pytz.timezone(tz_name)
    if now.tzinfo is None:
        now = pytz.UTC.localize(now)
    local_now = now.astimezone(tz)
    hour, minute = _parse_draw_time(draw_time)

    weekdays = sorted({WEEKDAYS[d.lower()] for d in draw_days if d and d.lower() in WEEKDAYS})
    if not weekdays:
        target = local_now.date() + timedelta(days=1)
        return tz.localize(datetime(target.year, target.month, target.day, hour, minute))

    for offset in range(0, 8):
        day = local_now.date() + timedelta(days=offset)
        if day.weekday() not in weekdays:
            continue
        candidate = tz.localize(datetime(day.year, day.month, day.day, hour, minute))
        if candidate >= local_now:
            return candidate

    # Unreachable: a weekday always recurs within 7 days.
    raise RuntimeError("No draw day found within a week")


def time_remaining(target: datetime, now: datetime) -> TimeRemaining:
    total = max(0, int((target - now).total_seconds()))
    days, rest = divmod(total, 86_400)
    hours, rest = divmod(rest, 3_600)
    minutes, seconds = divmod(rest, 60)
    return TimeRemaining(days=days, hours=hours, minutes=minutes, seconds=seconds)


class LotteryService:
    """Lottery use-cases."""

    def __init__(
        self,
        types: LotteryTypeRepository | None = None,
        draws: DrawRepository | None = None,
        tz_name: str = "America/Sao_Paulo",
    ) -> None:
        self._types = types or LotteryTypeRepository()
        self._draws = draws or DrawRepository()
        self._tz_name = tz_name

    def initialize_lottery_types(self, session: Session) -> int:
        added = self._types.add_missing(session, get_all_lottery_configs())
        if added:
            logger.info("Seeded %s lottery types", added)
        return added

    def list_lotteries(self, session: Session) -> Sequence[LotteryType]:
        self.initialize_lottery_types(session)
        return self._types.list_active(session)

    def get_lottery(self, session: Session, lottery_id: str) -> LotteryType:
        lottery = self._types.get(session, lottery_id)
        if lottery is None:
            self.initialize_lottery_types(session)
            lottery = self._types.get(session, lottery_id)
        if lottery is None:
            raise NotFoundError(message=f"Lottery {lottery_id} not found")
        return lottery

    def latest_draws(self, session: Session, lottery_id: str, limit: int = 10) -> Sequence[LotteryDraw]:
        if limit <= 0 or limit > MAX_DRAWS_LIMIT:
            raise ValidationError(
                message="Invalid limit",
                details={"limit": [f"Must be between 1 and {MAX_DRAWS_LIMIT}"]},
            )
        self.get_lottery(session, lottery_id)
        return self._draws.latest(session, lottery_id, limit)

    def next_draw_info(self, session: Session, lottery_id: str, now: datetime | None = None) -> NextDrawInfo:
        lottery = self.get_lottery(session, lottery_id)

        now = now or datetime.now(pytz.UTC)
        if now.tzinfo is None:
            now = pytz.UTC.localize(now)

        latest = self._draws.latest_contest_number(session, lottery_id)
        draw_date = next_draw_datetime(lottery.draw_days or [], lottery.draw_time, now, self._tz_name)

        return NextDrawInfo(
            lottery_id=lottery_id,
            contest_number=(latest or 0) + 1,
            draw_date=draw_date,
            time_remaining=time_remaining(draw_date, now),
        )

    def add_draw(
        self,
        session: Session,
        lottery_id: str,
        *,
        contest_number: int,
        draw_date: datetime,
        numbers: Iterable[int],
        prize_amount: Decimal | None = None,
        winners: Any | None = None,
        is_official: bool = False,
    ) -> tuple[LotteryDraw, bool]:
        """Store one result. Numbers must be unique and inside the pool."""

        lottery = self.get_lottery(session, lottery_id)
        nums = sorted(int(n) for n in numbers)

        if not nums:
            raise ValidationError(message="Invalid numbers", details={"numbers": ["At least one number is required"]})
        if len(nums) != len(set(nums)):
            raise ValidationError(message="Invalid numbers", details={"numbers": ["Numbers must be unique"]})
        if any(n < 1 or n > lottery.total_numbers for n in nums):
            raise ValidationError(
                message="Invalid numbers",
                details={"numbers": [f"All numbers must be within 1..{lottery.total_numbers}"]},
            )
        if contest_number <= 0:
            raise ValidationError(message="Invalid contest_number", details={"contest_number": ["Must be positive"]})

        draw, created = self._draws.upsert(
            session,
            lottery_id=lottery_id,
            contest_number=contest_number,
            draw_date=draw_date,
            drawn_numbers=nums,
            prize_amount=prize_amount,
            winners=winners,
            is_official=is_official,
        )
        logger.info(
            "%s draw %s contest %s",
            "Stored" if created else "Updated",
            lottery_id,
            contest_number,
        )
        return draw, created
