"""Business logic for generating, saving and checking user games."""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from sqlalchemy.orm import Session

from loterias.errors import NotFoundError, ValidationError
from loterias.lotteries import PRIZE_TABLE
from loterias.models.user_game import UserGame
from loterias.repositories.lottery_repository import DrawRepository
from loterias.repositories.user_game_repository import UserGameRepository
from loterias.services.frequency_classifier import Temperature
from loterias.services.frequency_service import FrequencyService
from loterias.services.lottery_service import LotteryService

logger = logging.getLogger(__name__)

MAX_GAMES_PER_REQUEST = 50

# "ai" skips numbers drawn in this many newest contests.
AI_RECENT_DRAWS = 5


class Strategy(str, Enum):
    HOT = "hot"
    COLD = "cold"
    MIXED = "mixed"
    RANDOM = "random"
    AI = "ai"


@dataclass(frozen=True)
class CheckResult:
    lottery_id: str
    contest_number: int
    drawn_numbers: list[int]
    games_checked: int
    winners: int


@dataclass(frozen=True)
class UserStats:
    total_games: int
    wins: int
    total_prize_won: Decimal
    accuracy: float
    favorite_strategy: str | None
    average_numbers: float


def prize_for(lottery_id: str, matches: int) -> Decimal:
    return Decimal(PRIZE_TABLE.get(lottery_id, {}).get(int(matches), "0.00"))


def strategy_pool(
    strategy: Strategy,
    groups: dict[Temperature, list[int]],
    count: int,
    total_numbers: int,
) -> list[int]:
    """Candidate numbers for one game, topped up to at least ``count``.

    ``mixed`` takes 40% hot, 30% warm and the rest cold, most frequent first.
    """

    if strategy is Strategy.HOT:
        pool = list(groups.get(Temperature.HOT, []))
    elif strategy is Strategy.COLD:
        pool = list(groups.get(Temperature.COLD, []))
    elif strategy is Strategy.MIXED:
        hot_count = int(count * 0.4)
        warm_count = int(count * 0.3)
        cold_count = count - hot_count - warm_count
        pool = (
            groups.get(Temperature.HOT, [])[:hot_count]
            + groups.get(Temperature.WARM, [])[:warm_count]
            + groups.get(Temperature.COLD, [])[:cold_count]
        )
    else:
        pool = list(range(1, total_numbers + 1))

    if len(pool) < count:
        taken = set(pool)
        pool += [n for n in range(1, total_numbers + 1) if n not in taken]
    return pool


def ai_pick(
    ranked: Sequence[int],
    recent: set[int],
    count: int,
    total_numbers: int,
    rng: random.Random,
) -> list[int]:
    """Most frequent numbers that did not come out in the recent draws.

    ``ranked`` lists numbers most frequent first. A shortfall is filled at
    random from the other numbers outside ``recent``, and only then from
    ``recent`` itself.
    """

    picked = [n for n in ranked if n not in recent][:count]
    for include_recent in (False, True):
        if len(picked) >= count:
            break
        taken = set(picked)
        rest = [
            n
            for n in range(1, total_numbers + 1)
            if n not in taken and (include_recent or n not in recent)
        ]
        rng.shuffle(rest)
        picked += rest[: count - len(picked)]
    return sorted(picked)


class GameService:
    """User game use-cases."""

    def __init__(
        self,
        *,
        lottery_service: LotteryService | None = None,
        frequency_service: FrequencyService | None = None,
        games: UserGameRepository | None = None,
        draws: DrawRepository | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._lotteries = lottery_service or LotteryService()
        self._frequencies = frequency_service or FrequencyService(lottery_service=self._lotteries)
        self._games = games or UserGameRepository()
        self._draws = draws or DrawRepository()
        self._rng = rng or random.Random()

    def _validate_numbers(self, session: Session, lottery_id: str, numbers: Iterable[int]) -> list[int]:
        lottery = self._lotteries.get_lottery(session, lottery_id)
        nums = sorted(int(n) for n in numbers)
        if len(nums) != len(set(nums)):
            raise ValidationError(message="Invalid numbers", details={"numbers": ["Numbers must be unique"]})
        if len(nums) < lottery.min_numbers or len(nums) > lottery.max_numbers:
            raise ValidationError(
                message="Invalid numbers",
                details={"numbers": [f"Must pick {lottery.min_numbers}..{lottery.max_numbers} numbers"]},
            )
        if any(n < 1 or n > lottery.total_numbers for n in nums):
            raise ValidationError(
                message="Invalid numbers",
                details={"numbers": [f"All numbers must be within 1..{lottery.total_numbers}"]},
            )
        return nums

    def generate_games(
        self,
        session: Session,
        *,
        lottery_id: str,
        numbers_count: int,
        games_count: int,
        strategy: str,
        user_id: str,
    ) -> list[UserGame]:
        """Generate ``games_count`` games from the current heat map and save them."""

        try:
            chosen = Strategy(str(strategy).lower())
        except ValueError as exc:
            raise ValidationError(
                message="Invalid strategy",
                details={"strategy": [f"Must be one of {'|'.join(s.value for s in Strategy)}"]},
            ) from exc

        lottery = self._lotteries.get_lottery(session, lottery_id)
        upper = min(lottery.max_numbers, lottery.total_numbers)
        if numbers_count < lottery.min_numbers or numbers_count > upper:
            raise ValidationError(
                message="Invalid numbers_count",
                details={"numbers_count": [f"Must be within {lottery.min_numbers}..{upper}"]},
            )
        if games_count < 1 or games_count > MAX_GAMES_PER_REQUEST:
            raise ValidationError(
                message="Invalid games_count",
                details={"games_count": [f"Must be within 1..{MAX_GAMES_PER_REQUEST}"]},
            )

        heat = self._frequencies.get_frequencies(session, lottery_id)
        groups = {t: heat.numbers_with(t) for t in Temperature}
        ranked: list[int] = []
        recent: set[int] = set()
        if chosen is Strategy.AI:
            latest = self._draws.latest(session, lottery_id, AI_RECENT_DRAWS)
            if not latest:
                raise ValidationError(
                    message="Not enough draw history",
                    details={"strategy": ["ai needs at least one stored draw"]},
                )
            recent = {int(n) for draw in latest for n in draw.drawn_numbers or ()}
            ranked = [n.number for n in sorted(heat.numbers, key=lambda n: (-n.frequency, n.number))]

        contest_number = self._lotteries.next_draw_info(session, lottery_id).contest_number

        self._games.ensure_user(session, user_id)
        games: list[UserGame] = []
        for _ in range(int(games_count)):
            if chosen is Strategy.AI:
                numbers = ai_pick(ranked, recent, numbers_count, lottery.total_numbers, self._rng)
            else:
                pool = strategy_pool(chosen, groups, numbers_count, lottery.total_numbers)
                numbers = sorted(self._rng.sample(pool, numbers_count))
            games.append(
                self._games.create(
                    session,
                    user_id=user_id,
                    lottery_id=lottery_id,
                    selected_numbers=numbers,
                    contest_number=contest_number,
                    strategy=chosen.value,
                    matches=0,
                    prize_won=Decimal("0.00"),
                )
            )

        logger.info(
            "Generated %s %s games for %s contest %s",
            len(games),
            chosen.value,
            lottery_id,
            contest_number,
        )
        return games

    def create_game(
        self,
        session: Session,
        *,
        user_id: str,
        lottery_id: str,
        numbers: Iterable[int],
        contest_number: int | None = None,
        strategy: str | None = None,
    ) -> UserGame:
        nums = self._validate_numbers(session, lottery_id, numbers)
        self._games.ensure_user(session, user_id)
        return self._games.create(
            session,
            user_id=user_id,
            lottery_id=lottery_id,
            selected_numbers=nums,
            contest_number=contest_number,
            strategy=strategy,
            matches=0,
            prize_won=Decimal("0.00"),
        )

    def list_games(self, session: Session, user_id: str, limit: int = 20) -> Sequence[UserGame]:
        if limit <= 0:
            raise ValidationError(message="Invalid limit", details={"limit": ["Must be positive"]})
        return self._games.list_for_user(session, user_id, limit)

    def check_games(self, session: Session, lottery_id: str, contest_number: int) -> CheckResult:
        """Fill matches / prize of every saved game for a drawn contest."""

        draw = self._draws.get_by_contest(session, lottery_id, contest_number)
        if draw is None:
            raise NotFoundError(message=f"Contest {contest_number} of {lottery_id} not drawn yet")

        drawn = set(int(n) for n in draw.drawn_numbers or ())
        games = self._games.list_for_contest(session, lottery_id, contest_number)
        winners = 0
        for game in games:
            game.matches = len(drawn.intersection(int(n) for n in game.selected_numbers or ()))
            game.prize_won = prize_for(lottery_id, game.matches)
            game.is_played = True
            if game.prize_won > 0:
                winners += 1
        session.flush()

        logger.info("Checked %s games for %s contest %s (%s winners)", len(games), lottery_id, contest_number, winners)
        return CheckResult(
            lottery_id=lottery_id,
            contest_number=int(contest_number),
            drawn_numbers=sorted(drawn),
            games_checked=len(games),
            winners=winners,
        )

    def user_stats(self, session: Session, user_id: str) -> UserStats:
        games = self._games.list_for_user(session, user_id)
        total = len(games)
        if total == 0:
            return UserStats(
                total_games=0,
                wins=0,
                total_prize_won=Decimal("0.00"),
                accuracy=0.0,
                favorite_strategy=None,
                average_numbers=0.0,
            )

        prizes = [Decimal(g.prize_won or 0) for g in games]
        wins = sum(1 for p in prizes if p > 0)
        strategies = Counter(g.strategy for g in games if g.strategy)
        favorite = strategies.most_common(1)[0][0] if strategies else None

        return UserStats(
            total_games=total,
            wins=wins,
            total_prize_won=sum(prizes, Decimal("0.00")),
            accuracy=round(wins / total * 100, 2),
            favorite_strategy=favorite,
            average_numbers=round(sum(len(g.selected_numbers or ()) for g in games) / total, 2),
        )
