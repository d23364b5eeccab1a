"""Reference data for the Caixa lottery games.

Values follow the official rules published by Caixa Econômica Federal.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PrizeCategory:
    name: str
    numbers_matched: int
    probability: str


@dataclass(frozen=True)
class LotteryConfig:
    id: str
    display_name: str
    min_numbers: int
    max_numbers: int
    total_numbers: int
    draw_days: tuple[str, ...]
    draw_time: str = "20:00"
    is_active: bool = True
    api_endpoint: str = ""
    prize_categories: tuple[PrizeCategory, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.id


LOTTERY_CONFIGS: dict[str, LotteryConfig] = {
    "megasena": LotteryConfig(
        id="megasena",
        display_name="Mega-Sena",
        min_numbers=6,
        max_numbers=15,
        total_numbers=60,
        draw_days=("Wednesday", "Saturday"),
        api_endpoint="megasena",
        prize_categories=(
            PrizeCategory("Sena (6 números)", 6, "1 em 50.063.860"),
            PrizeCategory("Quina (5 números)", 5, "1 em 154.518"),
            PrizeCategory("Quadra (4 números)", 4, "1 em 2.332"),
        ),
    ),
    "lotofacil": LotteryConfig(
        id="lotofacil",
        display_name="Lotofácil",
        min_numbers=15,
        max_numbers=20,
        total_numbers=25,
        draw_days=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        api_endpoint="lotofacil",
        prize_categories=(
            PrizeCategory("15 números", 15, "1 em 3.268.760"),
            PrizeCategory("14 números", 14, "1 em 21.791"),
            PrizeCategory("13 números", 13, "1 em 691"),
            PrizeCategory("12 números", 12, "1 em 60"),
            PrizeCategory("11 números", 11, "1 em 11"),
        ),
    ),
    "quina": LotteryConfig(
        id="quina",
        display_name="Quina",
        min_numbers=5,
        max_numbers=15,
        total_numbers=80,
        draw_days=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        api_endpoint="quina",
        prize_categories=(
            PrizeCategory("Quina (5 números)", 5, "1 em 24.040.016"),
            PrizeCategory("Quadra (4 números)", 4, "1 em 64.106"),
            PrizeCategory("Terno (3 números)", 3, "1 em 866"),
        ),
    ),
    "lotomania": LotteryConfig(
        id="lotomania",
        display_name="Lotomania",
        min_numbers=50,
        max_numbers=50,
        total_numbers=100,
        draw_days=("Monday", "Wednesday", "Friday"),
        api_endpoint="lotomania",
        prize_categories=(
            PrizeCategory("20 números", 20, "1 em 11.372.635"),
            PrizeCategory("19 números", 19, "1 em 352.551"),
            PrizeCategory("18 números", 18, "1 em 24.235"),
            PrizeCategory("17 números", 17, "1 em 2.776"),
            PrizeCategory("16 números", 16, "1 em 472"),
            PrizeCategory("0 números", 0, "1 em 11.372.635"),
        ),
    ),
    "duplasena": LotteryConfig(
        id="duplasena",
        display_name="Dupla Sena",
        min_numbers=6,
        max_numbers=15,
        total_numbers=50,
        draw_days=("Monday", "Wednesday", "Friday"),
        api_endpoint="duplasena",
        prize_categories=(
            PrizeCategory("Sena (6 números)", 6, "1 em 15.890.700"),
            PrizeCategory("Quina (5 números)", 5, "1 em 60.192"),
            PrizeCategory("Quadra (4 números)", 4, "1 em 1.357"),
            PrizeCategory("Terno (3 números)", 3, "1 em 81"),
        ),
    ),
    "supersete": LotteryConfig(
        id="supersete",
        display_name="Super Sete",
        min_numbers=7,
        max_numbers=21,
        total_numbers=10,
        draw_days=("Monday", "Wednesday", "Friday"),
        draw_time="15:00",
        api_endpoint="supersete",
        prize_categories=(
            PrizeCategory("7 colunas", 7, "1 em 10.000.000"),
            PrizeCategory("6 colunas", 6, "1 em 1.000.000"),
            PrizeCategory("5 colunas", 5, "1 em 100.000"),
            PrizeCategory("4 colunas", 4, "1 em 10.000"),
            PrizeCategory("3 colunas", 3, "1 em 1.000"),
        ),
    ),
    "milionaria": LotteryConfig(
        id="milionaria",
        display_name="+Milionária",
        min_numbers=6,
        max_numbers=12,
        total_numbers=50,
        draw_days=("Wednesday", "Saturday"),
        api_endpoint="maismilionaria",
        prize_categories=(
            PrizeCategory("6 + 2 trevos", 8, "1 em 238.360.500"),
            PrizeCategory("6 + 1 trevo", 7, "1 em 79.453.500"),
            PrizeCategory("6 + 0 trevos", 6, "1 em 39.726.750"),
            PrizeCategory("5 + 2 trevos", 7, "1 em 1.357.510"),
        ),
    ),
    "timemania": LotteryConfig(
        id="timemania",
        display_name="Timemania",
        min_numbers=10,
        max_numbers=10,
        total_numbers=80,
        draw_days=("Tuesday", "Thursday", "Saturday"),
        api_endpoint="timemania",
        prize_categories=(
            PrizeCategory("7 números", 7, "1 em 26.472.637"),
            PrizeCategory("6 números", 6, "1 em 216.103"),
            PrizeCategory("5 números", 5, "1 em 5.220"),
            PrizeCategory("4 números", 4, "1 em 276"),
            PrizeCategory("3 números", 3, "1 em 29"),
        ),
    ),
    "diadesorte": LotteryConfig(
        id="diadesorte",
        display_name="Dia de Sorte",
        min_numbers=7,
        max_numbers=15,
        total_numbers=31,
        draw_days=("Tuesday", "Thursday", "Saturday"),
        api_endpoint="diadesorte",
        prize_categories=(
            PrizeCategory("7 números", 7, "1 em 2.629.575"),
            PrizeCategory("6 números", 6, "1 em 39.761"),
            PrizeCategory("5 números", 5, "1 em 1.169"),
            PrizeCategory("4 números", 4, "1 em 15"),
        ),
    ),
}

# Fixed prize estimates (R$) used when checking saved games.
PRIZE_TABLE: dict[str, dict[int, str]] = {
    "megasena": {6: "100000.00", 5: "2500.00", 4: "150.00"},
    "lotofacil": {15: "500000.00", 14: "1500.00", 13: "200.00", 12: "75.00", 11: "25.00"},
    "quina": {5: "50000.00", 4: "800.00", 3: "120.00", 2: "25.00"},
    "lotomania": {20: "1000000.00", 19: "15000.00", 18: "2000.00", 17: "200.00", 16: "100.00", 0: "500.00"},
}


def get_lottery_config(lottery_id: str) -> LotteryConfig | None:
    return LOTTERY_CONFIGS.get(lottery_id)


def get_all_lottery_configs() -> list[LotteryConfig]:
    return [c for c in LOTTERY_CONFIGS.values() if c.is_active]


def validate_lottery_numbers(lottery_id: str, numbers: Iterable[int]) -> bool:
    """True when ``numbers`` is a playable game for ``lottery_id``."""

    config = get_lottery_config(lottery_id)
    if config is None:
        return False

    nums = [int(n) for n in numbers]
    if len(nums) != len(set(nums)):
        return False
    if len(nums) < config.min_numbers or len(nums) > config.max_numbers:
        return False
    return all(1 <= n <= config.total_numbers for n in nums)


def get_lottery_display_info(lottery_id: str) -> dict[str, str] | None:
    config = get_lottery_config(lottery_id)
    if config is None:
        return None

    if config.min_numbers == config.max_numbers:
        count = str(config.min_numbers)
    else:
        count = f"{config.min_numbers}-{config.max_numbers}"

    return {
        "name": config.display_name,
        "range": f"{count} números de 1 a {config.total_numbers}",
        "draw_days": ", ".join(config.draw_days),
        "draw_time": config.draw_time,
    }
