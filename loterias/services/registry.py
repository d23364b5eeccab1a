"""Service instances wired from the Flask config."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from flask import Flask, current_app

from loterias.services.ai_analysis_service import AiAnalysisService
from loterias.services.frequency_service import FrequencyService
from loterias.services.game_service import GameService
from loterias.services.lottery_service import LotteryService


@dataclass(frozen=True)
class Services:
    lotteries: LotteryService
    frequencies: FrequencyService
    games: GameService
    analyses: AiAnalysisService


def build_services(config: Mapping[str, Any], rng: random.Random | None = None) -> Services:
    lotteries = LotteryService(tz_name=str(config.get("DRAW_TIMEZONE", "America/Sao_Paulo")))
    frequencies = FrequencyService(
        window=int(config.get("FREQUENCY_WINDOW", 100)),
        hot_fraction=float(config.get("HOT_FRACTION", 1 / 3)),
        cold_fraction=float(config.get("COLD_FRACTION", 1 / 3)),
        lottery_service=lotteries,
    )
    games = GameService(lottery_service=lotteries, frequency_service=frequencies, rng=rng)
    analyses = AiAnalysisService(lottery_service=lotteries)
    return Services(lotteries=lotteries, frequencies=frequencies, games=games, analyses=analyses)


def init_services(app: Flask) -> None:
    app.extensions["services"] = build_services(app.config)


def get_services() -> Services:
    services: Services | None = current_app.extensions.get("services")
    if services is None:
        raise RuntimeError("Services not initialized")
    return services
