"""Lottery routes (controllers). No business logic here."""

from __future__ import annotations

import pytz
from flask import Blueprint, request

from loterias.db import get_session
from loterias.lotteries import get_lottery_display_info
from loterias.schemas.frequency import FrequencyAnalysisSchema
from loterias.schemas.lottery import (
    DrawCreateSchema,
    LotteryDrawSchema,
    LotteryTypeSchema,
    NextDrawSchema,
)
from loterias.services.frequency_classifier import Temperature
from loterias.services.frequency_service import FrequencyAnalysisResult
from loterias.services.lottery_service import MAX_DRAWS_LIMIT
from loterias.services.registry import get_services
from loterias.utils.args import int_arg
from loterias.utils.responses import ok

lotteries_bp = Blueprint("lotteries", __name__)

_lottery_schema = LotteryTypeSchema()
_lotteries_schema = LotteryTypeSchema(many=True)
_draw_schema = LotteryDrawSchema()
_draws_schema = LotteryDrawSchema(many=True)
_draw_create_schema = DrawCreateSchema()
_next_draw_schema = NextDrawSchema()
_frequency_schema = FrequencyAnalysisSchema()


def _dump_frequency(result: FrequencyAnalysisResult) -> dict:
    return _frequency_schema.dump(
        {
            "lottery_id": result.lottery_id,
            "total_numbers": result.total_numbers,
            "draws_used": result.draws_used,
            "stored": result.stored,
            "min_count": result.min_count,
            "max_count": result.max_count,
            "hot_numbers": result.numbers_with(Temperature.HOT),
            "warm_numbers": result.numbers_with(Temperature.WARM),
            "cold_numbers": result.numbers_with(Temperature.COLD),
            "numbers": result.numbers,
        }
    )


@lotteries_bp.get("/lotteries")
def list_lotteries():
    """List active lottery types."""

    lotteries = get_services().lotteries.list_lotteries(get_session())
    return ok(_lotteries_schema.dump(lotteries))


@lotteries_bp.get("/lotteries/<lottery_id>")
def get_lottery(lottery_id: str):
    lottery = get_services().lotteries.get_lottery(get_session(), lottery_id)
    data = _lottery_schema.dump(lottery)
    data["display_info"] = get_lottery_display_info(lottery_id)
    return ok(data)


@lotteries_bp.get("/lotteries/<lottery_id>/draws")
def list_draws(lottery_id: str):
    """Latest draws, newest first.

    Query params:
    - limit: 1..500 (default 10)
    """

    limit = int_arg("limit", 10, maximum=MAX_DRAWS_LIMIT)
    draws = get_services().lotteries.latest_draws(get_session(), lottery_id, limit)
    return ok(_draws_schema.dump(draws), meta={"count": len(draws), "limit": limit})


@lotteries_bp.post("/lotteries/<lottery_id>/draws")
def create_draw(lottery_id: str):
    payload = request.get_json(silent=True) or {}
    data = _draw_create_schema.load(payload)

    draw_date = data["draw_date"]
    if draw_date.tzinfo is None:
        draw_date = pytz.UTC.localize(draw_date)

    draw, created = get_services().lotteries.add_draw(
        get_session(),
        lottery_id,
        contest_number=int(data["contest_number"]),
        draw_date=draw_date,
        numbers=data["numbers"],
        prize_amount=data.get("prize_amount"),
        winners=data.get("winners"),
        is_official=bool(data.get("is_official")),
    )
    return ok(_draw_schema.dump(draw), status_code=201 if created else 200)


@lotteries_bp.get("/lotteries/<lottery_id>/next-draw")
def next_draw(lottery_id: str):
    info = get_services().lotteries.next_draw_info(get_session(), lottery_id)
    return ok(_next_draw_schema.dump(info))


@lotteries_bp.get("/lotteries/<lottery_id>/frequency")
def get_frequency(lottery_id: str):
    """Heat map for 1..N: count, temperature and recency per number."""

    result = get_services().frequencies.get_frequencies(get_session(), lottery_id)
    return ok(_dump_frequency(result))


@lotteries_bp.post("/lotteries/<lottery_id>/update-frequency")
def update_frequency(lottery_id: str):
    result = get_services().frequencies.update_frequencies(get_session(), lottery_id)
    return ok(_dump_frequency(result))
