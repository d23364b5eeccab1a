"""User game routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from loterias.db import get_session
from loterias.schemas.game import (
    CheckGamesSchema,
    CheckResultSchema,
    GameCreateSchema,
    GenerateGamesSchema,
    UserGameSchema,
    UserStatsSchema,
)
from loterias.services.registry import get_services
from loterias.utils.args import int_arg
from loterias.utils.responses import ok

games_bp = Blueprint("games", __name__)

_game_schema = UserGameSchema()
_games_schema = UserGameSchema(many=True)
_generate_schema = GenerateGamesSchema()
_create_schema = GameCreateSchema()
_check_schema = CheckGamesSchema()
_check_result_schema = CheckResultSchema()
_stats_schema = UserStatsSchema()


def _current_user_id() -> str:
    # No authentication: everything belongs to the guest account.
    return str(current_app.config.get("GUEST_USER_ID", "guest-user"))


@games_bp.post("/games/generate")
def generate_games():
    payload = request.get_json(silent=True) or {}
    data = _generate_schema.load(payload)

    games = get_services().games.generate_games(
        get_session(),
        lottery_id=str(data["lottery_id"]),
        numbers_count=int(data["numbers_count"]),
        games_count=int(data["games_count"]),
        strategy=str(data["strategy"]),
        user_id=_current_user_id(),
    )
    return ok(_games_schema.dump(games), status_code=201)


@games_bp.get("/games")
def list_games():
    limit = int_arg("limit", 20, maximum=500)
    games = get_services().games.list_games(get_session(), _current_user_id(), limit)
    return ok(_games_schema.dump(games), meta={"count": len(games), "limit": limit})


@games_bp.post("/games")
def create_game():
    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    game = get_services().games.create_game(
        get_session(),
        user_id=_current_user_id(),
        lottery_id=str(data["lottery_id"]),
        numbers=data["numbers"],
        contest_number=data.get("contest_number"),
        strategy=data.get("strategy"),
    )
    return ok(_game_schema.dump(game), status_code=201)


@games_bp.post("/games/check")
def check_games():
    payload = request.get_json(silent=True) or {}
    data = _check_schema.load(payload)

    result = get_services().games.check_games(
        get_session(),
        str(data["lottery_id"]),
        int(data["contest_number"]),
    )
    return ok(_check_result_schema.dump(result))


@games_bp.get("/users/stats")
def user_stats():
    stats = get_services().games.user_stats(get_session(), _current_user_id())
    return ok(_stats_schema.dump(stats))
