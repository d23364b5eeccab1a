"""Schemas for the betting-platform cart API."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, pre_load, validate, validates_schema


class CartGameSchema(Schema):
    numbers = fields.List(
        fields.Int(validate=validate.Range(min=1)),
        required=True,
        validate=validate.Length(min=1),
    )
    contest_number = fields.Int(required=False, load_default=None, allow_none=True)

    @validates_schema
    def _validate_unique(self, data, **kwargs):  # type: ignore[no-untyped-def]
        nums = data.get("numbers") or []
        if len(nums) != len(set(nums)):
            raise ValidationError({"numbers": ["Numbers must be unique"]})


class CartUrlRequestSchema(Schema):
    """Cart request.

    Also accepts the web client's camelCase shape:
    ``{"platformId", "games": [{"lotteryId", "numbers", "contestNumber"}]}``,
    where the lottery is taken from the top level or from the first game.
    """

    platform_id = fields.Str(required=True)
    lottery_id = fields.Str(required=True)
    games = fields.List(fields.Nested(CartGameSchema), required=False, load_default=list)

    @pre_load
    def _accept_camel_case(self, data: Any, **kwargs: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if "platform_id" not in data and "platformId" in data:
            data["platform_id"] = data.pop("platformId")
        if "lottery_id" not in data and "lotteryId" in data:
            data["lottery_id"] = data.pop("lotteryId")

        games = data.get("games")
        if isinstance(games, list):
            normalized = []
            for game in games:
                if isinstance(game, dict):
                    game = dict(game)
                    camel = game.pop("lotteryId", None)
                    game_lottery = game.pop("lottery_id", None) or camel
                    if game_lottery and "lottery_id" not in data:
                        data["lottery_id"] = game_lottery
                    if "contest_number" not in game and "contestNumber" in game:
                        game["contest_number"] = game.pop("contestNumber")
                normalized.append(game)
            data["games"] = normalized
        return data


class CartUrlResponseSchema(Schema):
    success = fields.Bool()
    platform_id = fields.Str()
    lottery_id = fields.Str()
    cart_url = fields.Str()
    deep_link = fields.Str(allow_none=True)
    games_count = fields.Int()
    open_url = fields.Str()


class PlatformSchema(Schema):
    id = fields.Str()
    name = fields.Str()
    auth_required = fields.Bool()
    has_deep_link = fields.Bool()
    supported = fields.Bool()
