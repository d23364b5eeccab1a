"""Schemas for user games."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

STRATEGIES = ["hot", "cold", "mixed", "random", "ai"]


class UserGameSchema(Schema):
    """Serialize UserGame."""

    id = fields.Int()
    user_id = fields.Str()
    lottery_id = fields.Str()
    selected_numbers = fields.List(fields.Int())
    contest_number = fields.Int(allow_none=True)
    strategy = fields.Str(allow_none=True)
    is_played = fields.Bool()
    matches = fields.Int()
    prize_won = fields.Decimal(as_string=True)
    created_at = fields.DateTime()


class GenerateGamesSchema(Schema):
    lottery_id = fields.Str(required=True)
    numbers_count = fields.Int(required=True, validate=validate.Range(min=1, max=100))
    games_count = fields.Int(required=False, load_default=1, validate=validate.Range(min=1, max=50))
    strategy = fields.Str(required=False, load_default="mixed", validate=validate.OneOf(STRATEGIES))


class GameCreateSchema(Schema):
    lottery_id = fields.Str(required=True)
    numbers = fields.List(fields.Int(), required=True, validate=validate.Length(min=1))
    contest_number = fields.Int(required=False, load_default=None, allow_none=True, validate=validate.Range(min=1))
    strategy = fields.Str(required=False, load_default=None, allow_none=True)

    @validates_schema
    def _validate_unique(self, data, **kwargs):  # type: ignore[no-untyped-def]
        nums = data.get("numbers") or []
        if len(nums) != len(set(nums)):
            raise ValidationError({"numbers": ["Numbers must be unique"]})


class CheckGamesSchema(Schema):
    lottery_id = fields.Str(required=True)
    contest_number = fields.Int(required=True, validate=validate.Range(min=1))


class CheckResultSchema(Schema):
    lottery_id = fields.Str()
    contest_number = fields.Int()
    drawn_numbers = fields.List(fields.Int())
    games_checked = fields.Int()
    winners = fields.Int()


class UserStatsSchema(Schema):
    total_games = fields.Int()
    wins = fields.Int()
    total_prize_won = fields.Decimal(as_string=True)
    accuracy = fields.Float()
    favorite_strategy = fields.Str(allow_none=True)
    average_numbers = fields.Float()
