"""Marshmallow schemas for lottery types and draws."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class LotteryTypeSchema(Schema):
    """Serialize LotteryType."""

    id = fields.Str(required=True)
    name = fields.Str(required=True)
    display_name = fields.Str(required=True)
    min_numbers = fields.Int(required=True)
    max_numbers = fields.Int(required=True)
    total_numbers = fields.Int(required=True)
    draw_days = fields.List(fields.Str())
    draw_time = fields.Str(allow_none=True)
    is_active = fields.Bool()


class LotteryDrawSchema(Schema):
    """Serialize LotteryDraw."""

    id = fields.Int()
    lottery_id = fields.Str()
    contest_number = fields.Int()
    draw_date = fields.DateTime()
    drawn_numbers = fields.List(fields.Int())
    prize_amount = fields.Decimal(as_string=True, allow_none=True)
    winners = fields.Raw(allow_none=True)
    is_official = fields.Bool()


class DrawCreateSchema(Schema):
    """Validate an ingested draw."""

    contest_number = fields.Int(required=True, validate=validate.Range(min=1))
    draw_date = fields.DateTime(required=True)
    numbers = fields.List(fields.Int(validate=validate.Range(min=1)), required=True, validate=validate.Length(min=1))
    prize_amount = fields.Decimal(required=False, load_default=None, allow_none=True, places=2)
    winners = fields.Raw(required=False, load_default=None, allow_none=True)
    is_official = fields.Bool(required=False, load_default=False)


class TimeRemainingSchema(Schema):
    days = fields.Int()
    hours = fields.Int()
    minutes = fields.Int()
    seconds = fields.Int()


class NextDrawSchema(Schema):
    lottery_id = fields.Str()
    contest_number = fields.Int()
    draw_date = fields.DateTime()
    time_remaining = fields.Nested(TimeRemainingSchema)
