"""Schemas for the heat map API."""

from __future__ import annotations

from marshmallow import Schema, fields


class NumberHeatSchema(Schema):
    number = fields.Int(required=True)
    frequency = fields.Int(required=True)
    temperature = fields.Str(required=True)
    last_drawn = fields.DateTime(allow_none=True)
    draws_since_last_seen = fields.Int()


class FrequencyAnalysisSchema(Schema):
    lottery_id = fields.Str()
    total_numbers = fields.Int()
    draws_used = fields.Int()
    stored = fields.Bool()
    min_count = fields.Int()
    max_count = fields.Int()
    hot_numbers = fields.List(fields.Int())
    warm_numbers = fields.List(fields.Int())
    cold_numbers = fields.List(fields.Int())
    numbers = fields.List(fields.Nested(NumberHeatSchema))
