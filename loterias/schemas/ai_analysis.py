"""Schemas for stored AI analysis."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class AiAnalysisSchema(Schema):
    id = fields.Int()
    lottery_id = fields.Str()
    analysis_type = fields.Str()
    result = fields.Raw()
    confidence = fields.Decimal(as_string=True, allow_none=True)
    created_at = fields.DateTime()


class AiAnalysisCreateSchema(Schema):
    lottery_id = fields.Str(required=True)
    analysis_type = fields.Str(required=True, validate=validate.OneOf(["pattern", "prediction", "strategy"]))
    result = fields.Raw(required=True)
    confidence = fields.Decimal(
        required=False,
        load_default=None,
        allow_none=True,
        validate=validate.Range(min=0, max=1),
    )
