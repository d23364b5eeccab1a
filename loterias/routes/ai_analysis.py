"""AI analysis routes."""

from __future__ import annotations

from flask import Blueprint, request

from loterias.db import get_session
from loterias.schemas.ai_analysis import AiAnalysisCreateSchema, AiAnalysisSchema
from loterias.services.registry import get_services
from loterias.utils.responses import ok

ai_analysis_bp = Blueprint("ai_analysis", __name__)

_schema = AiAnalysisSchema()
_create_schema = AiAnalysisCreateSchema()


@ai_analysis_bp.get("/ai/analysis/<lottery_id>")
def latest_analysis(lottery_id: str):
    analysis_type = (request.args.get("type") or "prediction").strip()
    row = get_services().analyses.latest_analysis(get_session(), lottery_id, analysis_type)
    return ok(_schema.dump(row))


@ai_analysis_bp.post("/ai/analysis")
def save_analysis():
    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    row = get_services().analyses.save_analysis(
        get_session(),
        lottery_id=str(data["lottery_id"]),
        analysis_type=str(data["analysis_type"]),
        result=data["result"],
        confidence=data.get("confidence"),
    )
    return ok(_schema.dump(row), status_code=201)
