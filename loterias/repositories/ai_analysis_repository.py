"""Repository layer for AI analysis blobs."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from loterias.models.ai_analysis import AiAnalysis


class AiAnalysisRepository:
    def latest(self, session: Session, lottery_id: str, analysis_type: str) -> AiAnalysis | None:
        stmt = (
            select(AiAnalysis)
            .where(AiAnalysis.lottery_id == lottery_id, AiAnalysis.analysis_type == analysis_type)
            .order_by(desc(AiAnalysis.created_at), desc(AiAnalysis.id))
            .limit(1)
        )
        return session.scalars(stmt).first()

    def create(
        self,
        session: Session,
        *,
        lottery_id: str,
        analysis_type: str,
        result: Any,
        confidence: Decimal | None,
    ) -> AiAnalysis:
        row = AiAnalysis(
            lottery_id=lottery_id,
            analysis_type=analysis_type,
            result=result,
            confidence=confidence,
        )
        session.add(row)
        session.flush()
        return row
