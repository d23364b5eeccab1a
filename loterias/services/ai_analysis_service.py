"""Storage of AI analysis results produced outside this service."""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum
from typing import Any

from sqlalchemy.orm import Session

from loterias.errors import NotFoundError, ValidationError
from loterias.models.ai_analysis import AiAnalysis
from loterias.repositories.ai_analysis_repository import AiAnalysisRepository
from loterias.services.lottery_service import LotteryService

logger = logging.getLogger(__name__)


class AnalysisType(str, Enum):
    PATTERN = "pattern"
    PREDICTION = "prediction"
    STRATEGY = "strategy"


class AiAnalysisService:
    def __init__(
        self,
        repository: AiAnalysisRepository | None = None,
        lottery_service: LotteryService | None = None,
    ) -> None:
        self._repo = repository or AiAnalysisRepository()
        self._lotteries = lottery_service or LotteryService()

    @staticmethod
    def _analysis_type(raw: str) -> AnalysisType:
        try:
            return AnalysisType(str(raw).lower())
        except ValueError as exc:
            raise ValidationError(
                message="Invalid analysis type",
                details={"analysis_type": [f"Must be one of {'|'.join(t.value for t in AnalysisType)}"]},
            ) from exc

    def save_analysis(
        self,
        session: Session,
        *,
        lottery_id: str,
        analysis_type: str,
        result: Any,
        confidence: Decimal | None = None,
    ) -> AiAnalysis:
        kind = self._analysis_type(analysis_type)
        self._lotteries.get_lottery(session, lottery_id)
        row = self._repo.create(
            session,
            lottery_id=lottery_id,
            analysis_type=kind.value,
            result=result,
            confidence=confidence,
        )
        logger.info("Stored %s analysis for %s", kind.value, lottery_id)
        return row

    def latest_analysis(self, session: Session, lottery_id: str, analysis_type: str = "prediction") -> AiAnalysis:
        kind = self._analysis_type(analysis_type)
        row = self._repo.latest(session, lottery_id, kind.value)
        if row is None:
            raise NotFoundError(message=f"No {kind.value} analysis available for {lottery_id}")
        return row
