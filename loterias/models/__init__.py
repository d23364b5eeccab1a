"""ORM models."""

from loterias.models.ai_analysis import AiAnalysis
from loterias.models.lottery_draw import LotteryDraw
from loterias.models.lottery_type import LotteryType
from loterias.models.number_frequency import NumberFrequency
from loterias.models.user import User
from loterias.models.user_game import UserGame

__all__ = ["AiAnalysis", "LotteryDraw", "LotteryType", "NumberFrequency", "User", "UserGame"]
