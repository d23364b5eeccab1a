"""HTTP client for the public lottery results API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

import pytz
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from loterias.lotteries import get_lottery_config

logger = logging.getLogger(__name__)

_BRT = pytz.timezone("America/Sao_Paulo")


@dataclass(frozen=True)
class FetchedDraw:
    contest_number: int
    draw_date: datetime
    numbers: list[int]
    prize_amount: Decimal | None
    winners: Any | None


def build_http_session(retries: int = 3, backoff_factor: float = 0.5) -> requests.Session:
    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_connections=10, pool_maxsize=10)

    session = requests.Session()
    session.headers.update({"User-Agent": "Mozilla/5.0", "Accept": "application/json"})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _parse_date(raw: str) -> datetime:
    """The API sends ``dd/mm/yyyy``; draws happen at 20:00 Brasília time."""

    day = datetime.strptime(raw.strip(), "%d/%m/%Y")
    return _BRT.localize(day.replace(hour=20))


def _parse_money(raw: Any) -> Decimal | None:
    if raw is None or raw == "":
        return None
    try:
        return Decimal(str(raw)).quantize(Decimal("0.01"))
    except InvalidOperation:
        return None


def parse_result(payload: dict[str, Any]) -> FetchedDraw:
    """Convert one API result into a FetchedDraw.

    Raises:
        ValueError: the payload lacks a contest number, date or numbers.
    """

    contest = payload.get("concurso") or payload.get("numero")
    raw_date = payload.get("data") or payload.get("dataApuracao")
    dezenas = payload.get("dezenas") or payload.get("listaDezenas")

    if not contest or not raw_date or not isinstance(dezenas, list) or not dezenas:
        raise ValueError(f"Incomplete result payload: {sorted(payload)}")

    premiacoes = payload.get("premiacoes") or payload.get("listaRateioPremio")
    top_prize = None
    if isinstance(premiacoes, list) and premiacoes:
        first = premiacoes[0]
        if isinstance(first, dict):
            top_prize = _parse_money(first.get("valorPremio"))

    return FetchedDraw(
        contest_number=int(contest),
        draw_date=_parse_date(str(raw_date)),
        numbers=sorted(int(n) for n in dezenas),
        prize_amount=top_prize,
        winners=premiacoes if isinstance(premiacoes, list) else None,
    )


class ResultsClient:
    """Fetch official results, one contest at a time."""

    def __init__(
        self,
        base_url: str,
        http: requests.Session | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http or build_http_session()
        self._timeout = float(timeout_seconds)

    def _url(self, lottery_id: str, suffix: str) -> str:
        config = get_lottery_config(lottery_id)
        endpoint = config.api_endpoint if config and config.api_endpoint else lottery_id
        return f"{self._base_url}/{endpoint}/{suffix}"

    def _get(self, url: str) -> dict[str, Any] | None:
        resp = self._http.get(url, timeout=self._timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected payload from {url}")
        return payload

    def fetch_latest(self, lottery_id: str) -> FetchedDraw | None:
        payload = self._get(self._url(lottery_id, "latest"))
        return parse_result(payload) if payload else None

    def fetch_contest(self, lottery_id: str, contest_number: int) -> FetchedDraw | None:
        payload = self._get(self._url(lottery_id, str(int(contest_number))))
        return parse_result(payload) if payload else None
