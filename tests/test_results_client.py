"""Tests for the results API client (no network)."""

from datetime import datetime
from decimal import Decimal

import pytest
import pytz
import requests

from loterias.services.results_client import ResultsClient, build_http_session, parse_result

PAYLOAD = {
    "loteria": "megasena",
    "concurso": 2850,
    "data": "15/03/2025",
    "dezenas": ["42", "07", "13", "01", "60", "30"],
    "premiacoes": [
        {"descricao": "6 acertos", "faixa": 1, "ganhadores": 1, "valorPremio": 51234567.89},
        {"descricao": "5 acertos", "faixa": 2, "ganhadores": 80, "valorPremio": 45000.12},
    ],
}


class _FakeResponse:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class _FakeSession:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self.responses[url]


class TestParseResult:
    def test_parses_numbers_date_and_prize(self):
        draw = parse_result(PAYLOAD)

        assert draw.contest_number == 2850
        assert draw.numbers == [1, 7, 13, 30, 42, 60]
        assert draw.draw_date == pytz.timezone("America/Sao_Paulo").localize(datetime(2025, 3, 15, 20, 0))
        assert draw.prize_amount == Decimal("51234567.89")
        assert draw.winners == PAYLOAD["premiacoes"]

    def test_accepts_official_field_names(self):
        draw = parse_result({"numero": 10, "dataApuracao": "01/02/2024", "listaDezenas": ["03", "01", "02"]})

        assert draw.contest_number == 10
        assert draw.numbers == [1, 2, 3]
        assert draw.prize_amount is None
        assert draw.winners is None

    def test_incomplete_payload(self):
        with pytest.raises(ValueError):
            parse_result({"concurso": 1, "data": "01/02/2024"})


class TestResultsClient:
    BASE = "https://results.example/api"

    def test_fetch_contest_uses_api_endpoint(self):
        http = _FakeSession({f"{self.BASE}/maismilionaria/150": _FakeResponse(200, dict(PAYLOAD, concurso=150))})
        client = ResultsClient(self.BASE + "/", http=http, timeout_seconds=3)

        draw = client.fetch_contest("milionaria", 150)

        assert draw is not None
        assert draw.contest_number == 150
        assert http.calls == [(f"{self.BASE}/maismilionaria/150", 3.0)]

    def test_missing_contest_returns_none(self):
        http = _FakeSession({f"{self.BASE}/megasena/99999": _FakeResponse(404)})

        assert ResultsClient(self.BASE, http=http).fetch_contest("megasena", 99999) is None

    def test_server_error_raises(self):
        http = _FakeSession({f"{self.BASE}/megasena/latest": _FakeResponse(500)})

        with pytest.raises(requests.HTTPError):
            ResultsClient(self.BASE, http=http).fetch_latest("megasena")


def test_http_session_mounts_retrying_adapter():
    session = build_http_session(retries=5, backoff_factor=0.1)

    adapter = session.get_adapter("https://results.example")
    assert adapter.max_retries.total == 5
    assert 503 in adapter.max_retries.status_forcelist
