"""Shared fixtures: an app bound to a throwaway SQLite file."""

from __future__ import annotations

import random
from datetime import datetime, timedelta

import pytest
import pytz

from loterias import create_app
from loterias.services.registry import build_services


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'test.db'}",
            "LOG_LEVEL": "WARNING",
        }
    )
    # Deterministic game generation.
    app.extensions["services"] = build_services(app.config, rng=random.Random(1234))
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    factory = app.extensions["session_factory"]
    with factory() as s:
        yield s
        s.rollback()


@pytest.fixture
def services(app):
    return app.extensions["services"]


@pytest.fixture
def seed_draws(client):
    """Post ``draws`` (list of number lists) as consecutive contests starting at 1."""

    def _seed(lottery_id: str, draws: list[list[int]]) -> None:
        start = pytz.UTC.localize(datetime(2025, 1, 1, 23, 0))
        for i, numbers in enumerate(draws, start=1):
            resp = client.post(
                f"/api/lotteries/{lottery_id}/draws",
                json={
                    "contest_number": i,
                    "draw_date": (start + timedelta(days=i)).isoformat(),
                    "numbers": numbers,
                },
            )
            assert resp.status_code == 201, resp.get_json()

    return _seed
