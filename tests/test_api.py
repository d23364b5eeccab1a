"""HTTP API tests through the Flask test client."""

from datetime import datetime

import pytz


def _data(resp):
    body = resp.get_json()
    assert body["success"] is True, body
    assert body["error"] is None
    return body["data"]


def _error(resp):
    body = resp.get_json()
    assert body["success"] is False
    assert body["data"] is None
    return body["error"]


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert _data(resp) == {"status": "ok", "database": "ok"}

    def test_unknown_route_uses_envelope(self, client):
        resp = client.get("/nope")

        assert resp.status_code == 404
        assert _error(resp)["code"] == "not_found"


class TestLotteries:
    def test_list_seeds_catalogue(self, client):
        data = _data(client.get("/api/lotteries"))

        ids = {row["id"] for row in data}
        assert "megasena" in ids and "lotofacil" in ids
        mega = next(row for row in data if row["id"] == "megasena")
        assert mega["total_numbers"] == 60
        assert mega["draw_days"] == ["Wednesday", "Saturday"]

    def test_get_one_with_display_info(self, client):
        data = _data(client.get("/api/lotteries/quina"))

        assert data["display_name"] == "Quina"
        assert data["display_info"]["range"] == "5-15 números de 1 a 80"

    def test_unknown_lottery_is_404(self, client):
        resp = client.get("/api/lotteries/powerball/draws")

        assert resp.status_code == 404
        assert _error(resp)["code"] == "not_found"

    def test_draws_newest_first_with_limit(self, client, seed_draws):
        seed_draws("megasena", [[1, 2, 3, 4, 5, 6], [7, 8, 9, 10, 11, 12], [13, 14, 15, 16, 17, 18]])

        resp = client.get("/api/lotteries/megasena/draws?limit=2")

        body = resp.get_json()
        assert [d["contest_number"] for d in body["data"]] == [3, 2]
        assert body["meta"] == {"count": 2, "limit": 2}
        assert body["data"][0]["drawn_numbers"] == [13, 14, 15, 16, 17, 18]

    def test_bad_limit(self, client):
        resp = client.get("/api/lotteries/megasena/draws?limit=abc")

        assert resp.status_code == 400
        assert _error(resp)["code"] == "validation_error"
        assert client.get("/api/lotteries/megasena/draws?limit=0").status_code == 400

    def test_post_draw_validation(self, client):
        resp = client.post(
            "/api/lotteries/megasena/draws",
            json={"contest_number": 1, "draw_date": "2025-01-01T20:00:00", "numbers": [1, 2, 3, 4, 5, 99]},
        )

        assert resp.status_code == 400
        assert "numbers" in _error(resp)["details"]

    def test_post_draw_missing_fields(self, client):
        resp = client.post("/api/lotteries/megasena/draws", json={"numbers": [1, 2, 3]})

        assert resp.status_code == 400
        details = _error(resp)["details"]
        assert "contest_number" in details and "draw_date" in details

    def test_repost_updates(self, client):
        payload = {"contest_number": 5, "draw_date": "2025-01-01T20:00:00+00:00", "numbers": [1, 2, 3, 4, 5]}

        assert client.post("/api/lotteries/quina/draws", json=payload).status_code == 201
        resp = client.post("/api/lotteries/quina/draws", json=dict(payload, numbers=[6, 7, 8, 9, 10]))

        assert resp.status_code == 200
        assert _data(resp)["drawn_numbers"] == [6, 7, 8, 9, 10]

    def test_next_draw(self, client, seed_draws):
        seed_draws("lotofacil", [list(range(1, 16))])

        data = _data(client.get("/api/lotteries/lotofacil/next-draw"))

        assert data["contest_number"] == 2
        assert set(data["time_remaining"]) == {"days", "hours", "minutes", "seconds"}
        draw_date = datetime.fromisoformat(data["draw_date"])
        assert draw_date > datetime.now(pytz.UTC)


class TestFrequency:
    def test_empty_history_all_cold(self, client):
        data = _data(client.get("/api/lotteries/megasena/frequency"))

        assert data["draws_used"] == 0
        assert data["stored"] is False
        assert len(data["numbers"]) == 60
        assert {n["temperature"] for n in data["numbers"]} == {"cold"}
        assert data["hot_numbers"] == [] and data["warm_numbers"] == []
        assert len(data["cold_numbers"]) == 60

    def test_update_and_read_back(self, client, seed_draws):
        # 1..5 drawn in every contest; 6..10 rotate; the rest never appear.
        seed_draws("quina", [[1, 2, 3, 4, 5], [1, 2, 3, 4, 6], [1, 2, 3, 5, 7], [1, 2, 4, 5, 8]])

        updated = _data(client.post("/api/lotteries/quina/update-frequency"))
        stored = _data(client.get("/api/lotteries/quina/frequency"))

        assert updated["stored"] is True
        assert stored["stored"] is True
        assert stored["draws_used"] == 4
        assert stored["max_count"] == 4
        assert stored["min_count"] == 0

        by_number = {n["number"]: n for n in stored["numbers"]}
        assert by_number[1]["frequency"] == 4
        assert by_number[1]["temperature"] == "hot"
        assert by_number[1]["draws_since_last_seen"] == 0
        assert by_number[6]["draws_since_last_seen"] == 2
        assert by_number[80]["frequency"] == 0
        assert by_number[80]["temperature"] == "cold"
        assert by_number[80]["last_drawn"] is None
        assert by_number[80]["draws_since_last_seen"] == 4
        assert stored["hot_numbers"][:2] == [1, 2]

    def test_update_replaces_rows(self, client, seed_draws):
        seed_draws("quina", [[1, 2, 3, 4, 5]])
        client.post("/api/lotteries/quina/update-frequency")
        client.post("/api/lotteries/quina/update-frequency")

        data = _data(client.get("/api/lotteries/quina/frequency"))

        assert len(data["numbers"]) == 80


class TestGames:
    def test_generate_saves_games_for_next_contest(self, client, seed_draws):
        seed_draws("megasena", [[1, 2, 3, 4, 5, 6], [1, 2, 3, 7, 8, 9]])
        client.post("/api/lotteries/megasena/update-frequency")

        resp = client.post(
            "/api/games/generate",
            json={"lottery_id": "megasena", "numbers_count": 6, "games_count": 3, "strategy": "hot"},
        )

        assert resp.status_code == 201
        games = _data(resp)
        assert len(games) == 3
        for game in games:
            nums = game["selected_numbers"]
            assert nums == sorted(nums)
            assert len(set(nums)) == 6
            assert all(1 <= n <= 60 for n in nums)
            assert game["contest_number"] == 3
            assert game["strategy"] == "hot"
            assert game["user_id"] == "guest-user"

        listed = client.get("/api/games?limit=10").get_json()
        assert listed["meta"]["count"] == 3

    def test_generate_ai_skips_latest_five_draws(self, client, seed_draws):
        history = [
            [1, 2, 3, 4, 5, 6],
            [1, 2, 3, 7, 8, 9],
            [10, 11, 12, 13, 14, 15],
            [16, 17, 18, 19, 20, 21],
            [22, 23, 24, 25, 26, 27],
            [28, 29, 30, 31, 32, 33],
            [34, 35, 36, 37, 38, 39],
        ]
        seed_draws("megasena", history)
        client.post("/api/lotteries/megasena/update-frequency")

        resp = client.post(
            "/api/games/generate",
            json={"lottery_id": "megasena", "numbers_count": 6, "games_count": 2, "strategy": "ai"},
        )

        assert resp.status_code == 201
        recent = {n for draw in history[-5:] for n in draw}
        for game in _data(resp):
            assert game["strategy"] == "ai"
            assert not recent & set(game["selected_numbers"])
            # 1, 2 and 3 came out twice, in contests older than the newest five.
            assert {1, 2, 3} <= set(game["selected_numbers"])

    def test_generate_ai_needs_history(self, client):
        resp = client.post(
            "/api/games/generate",
            json={"lottery_id": "megasena", "numbers_count": 6, "strategy": "ai"},
        )

        assert resp.status_code == 400
        assert "strategy" in _error(resp)["details"]

    def test_generate_rejects_bad_input(self, client):
        bad_strategy = client.post(
            "/api/games/generate",
            json={"lottery_id": "megasena", "numbers_count": 6, "strategy": "lucky"},
        )
        bad_count = client.post(
            "/api/games/generate",
            json={"lottery_id": "megasena", "numbers_count": 3},
        )

        assert bad_strategy.status_code == 400
        assert "strategy" in _error(bad_strategy)["details"]
        assert bad_count.status_code == 400
        assert "numbers_count" in _error(bad_count)["details"]

    def test_create_and_check(self, client, seed_draws):
        seed_draws("megasena", [[1, 2, 3, 4, 5, 6]])
        created = client.post(
            "/api/games",
            json={"lottery_id": "megasena", "numbers": [10, 11, 12, 13, 14, 15], "contest_number": 2},
        )
        client.post(
            "/api/games",
            json={"lottery_id": "megasena", "numbers": [1, 2, 3, 4, 50, 51], "contest_number": 2},
        )
        assert created.status_code == 201
        assert _data(created)["is_played"] is False

        not_drawn = client.post("/api/games/check", json={"lottery_id": "megasena", "contest_number": 2})
        assert not_drawn.status_code == 404

        client.post(
            "/api/lotteries/megasena/draws",
            json={"contest_number": 2, "draw_date": "2025-01-04T23:00:00+00:00", "numbers": [1, 2, 3, 4, 5, 6]},
        )
        result = _data(client.post("/api/games/check", json={"lottery_id": "megasena", "contest_number": 2}))

        assert result["games_checked"] == 2
        assert result["winners"] == 1

        games = {tuple(g["selected_numbers"]): g for g in _data(client.get("/api/games"))}
        winner = games[(1, 2, 3, 4, 50, 51)]
        assert winner["matches"] == 4
        assert winner["prize_won"] == "150.00"
        assert winner["is_played"] is True
        assert games[(10, 11, 12, 13, 14, 15)]["matches"] == 0

        stats = _data(client.get("/api/users/stats"))
        assert stats["total_games"] == 2
        assert stats["wins"] == 1
        assert stats["total_prize_won"] == "150.00"
        assert stats["accuracy"] == 50.0
        assert stats["average_numbers"] == 6.0

    def test_create_rejects_duplicates(self, client):
        resp = client.post("/api/games", json={"lottery_id": "megasena", "numbers": [1, 1, 2, 3, 4, 5]})

        assert resp.status_code == 400

    def test_stats_without_games(self, client):
        stats = _data(client.get("/api/users/stats"))

        assert stats["total_games"] == 0
        assert stats["favorite_strategy"] is None


class TestBettingPlatforms:
    def test_catalogue(self, client):
        data = _data(client.get("/api/betting-platforms?lotteryId=quina"))

        assert {p["id"] for p in data} == {"superjogo", "caixa", "lottoland"}
        assert all(p["supported"] for p in data)

    def test_cart_url(self, client):
        resp = client.post(
            "/api/betting-platforms/cart-url",
            json={"platform_id": "caixa", "lottery_id": "megasena", "games": [{"numbers": [1, 2, 3, 4, 5, 6]}]},
        )

        data = _data(resp)
        assert data["success"] is True
        assert "01%2C02%2C03%2C04%2C05%2C06" in data["cart_url"]
        assert data["deep_link"] is None
        assert data["open_url"] == data["cart_url"]

    def test_cart_url_mobile_gets_deep_link(self, client):
        resp = client.post(
            "/api/betting-platforms/cart-url",
            json={"platform_id": "superjogo", "lottery_id": "megasena", "games": [{"numbers": [1, 2, 3, 4, 5, 6]}]},
            headers={"User-Agent": "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X)"},
        )

        data = _data(resp)
        assert data["open_url"] == data["deep_link"]
        assert data["open_url"].startswith("superjogo://")

    def test_unknown_platform(self, client):
        resp = client.post(
            "/api/betting-platforms/cart-url",
            json={"platform_id": "unknown-platform", "lottery_id": "megasena", "games": [{"numbers": [1, 2, 3]}]},
        )

        assert resp.status_code == 400
        assert _error(resp)["code"] == "unknown_platform"

    def test_duplicate_or_zero_numbers_rejected(self, client):
        dup = client.post(
            "/api/betting-platforms/cart-url",
            json={"platform_id": "caixa", "lottery_id": "megasena", "games": [{"numbers": [1, 1, 2]}]},
        )
        zero = client.post(
            "/api/betting-platforms/cart-url",
            json={"platform_id": "caixa", "lottery_id": "megasena", "games": [{"numbers": [0, 1, 2]}]},
        )

        assert dup.status_code == 400
        assert "games" in _error(dup)["details"]
        assert zero.status_code == 400

    def test_web_client_camel_case_payload(self, client):
        resp = client.post(
            "/api/betting-platforms/cart-url",
            json={
                "platformId": "caixa",
                "games": [{"lotteryId": "quina", "numbers": [5, 4, 3, 2, 1], "contestNumber": 6500}],
            },
        )

        data = _data(resp)
        assert data["platform_id"] == "caixa"
        assert data["lottery_id"] == "quina"
        assert data["games_count"] == 1
        assert "concurso=6500" in data["cart_url"]

    def test_no_games(self, client):
        resp = client.post(
            "/api/betting-platforms/cart-url",
            json={"platform_id": "lottoland", "lottery_id": "megasena"},
        )

        data = _data(resp)
        assert data["games_count"] == 0
        assert data["cart_url"] == "https://www.lottoland.com.br/megasena/apostar"


class TestAiAnalysis:
    def test_missing_analysis(self, client):
        resp = client.get("/api/ai/analysis/megasena?type=prediction")

        assert resp.status_code == 404

    def test_store_and_fetch_latest(self, client):
        first = {"lottery_id": "megasena", "analysis_type": "prediction", "result": {"numbers": [1, 2]}, "confidence": "0.5"}
        second = dict(first, result={"numbers": [3, 4], "reasoning": "x"}, confidence="0.75")

        assert client.post("/api/ai/analysis", json=first).status_code == 201
        assert client.post("/api/ai/analysis", json=second).status_code == 201

        data = _data(client.get("/api/ai/analysis/megasena"))
        assert data["result"] == {"numbers": [3, 4], "reasoning": "x"}
        assert data["analysis_type"] == "prediction"
        assert data["confidence"] == "0.7500"

    def test_bad_type(self, client):
        resp = client.post(
            "/api/ai/analysis",
            json={"lottery_id": "megasena", "analysis_type": "astrology", "result": {}},
        )

        assert resp.status_code == 400
