"""Tests for cart URL / deep link construction."""

from urllib.parse import parse_qs, urlsplit

import pytest

from loterias.errors import UnknownPlatformError
from loterias.services.cart_url_builder import (
    PLATFORMS,
    CartGame,
    build_cart_url,
    choose_url,
    is_mobile_user_agent,
    list_platforms,
)


def _query(url: str) -> dict[str, list[str]]:
    parts = urlsplit(url)
    # Caixa keeps its route (and query) inside the fragment.
    raw = parts.query or parts.fragment.partition("?")[2]
    return parse_qs(raw)


class TestBuildCartUrl:
    def test_caixa_megasena_single_game(self):
        result = build_cart_url("caixa", "megasena", [{"numbers": [1, 2, 3, 4, 5, 6]}])

        assert result.success is True
        assert result.cart_url
        assert result.cart_url.startswith("https://www.loteriasonline.caixa.gov.br/")
        assert "/mega-sena/carrinho" in result.cart_url
        assert _query(result.cart_url)["apostas"] == ["01,02,03,04,05,06"]
        assert result.deep_link is None
        assert result.games_count == 1

    def test_unknown_platform_fails(self):
        with pytest.raises(UnknownPlatformError) as exc_info:
            build_cart_url("unknown-platform", "megasena", [{"numbers": [1, 2, 3, 4, 5, 6]}])

        err = exc_info.value
        assert err.code == "unknown_platform"
        assert err.status_code == 400
        assert err.details["known_platforms"] == sorted(PLATFORMS)

    @pytest.mark.parametrize("platform_id", sorted(PLATFORMS))
    def test_no_games_gives_empty_cart(self, platform_id):
        result = build_cart_url(platform_id, "megasena", [])

        assert result.success is True
        assert result.games_count == 0
        assert result.cart_url.startswith("https://")
        assert "01" not in result.cart_url

    def test_numbers_are_sorted_and_padded(self):
        result = build_cart_url("superjogo", "megasena", [CartGame.of([42, 7, 13, 1, 60, 30])])

        assert _query(result.cart_url)["jogo"] == ["01-07-13-30-42-60"]

    def test_superjogo_encodes_each_game_with_contest(self):
        games = [
            {"numbers": [1, 2, 3, 4, 5, 6], "contest_number": 2850},
            {"numbers": [10, 20, 30, 40, 50, 60]},
        ]

        result = build_cart_url("superjogo", "megasena", games)

        query = _query(result.cart_url)
        assert query["loteria"] == ["mega-sena"]
        assert query["jogo"] == ["01-02-03-04-05-06@2850", "10-20-30-40-50-60"]
        assert result.deep_link is not None
        assert result.deep_link.startswith("superjogo://")
        assert _query(result.deep_link) == query

    def test_caixa_contest_only_when_shared(self):
        shared = build_cart_url(
            "caixa",
            "lotofacil",
            [
                {"numbers": list(range(1, 16)), "contest_number": 3100},
                {"numbers": list(range(11, 26)), "contest_number": 3100},
            ],
        )
        mixed = build_cart_url(
            "caixa",
            "lotofacil",
            [
                {"numbers": list(range(1, 16)), "contest_number": 3100},
                {"numbers": list(range(11, 26)), "contest_number": 3101},
            ],
        )

        assert _query(shared.cart_url)["concurso"] == ["3100"]
        assert len(_query(shared.cart_url)["apostas"][0].split(";")) == 2
        assert "concurso" not in _query(mixed.cart_url)

    def test_lottoland_has_deep_link(self):
        result = build_cart_url("lottoland", "quina", [{"numbers": [5, 4, 3, 2, 1], "contest_number": 6500}])

        assert result.cart_url.startswith("https://www.lottoland.com.br/quina/apostar?")
        assert _query(result.cart_url) == {"tickets": ["1,2,3,4,5"], "draw": ["6500"]}
        assert result.deep_link == "lottoland://play/quina?" + urlsplit(result.cart_url).query

    def test_platform_id_is_case_insensitive(self):
        result = build_cart_url("  Caixa ", "megasena", [{"numbers": [1, 2, 3, 4, 5, 6]}])

        assert result.platform_id == "caixa"

    def test_unmapped_lottery_uses_its_id(self):
        result = build_cart_url("lottoland", "timemania", [{"numbers": list(range(1, 11))}])

        assert "/timemania/apostar" in result.cart_url


class TestCallerHelpers:
    def test_list_platforms_flags_support(self):
        platforms = {p["id"]: p for p in list_platforms("supersete")}

        assert set(platforms) == {"superjogo", "caixa", "lottoland"}
        assert platforms["caixa"]["supported"] is True
        assert platforms["lottoland"]["supported"] is False
        assert platforms["caixa"]["has_deep_link"] is False
        assert platforms["superjogo"]["has_deep_link"] is True

    def test_list_platforms_without_lottery(self):
        assert all(p["supported"] for p in list_platforms())

    @pytest.mark.parametrize(
        "ua, mobile",
        [
            ("Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X)", True),
            ("Mozilla/5.0 (Linux; Android 14; Pixel 8)", True),
            ("Mozilla/5.0 (Windows NT 10.0; Win64; x64)", False),
            ("", False),
            (None, False),
        ],
    )
    def test_is_mobile_user_agent(self, ua, mobile):
        assert is_mobile_user_agent(ua) is mobile

    def test_choose_url_prefers_deep_link_on_mobile(self):
        result = build_cart_url("superjogo", "megasena", [{"numbers": [1, 2, 3, 4, 5, 6]}])

        assert choose_url(result, "Android") == result.deep_link
        assert choose_url(result, "Windows") == result.cart_url

    def test_choose_url_falls_back_without_deep_link(self):
        result = build_cart_url("caixa", "megasena", [{"numbers": [1, 2, 3, 4, 5, 6]}])

        assert choose_url(result, "iPhone") == result.cart_url
