"""Cart URLs and deep links for third-party betting platforms.

Only builds URLs; opening them (new tab, app hand-off) is the caller's job.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from urllib.parse import urlencode

from loterias.errors import UnknownPlatformError

logger = logging.getLogger(__name__)

_MOBILE_UA = re.compile(r"iPhone|iPad|iPod|Android", re.IGNORECASE)


@dataclass(frozen=True)
class CartGame:
    numbers: tuple[int, ...]
    contest_number: int | None = None

    @classmethod
    def of(cls, numbers: Iterable[int], contest_number: int | None = None) -> "CartGame":
        return cls(
            numbers=tuple(sorted(int(n) for n in numbers)),
            contest_number=int(contest_number) if contest_number is not None else None,
        )


@dataclass(frozen=True)
class Platform:
    id: str
    name: str
    auth_required: bool
    # lottery id -> the platform's own name for it
    slugs: dict[str, str] = field(default_factory=dict)

    @property
    def has_deep_link(self) -> bool:
        return self.id in _DEEP_LINK_SCHEMES

    def slug_for(self, lottery_id: str) -> str:
        return self.slugs.get(lottery_id, lottery_id)


@dataclass(frozen=True)
class CartUrlResult:
    success: bool
    platform_id: str
    lottery_id: str
    cart_url: str
    deep_link: str | None
    games_count: int


PLATFORMS: dict[str, Platform] = {
    "superjogo": Platform(
        id="superjogo",
        name="SuperJogo",
        auth_required=True,
        slugs={
            "megasena": "mega-sena",
            "lotofacil": "lotofacil",
            "quina": "quina",
            "lotomania": "lotomania",
            "duplasena": "dupla-sena",
            "timemania": "timemania",
            "diadesorte": "dia-de-sorte",
            "milionaria": "mais-milionaria",
        },
    ),
    "caixa": Platform(
        id="caixa",
        name="Loterias Caixa",
        auth_required=True,
        slugs={
            "megasena": "mega-sena",
            "lotofacil": "lotofacil",
            "quina": "quina",
            "lotomania": "lotomania",
            "duplasena": "dupla-sena",
            "timemania": "timemania",
            "diadesorte": "dia-de-sorte",
            "supersete": "super-sete",
            "milionaria": "mais-milionaria",
        },
    ),
    "lottoland": Platform(
        id="lottoland",
        name="Lottoland",
        auth_required=False,
        slugs={
            "megasena": "megasena",
            "lotofacil": "lotofacil",
            "quina": "quina",
        },
    ),
}

_DEEP_LINK_SCHEMES = {
    "superjogo": "superjogo://carrinho/adicionar",
    "lottoland": "lottoland://play/{slug}",
}


def _padded(numbers: Sequence[int]) -> list[str]:
    return [f"{n:02d}" for n in numbers]


def _shared_contest(games: Sequence[CartGame]) -> int | None:
    contests = {g.contest_number for g in games}
    if len(contests) == 1:
        return next(iter(contests))
    return None


def _superjogo(platform: Platform, slug: str, games: Sequence[CartGame]) -> tuple[str, str | None]:
    params: list[tuple[str, str]] = [("loteria", slug)]
    for game in games:
        token = "-".join(_padded(game.numbers))
        if game.contest_number is not None:
            token = f"{token}@{game.contest_number}"
        params.append(("jogo", token))

    query = urlencode(params)
    cart_url = f"https://www.superjogo.com.br/carrinho/adicionar?{query}"
    deep_link = f"{_DEEP_LINK_SCHEMES[platform.id]}?{query}"
    return cart_url, deep_link


def _caixa(platform: Platform, slug: str, games: Sequence[CartGame]) -> tuple[str, str | None]:
    base = f"https://www.loteriasonline.caixa.gov.br/silce-web/#/{slug}/carrinho"
    if not games:
        return base, None

    params: list[tuple[str, str]] = [
        ("apostas", ";".join(",".join(_padded(g.numbers)) for g in games)),
    ]
    contest = _shared_contest(games)
    if contest is not None:
        params.append(("concurso", str(contest)))
    return f"{base}?{urlencode(params)}", None


def _lottoland(platform: Platform, slug: str, games: Sequence[CartGame]) -> tuple[str, str | None]:
    params: list[tuple[str, str]] = []
    if games:
        params.append(("tickets", "|".join(",".join(str(n) for n in g.numbers) for g in games)))
        contest = _shared_contest(games)
        if contest is not None:
            params.append(("draw", str(contest)))

    query = f"?{urlencode(params)}" if params else ""
    cart_url = f"https://www.lottoland.com.br/{slug}/apostar{query}"
    deep_link = _DEEP_LINK_SCHEMES[platform.id].format(slug=slug) + query
    return cart_url, deep_link


_ENCODERS = {
    "superjogo": _superjogo,
    "caixa": _caixa,
    "lottoland": _lottoland,
}


def get_platform(platform_id: str) -> Platform:
    platform = PLATFORMS.get(str(platform_id or "").strip().lower())
    if platform is None:
        raise UnknownPlatformError(str(platform_id), known=sorted(PLATFORMS))
    return platform


def build_cart_url(
    platform_id: str,
    lottery_id: str,
    games: Iterable[CartGame | dict],
) -> CartUrlResult:
    """Build the cart URL (and deep link, if the platform has an app).

    ``games`` may be CartGame instances or dicts with ``numbers`` and an
    optional ``contest_number``. An empty list yields the platform's empty
    cart for that lottery.

    Raises:
        UnknownPlatformError: ``platform_id`` is not one of PLATFORMS.
    """

    platform = get_platform(platform_id)

    normalized: list[CartGame] = []
    for game in games:
        if isinstance(game, CartGame):
            normalized.append(CartGame.of(game.numbers, game.contest_number))
        else:
            normalized.append(CartGame.of(game.get("numbers") or (), game.get("contest_number")))

    slug = platform.slug_for(lottery_id)
    cart_url, deep_link = _ENCODERS[platform.id](platform, slug, normalized)

    logger.info(
        "Built cart URL platform=%s lottery=%s games=%s",
        platform.id,
        lottery_id,
        len(normalized),
    )
    return CartUrlResult(
        success=True,
        platform_id=platform.id,
        lottery_id=lottery_id,
        cart_url=cart_url,
        deep_link=deep_link,
        games_count=len(normalized),
    )


def list_platforms(lottery_id: str | None = None) -> list[dict[str, object]]:
    """Platform catalogue, optionally flagging support for one lottery."""

    out: list[dict[str, object]] = []
    for platform in PLATFORMS.values():
        out.append(
            {
                "id": platform.id,
                "name": platform.name,
                "auth_required": platform.auth_required,
                "has_deep_link": platform.has_deep_link,
                "supported": lottery_id is None or lottery_id in platform.slugs,
            }
        )
    return out


def is_mobile_user_agent(user_agent: str | None) -> bool:
    return bool(user_agent) and _MOBILE_UA.search(user_agent or "") is not None


def choose_url(result: CartUrlResult, user_agent: str | None) -> str:
    """URL the client should open: the deep link on phones when there is one."""

    if result.deep_link and is_mobile_user_agent(user_agent):
        return result.deep_link
    return result.cart_url
