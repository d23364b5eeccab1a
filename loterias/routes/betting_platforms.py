"""Betting platform routes: catalogue and cart URLs."""

from __future__ import annotations

from flask import Blueprint, request

from loterias.schemas.cart import CartUrlRequestSchema, CartUrlResponseSchema, PlatformSchema
from loterias.services.cart_url_builder import build_cart_url, choose_url, list_platforms
from loterias.utils.responses import ok

betting_platforms_bp = Blueprint("betting_platforms", __name__)

_request_schema = CartUrlRequestSchema()
_response_schema = CartUrlResponseSchema()
_platforms_schema = PlatformSchema(many=True)


@betting_platforms_bp.get("/betting-platforms")
def get_platforms():
    """Known platforms. ``lottery_id`` (or ``lotteryId``) flags support."""

    lottery_id = (request.args.get("lottery_id") or request.args.get("lotteryId") or "").strip() or None
    return ok(_platforms_schema.dump(list_platforms(lottery_id)))


@betting_platforms_bp.post("/betting-platforms/cart-url")
def cart_url():
    """Build the cart URL; the client opens it (``open_url`` honours mobile deep links).

    Body: ``platform_id``, ``lottery_id`` and ``games`` (``numbers``, optional
    ``contest_number``); the camelCase names work too.
    """

    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    result = build_cart_url(str(data["platform_id"]), str(data["lottery_id"]), data["games"])
    body = _response_schema.dump(result)
    body["open_url"] = choose_url(result, request.headers.get("User-Agent"))
    return ok(body)
