"""Query-string parsing helpers."""

from __future__ import annotations

from flask import request

from loterias.errors import ValidationError


def int_arg(name: str, default: int, *, minimum: int = 1, maximum: int | None = None) -> int:
    """Read an integer query parameter, raising ValidationError when malformed."""

    raw = (request.args.get(name) or "").strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise ValidationError(f"{name} must be an integer") from e

    if value < minimum or (maximum is not None and value > maximum):
        upper = f"..{maximum}" if maximum is not None else " or more"
        raise ValidationError(f"{name} must be {minimum}{upper}")
    return value
