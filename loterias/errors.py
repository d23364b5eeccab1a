"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class ConflictError(AppError):
    """Conflict (e.g., unique constraint)."""

    def __init__(self, message: str = "Conflict", details: Any | None = None) -> None:
        super().__init__(code="conflict", message=message, status_code=409, details=details)


class UnknownPlatformError(AppError):
    """Cart URL requested for a betting platform we do not know."""

    def __init__(self, platform_id: str, known: list[str] | None = None) -> None:
        super().__init__(
            code="unknown_platform",
            message=f"Unknown betting platform: {platform_id}",
            status_code=400,
            details={"platform_id": platform_id, "known_platforms": known or []},
        )
        self.platform_id = platform_id
