"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: config values applied on top of the environment config
            (the test-suite uses this to point at a throwaway database).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from loterias.config import get_config
    from loterias.db import init_db
    from loterias.error_handlers import register_error_handlers
    from loterias.logging_config import configure_logging
    from loterias.routes.ai_analysis import ai_analysis_bp
    from loterias.routes.betting_platforms import betting_platforms_bp
    from loterias.routes.games import games_bp
    from loterias.routes.health import health_bp
    from loterias.routes.lotteries import lotteries_bp
    from loterias.services.registry import init_services

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    init_services(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(lotteries_bp, url_prefix="/api")
    app.register_blueprint(games_bp, url_prefix="/api")
    app.register_blueprint(betting_platforms_bp, url_prefix="/api")
    app.register_blueprint(ai_analysis_bp, url_prefix="/api")

    return app
