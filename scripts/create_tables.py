"""Create database tables in the configured database and seed lottery types.

Reads DATABASE_URL from .env / environment and creates all registered ORM tables.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import logging
import pathlib
import sys

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from loterias import models  # noqa: F401,E402  (register tables)
from loterias.config import resolve_database_url  # noqa: E402
from loterias.db import create_app_engine, create_session_factory  # noqa: E402
from loterias.models.base import Base  # noqa: E402
from loterias.services.lottery_service import LotteryService  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> int:
    """Create all ORM tables and insert missing lottery types."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)

    session_factory = create_session_factory(engine)
    with session_factory() as session, session.begin():
        added = LotteryService().initialize_lottery_types(session)

    logger.info("Tables created (or already exist); %s lottery types added.", added)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
