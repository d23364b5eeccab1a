"""Import official draw results into the SQL database.

Fetches contests from the public results API, upserts them into
lottery_draws and recomputes the heat map of the lottery.

Usage:
  python scripts/import_draws.py megasena --from 2700
  python scripts/import_draws.py lotofacil --from 3000 --to 3100 --skip-existing

Options:
  --from 1
  --to   (default: latest contest published)
  --skip-existing
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence
from dataclasses import asdict

import requests
from dotenv import load_dotenv
from tqdm import tqdm

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))
# Config defaults are read from the environment at import time.
load_dotenv()

from loterias import models  # noqa: F401,E402  (register tables)
from loterias.config import BaseConfig, resolve_database_url  # noqa: E402
from loterias.db import create_app_engine, create_session_factory  # noqa: E402
from loterias.errors import AppError  # noqa: E402
from loterias.models.base import Base  # noqa: E402
from loterias.repositories.lottery_repository import DrawRepository  # noqa: E402
from loterias.services.registry import build_services  # noqa: E402
from loterias.services.results_client import ResultsClient, build_http_session  # noqa: E402

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch lottery results and upsert them into the database")
    parser.add_argument("lottery_id", help="e.g. megasena, lotofacil, quina")
    parser.add_argument("--from", dest="from_contest", type=int, default=1)
    parser.add_argument(
        "--to",
        dest="to_contest",
        type=int,
        default=None,
        help="Last contest to import (default: latest published)",
    )
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=10.0)
    parser.add_argument("--retries", dest="retries", type=int, default=3)
    parser.add_argument("--backoff", dest="backoff", type=float, default=0.5)
    parser.add_argument("--api-base", dest="api_base", type=str, default=None)
    parser.add_argument("--skip-existing", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    config = BaseConfig()
    client = ResultsClient(
        args.api_base or config.RESULTS_API_BASE,
        http=build_http_session(retries=args.retries, backoff_factor=args.backoff),
        timeout_seconds=args.timeout_seconds,
    )

    if args.from_contest < 1:
        raise SystemExit("--from must be >= 1")

    to_contest = args.to_contest
    if to_contest is None:
        latest = client.fetch_latest(args.lottery_id)
        if latest is None:
            raise SystemExit(f"No results published for {args.lottery_id}")
        to_contest = latest.contest_number
    if to_contest < args.from_contest:
        raise SystemExit(f"--to ({to_contest}) must be >= --from ({args.from_contest})")

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)
    session_factory = create_session_factory(engine)

    services = build_services(asdict(config))
    draws = DrawRepository()

    logger.info("Import %s contests %s..%s", args.lottery_id, args.from_contest, to_contest)

    imported = 0
    with session_factory() as session, session.begin():
        services.lotteries.get_lottery(session, args.lottery_id)

        for contest in tqdm(range(int(args.from_contest), int(to_contest) + 1), desc="Importing"):
            if args.skip_existing and draws.get_by_contest(session, args.lottery_id, contest) is not None:
                continue

            try:
                fetched = client.fetch_contest(args.lottery_id, contest)
            except (requests.RequestException, ValueError):
                logger.exception("Failed to fetch %s contest %s; skipping", args.lottery_id, contest)
                continue
            if fetched is None:
                logger.warning("Contest %s of %s not found", contest, args.lottery_id)
                continue

            try:
                services.lotteries.add_draw(
                    session,
                    args.lottery_id,
                    contest_number=fetched.contest_number,
                    draw_date=fetched.draw_date,
                    numbers=fetched.numbers,
                    prize_amount=fetched.prize_amount,
                    winners=fetched.winners,
                    is_official=True,
                )
            except AppError:
                logger.exception("Rejected %s contest %s; skipping", args.lottery_id, contest)
                continue
            imported += 1

        services.frequencies.update_frequencies(session, args.lottery_id)

    logger.info("Imported %s draws", imported)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
