"""
Create the Eco5 tables and optionally load the demo rows.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eco5.auth import hash_password
from eco5.config import get_settings
from eco5.db import SqlDbClient

logger = logging.getLogger("eco5.init_db")


def main() -> int:
    parser = argparse.ArgumentParser(description="Eco5 database setup")
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy URL (defaults to DATABASE_URL / PG* settings)",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert the demo users and their rows",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    settings = get_settings()
    database_url = args.database_url or settings.resolved_database_url()
    if database_url is None:
        logger.error("No database configured; pass --database-url or set DATABASE_URL")
        return 1

    db = SqlDbClient(database_url, pool_size=settings.db_pool_size)
    logger.info("Tables ready")
    if args.seed:
        inserted = db.seed_demo_data(
            lambda password: hash_password(password, settings.bcrypt_rounds)
        )
        logger.info("Seeded %d demo users", inserted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
