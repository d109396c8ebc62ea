"""Drop a table with CASCADE and confirm it is gone (dangerous, no prompt).

Usage: python -m scripts.drop_table [--table cancellation_reasons]
"""
import argparse

from sqlalchemy import text

import config
from database import PostgresDB, validate_identifier
from logger import get_logger

logger = get_logger(__name__)


def drop_table(conn, table_name):
    """Drop `table_name` and return any catalog rows still naming it.

    An empty list means the table is gone. Running it twice is safe.
    """
    table_name = validate_identifier(table_name)

    conn.execute(text(f"DROP TABLE IF EXISTS {table_name} CASCADE"))
    conn.commit()
    logger.info(f"Table {table_name} removed.")

    check = conn.execute(text("""
        SELECT table_name
        FROM information_schema.tables
        WHERE table_name = :table_name
    """), {"table_name": table_name})
    return list(check.scalars().all())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Drop a table (IF EXISTS ... CASCADE).")
    parser.add_argument("--table", default=config.DROP_TABLE, help="Table to drop")
    args = parser.parse_args(argv)

    db = None
    try:
        db = PostgresDB()
        logger.info(f"Connecting to {db.describe()}...")
        logger.warning(f"Dropping table '{args.table}'...")
        with db.pool.connect() as conn:
            remaining = drop_table(conn, args.table)

        if not remaining:
            logger.info(f"Confirmed: table {args.table} no longer exists.")
        else:
            logger.warning(f"Table still exists: {remaining}")
    except Exception as e:
        logger.error(f"Error dropping table '{args.table}': {e}", exc_info=True)
        return 1
    finally:
        if db is not None:
            db.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
