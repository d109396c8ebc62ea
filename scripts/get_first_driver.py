"""Print the first driver in the database (handy for grabbing a test id)."""
from sqlalchemy import text

import config
from database import PostgresDB, validate_identifier
from logger import get_logger

logger = get_logger(__name__)


def fetch_first_driver(conn, table_name=None):
    table_name = validate_identifier(table_name or config.DRIVERS_TABLE)
    stmt = text(f"SELECT id, name, mobile FROM {table_name} LIMIT 1")
    row = conn.execute(stmt).mappings().first()
    return dict(row) if row is not None else None


def main() -> int:
    db = None
    try:
        db = PostgresDB()
        with db.pool.connect() as conn:
            driver = fetch_first_driver(conn)

        if driver is None:
            logger.info("No driver found in the database")
        else:
            logger.info("Driver found:")
            logger.info(f"  ID: {driver['id']}")
            logger.info(f"  Name: {driver['name']}")
            logger.info(f"  Phone: {driver['mobile']}")
    except Exception as e:
        logger.error(f"Error fetching driver: {e}", exc_info=True)
        return 1
    finally:
        if db is not None:
            db.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
