"""Inspect a table: catalog existence, column layout and every row.

Usage: python -m scripts.inspect_table [--table company_cancellation_types]
"""
import argparse

from sqlalchemy import text

import config
from database import PostgresDB, validate_identifier
from logger import get_logger

logger = get_logger(__name__)


def inspect_table(conn, table_name):
    """Return existence, ordered column metadata and all rows for `table_name`."""
    table_name = validate_identifier(table_name)

    exists = conn.execute(text("""
        SELECT EXISTS (
            SELECT FROM information_schema.tables
            WHERE table_name = :table_name
        )
    """), {"table_name": table_name}).scalar()

    columns = conn.execute(text("""
        SELECT column_name, data_type, is_nullable, column_default
        FROM information_schema.columns
        WHERE table_name = :table_name
        ORDER BY ordinal_position
    """), {"table_name": table_name}).mappings().all()

    rows = conn.execute(text(f"SELECT * FROM {table_name}")).mappings().all()

    return {
        "exists": bool(exists),
        "columns": [dict(c) for c in columns],
        "rows": [dict(r) for r in rows],
        "count": len(rows),
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Inspect a table's schema and contents.")
    parser.add_argument("--table", default=config.INSPECT_TABLE, help="Table to inspect")
    args = parser.parse_args(argv)

    db = None
    try:
        db = PostgresDB()
        logger.info(f"Connecting to {db.describe()}...")
        with db.pool.connect() as conn:
            report = inspect_table(conn, args.table)

        logger.info(f"Table exists: {report['exists']}")
        logger.info(f"Table structure ({len(report['columns'])} columns):")
        for col in report["columns"]:
            logger.info(
                f"   - {col['column_name']} ({col['data_type']}) | "
                f"Nullable: {col['is_nullable']} | Default: {col['column_default']}"
            )
        logger.info("Existing data:")
        for row in report["rows"]:
            logger.info(f"   {row}")
        logger.info(f"Total records: {report['count']}")
    except Exception as e:
        logger.error(f"Error inspecting table '{args.table}': {e}", exc_info=True)
        return 1
    finally:
        if db is not None:
            db.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
