"""Verify the device identifier (IMEI) stored for one driver.

Usage: python -m scripts.verify_driver_device [--driver-id <uuid>]
"""
import argparse

from sqlalchemy import text

import config
from database import PostgresDB, validate_identifier
from logger import get_logger

logger = get_logger(__name__)


def fetch_driver_device(conn, driver_id, table_name=None):
    """Return id, name, mobile and device_id for `driver_id`, or None."""
    table_name = validate_identifier(table_name or config.DRIVERS_TABLE)
    stmt = text(f"""
        SELECT id, name, mobile, device_id
        FROM {table_name}
        WHERE id = :driver_id
    """)
    row = conn.execute(stmt, {"driver_id": driver_id}).mappings().first()
    return dict(row) if row is not None else None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Show the stored device id for a driver.")
    parser.add_argument("--driver-id", default=config.DRIVER_ID, help="Driver primary key")
    args = parser.parse_args(argv)

    db = None
    try:
        db = PostgresDB()
        with db.pool.connect() as conn:
            driver = fetch_driver_device(conn, args.driver_id)

        if driver is None:
            logger.info(f"Driver {args.driver_id} not found")
        else:
            logger.info("Driver data:")
            logger.info(f"  - ID: {driver['id']}")
            logger.info(f"  - Name: {driver['name']}")
            logger.info(f"  - Phone: {driver['mobile']}")
            logger.info(f"  - Device ID (IMEI): {driver['device_id'] or '(empty)'}")
    except Exception as e:
        logger.error(f"Error verifying device_id: {e}", exc_info=True)
        return 1
    finally:
        if db is not None:
            db.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
