"""Compare server timezone, column type and stored request timestamps.

Useful when delivery times show up shifted in the apps: it prints what
Postgres thinks "now" is, how requests.created_at is typed, and how the
latest rows render raw vs. converted to America/Sao_Paulo.
"""
from sqlalchemy import text

from database import PostgresDB
from logger import get_logger

logger = get_logger(__name__)

LOCAL_TZ = "America/Sao_Paulo"


def check_timestamps(conn, limit=3):
    timezone = conn.execute(text("SHOW timezone")).scalar()

    now = conn.execute(text(f"""
        SELECT
            NOW() AS utc_now,
            NOW() AT TIME ZONE '{LOCAL_TZ}' AS local_now,
            CURRENT_TIMESTAMP AS current_ts
    """)).mappings().first()

    column_type = conn.execute(text("""
        SELECT column_name, data_type, datetime_precision
        FROM information_schema.columns
        WHERE table_name = 'requests' AND column_name = 'created_at'
    """)).mappings().first()

    latest = conn.execute(text(f"""
        SELECT
            id,
            request_number,
            created_at,
            created_at AT TIME ZONE '{LOCAL_TZ}' AS created_at_local,
            to_char(created_at, 'YYYY-MM-DD HH24:MI:SS') AS created_at_formatted,
            to_char(created_at AT TIME ZONE '{LOCAL_TZ}', 'YYYY-MM-DD HH24:MI:SS') AS created_at_local_formatted,
            to_char(created_at AT TIME ZONE '{LOCAL_TZ}', 'YYYY-MM-DD"T"HH24:MI:SS"-03:00"') AS created_at_with_offset
        FROM requests
        ORDER BY created_at DESC
        LIMIT :limit
    """), {"limit": limit}).mappings().all()

    return {
        "timezone": timezone,
        "now": dict(now) if now is not None else None,
        "column_type": dict(column_type) if column_type is not None else None,
        "latest": [dict(r) for r in latest],
    }


def main() -> int:
    db = None
    try:
        db = PostgresDB()
        logger.info("Checking timestamps in the database")
        with db.pool.connect() as conn:
            report = check_timestamps(conn)

        logger.info(f"PostgreSQL timezone: {report['timezone']}")
        now = report["now"] or {}
        logger.info(f"   UTC NOW(): {now.get('utc_now')}")
        logger.info(f"   {LOCAL_TZ} NOW(): {now.get('local_now')}")
        logger.info(f"   CURRENT_TIMESTAMP: {now.get('current_ts')}")
        logger.info(f"created_at column type: {report['column_type']}")

        logger.info("Latest requests:")
        for idx, row in enumerate(report["latest"], start=1):
            logger.info(f"   {idx}. {row['request_number']}")
            logger.info(f"      created_at (raw): {row['created_at']}")
            logger.info(f"      created_at AT TZ: {row['created_at_local']}")
            logger.info(f"      formatted: {row['created_at_formatted']}")
            logger.info(f"      formatted local: {row['created_at_local_formatted']}")
            logger.info(f"      with offset: {row['created_at_with_offset']}")

        logger.info("Check complete")
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1
    finally:
        if db is not None:
            db.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
