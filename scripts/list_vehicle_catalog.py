"""List the registered vehicle types, brands and models."""
from sqlalchemy import text

from database import PostgresDB
from logger import get_logger

logger = get_logger(__name__)

CATALOG_QUERIES = {
    "vehicle_types": "SELECT id, name, capacity, active FROM vehicle_types",
    "brands": "SELECT id, name, active FROM brands",
    "vehicle_models": "SELECT name, brand_id, active FROM vehicle_models",
}


def list_vehicle_catalog(conn):
    return {
        name: [dict(r) for r in conn.execute(text(sql)).mappings().all()]
        for name, sql in CATALOG_QUERIES.items()
    }


def main() -> int:
    db = None
    try:
        db = PostgresDB()
        with db.pool.connect() as conn:
            catalog = list_vehicle_catalog(conn)

        logger.info("=== VEHICLE TYPES ===")
        logger.info(f"Total: {len(catalog['vehicle_types'])}")
        for t in catalog["vehicle_types"]:
            logger.info(f"- {t['name']} (ID: {t['id']}, Capacity: {t['capacity']}, Active: {t['active']})")

        logger.info("=== BRANDS ===")
        logger.info(f"Total: {len(catalog['brands'])}")
        for b in catalog["brands"]:
            logger.info(f"- {b['name']} (ID: {b['id']}, Active: {b['active']})")

        logger.info("=== MODELS ===")
        logger.info(f"Total: {len(catalog['vehicle_models'])}")
        for m in catalog["vehicle_models"]:
            logger.info(f"- {m['name']} (Brand ID: {m['brand_id']}, Active: {m['active']})")
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1
    finally:
        if db is not None:
            db.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
