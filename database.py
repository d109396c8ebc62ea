"""Connection setup shared by the diagnostic scripts.

Creates a SQLAlchemy pool either from a plain DATABASE_URL or via the Cloud
SQL Python Connector, and validates table names that have to be spliced
into SQL text.
"""

import re

import sqlalchemy
from google.cloud.sql.connector import Connector

import config

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_identifier(name: str) -> str:
    """Return `name` folded to lowercase if it is a plain SQL identifier.

    DDL and `SELECT *` cannot bind a table name as a parameter, so anything
    interpolated into statement text goes through here first. Postgres folds
    unquoted names to lowercase, and the catalog lookups must bind that same
    folded name.
    """
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid table name: {name!r}")
    return name.lower()


class PostgresDB:
    """Thin wrapper around a Postgres connection pool."""

    def __init__(self):
        self.connector = None
        if config.DATABASE_URL:
            self.pool = sqlalchemy.create_engine(config.DATABASE_URL)
        else:
            self.connector = Connector()
            self.pool = sqlalchemy.create_engine(
                "postgresql+pg8000://",
                creator=self._get_conn,
            )

    def _get_conn(self):
        """Return a fresh pg8000 connection via the Cloud SQL connector.

        Raises a clear error if required settings are missing to avoid
        ambiguous connection failures.
        """
        # Fail fast if required secrets are missing
        if not getattr(config, "DB_PASS", None):
            raise RuntimeError("DB_PASS environment variable is required but not set.")
        if not getattr(config, "DB_USER", None):
            raise RuntimeError("DB_USER environment variable is required but not set.")
        if not config.PROJECT_ID or not config.INSTANCE_NAME:
            raise RuntimeError(
                "Set DATABASE_URL, or GCP_PROJECT_ID and CLOUDSQL_INSTANCE for Cloud SQL."
            )
        return self.connector.connect(
            f"{config.PROJECT_ID}:{config.REGION}:{config.INSTANCE_NAME}",
            "pg8000",
            user=config.DB_USER,
            password=config.DB_PASS,
            db=config.DATABASE_NAME
        )

    def describe(self) -> str:
        """Human-readable target for log lines (never includes the password)."""
        if self.connector is None:
            return self.pool.url.render_as_string(hide_password=True)
        return f"{config.PROJECT_ID}:{config.REGION}:{config.INSTANCE_NAME}/{config.DATABASE_NAME}"

    def close(self):
        """Dispose the pool and shut down the connector, if any."""
        self.pool.dispose()
        if self.connector is not None:
            self.connector.close()
