"""
Database schema checks.

Migrations (``flask db upgrade``) are the schema source of truth. For local
development only, a missing schema on a database that has never been
migrated is created with ``db.create_all()``.
"""

from flask import current_app
from sqlalchemy import inspect, text
from buildmyhome.extensions import db


def get_missing_tables() -> set:
    """Model tables that do not exist in the connected database."""
    try:
        import buildmyhome.models  # noqa: F401

        existing_tables = set(inspect(db.engine).get_table_names())
        return set(db.metadata.tables.keys()) - existing_tables
    except Exception as exc:
        current_app.logger.error('Failed to inspect database tables: %s', exc, exc_info=True)
        return set()


def verify_alembic_version_table() -> bool:
    """True when migrations have been applied to this database at least once."""
    try:
        db.session.execute(text('SELECT 1 FROM alembic_version LIMIT 1'))
        return True
    except Exception:
        db.session.rollback()
        return False


def ensure_development_schema(app) -> bool:
    """Create missing tables on an unmigrated development database.

    Returns True when the schema is complete afterwards.
    """
    with app.app_context():
        missing = get_missing_tables()
        if not missing:
            return True

        if verify_alembic_version_table():
            current_app.logger.error(
                'Tables %s are missing but migrations were applied. Run: flask db upgrade',
                ', '.join(sorted(missing)),
            )
            return False

        current_app.logger.warning(
            'Creating missing tables with db.create_all(): %s. Use flask db upgrade outside development.',
            ', '.join(sorted(missing)),
        )
        try:
            db.create_all()
        except Exception as exc:
            current_app.logger.error('Schema creation failed: %s', exc, exc_info=True)
            return False
        return True
