"""
Saved plan persistence.

The session list is authoritative for the visitor; the ``saved_plans`` table
keeps a server copy keyed by the anonymous client session id. Mirroring is
best-effort: a database failure is logged and the session list stands.
"""

from flask import current_app

from buildmyhome.extensions import db
from buildmyhome.models import Package, SavedPlan


class PackageNotFound(LookupError):
    pass


def list_saved_plans(session_id):
    return (
        SavedPlan.query.filter_by(session_id=session_id)
        .order_by(SavedPlan.created_at.asc(), SavedPlan.id.asc())
        .all()
    )


def create_saved_plan(session_id, entry):
    """Insert a saved plan row. Raises PackageNotFound for unknown package ids."""
    if not entry.is_custom and db.session.get(Package, entry.package_id) is None:
        raise PackageNotFound(entry.package_id)

    record = SavedPlan(
        session_id=session_id,
        package_id=entry.package_id,
        custom_package=entry.custom_package.to_dict() if entry.is_custom else None,
    )
    try:
        db.session.add(record)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return record


def delete_saved_plan(plan_id):
    """Delete by id; False when no such row exists."""
    record = db.session.get(SavedPlan, plan_id)
    if record is None:
        return False
    try:
        db.session.delete(record)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return True


def mirror_saved_plan(session_id, entry):
    """Best-effort server copy of a plan the visitor just saved."""
    try:
        return create_saved_plan(session_id, entry)
    except PackageNotFound:
        current_app.logger.info('Saved plan references unknown package %s; not mirrored', entry.package_id)
    except Exception as exc:
        current_app.logger.warning('Failed to mirror saved plan for session %s: %s', session_id, exc)
    return None
