"""
Health check endpoints for monitoring the application and its database.

- /health        lightweight probe, no database access
- /health/ready  database connectivity and catalog schema
- /health/live   process liveness
"""

from flask import Blueprint, jsonify, current_app
from buildmyhome.extensions import db
from sqlalchemy import inspect, text
from datetime import datetime
import os


health_bp = Blueprint('health', __name__)

REQUIRED_TABLES = {'packages', 'materials', 'projects', 'inquiries', 'saved_plans'}


@health_bp.route('/health')
def health_check():
    """Returns 200 OK while the application is running."""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.utcnow().isoformat(),
        'service': 'buildmyhome',
    }), 200


@health_bp.route('/health/ready')
def readiness_check():
    """
    Readiness check including database connectivity.

    Returns 200 OK only if the database is reachable and every table the
    catalog, inquiry and saved-plan endpoints use exists.
    """
    checks = {
        'application': 'healthy',
        'database': 'unknown',
        'timestamp': datetime.utcnow().isoformat(),
    }

    status_code = 200

    try:
        db.session.execute(text('SELECT 1'))
        db.session.commit()
        checks['database'] = 'healthy'
    except Exception as exc:
        checks['database'] = 'unhealthy'
        checks['database_error'] = str(exc)
        status_code = 503
        current_app.logger.error('Database health check failed: %s', exc, exc_info=True)
        db.session.rollback()

    if checks['database'] == 'healthy':
        try:
            tables = set(inspect(db.engine).get_table_names())
            missing = REQUIRED_TABLES - tables
            if missing:
                checks['schema'] = 'incomplete'
                checks['missing_tables'] = sorted(missing)
                status_code = 503
            else:
                checks['schema'] = 'complete'
        except Exception as exc:
            checks['schema'] = 'unknown'
            checks['schema_error'] = str(exc)
            status_code = 503
            current_app.logger.error('Schema health check failed: %s', exc, exc_info=True)

    checks['overall'] = 'healthy' if status_code == 200 else 'unhealthy'

    return jsonify(checks), status_code


@health_bp.route('/health/live')
def liveness_check():
    """Liveness probe for container orchestration."""
    return jsonify({
        'status': 'alive',
        'pid': os.getpid(),
        'timestamp': datetime.utcnow().isoformat(),
    }), 200
