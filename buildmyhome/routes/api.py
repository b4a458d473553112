"""
JSON API: catalog, cost estimation, inquiries and server-side saved plans.
"""

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy import false, func

from buildmyhome.domain.estimation import estimate_cost
from buildmyhome.domain.home_configuration import ConfigurationError, HomeConfiguration
from buildmyhome.domain.saved_plans import SavedPlanEntry
from buildmyhome.extensions import db, limiter
from buildmyhome.forms import InquiryForm
from buildmyhome.models import Material, Package, Project
from buildmyhome.services.inquiry_service import create_inquiry
from buildmyhome.services.saved_plan_sync import (
    PackageNotFound,
    create_saved_plan,
    delete_saved_plan,
    list_saved_plans,
)


api_bp = Blueprint('api', __name__)

LAKH = 100000

# size bucket -> (min exclusive, max inclusive) in square feet
SIZE_BUCKETS = {
    'small': (None, 1000),
    'medium': (1000, 2000),
    'large': (2000, None),
}

# budget bucket -> (min, max, min inclusive) in rupees
BUDGET_BUCKETS = {
    '15-20': (15 * LAKH, 20 * LAKH, True),
    '20-30': (20 * LAKH, 30 * LAKH, False),
    '30-50': (30 * LAKH, 50 * LAKH, False),
    '50+': (50 * LAKH, None, False),
}


def _get_arg(args, key):
    """Query parameter, stripped; None when absent, blank or 'all'."""
    value = args.get(key)
    if value is None:
        return None
    value = value.strip()
    if value == '' or value.lower() == 'all':
        return None
    return value


def _build_package_query(args):
    """Catalog query for the package listing filters."""
    query = Package.query

    size = _get_arg(args, 'size')
    if size:
        if size not in SIZE_BUCKETS:
            return query.filter(false())
        low, high = SIZE_BUCKETS[size]
        if low is not None:
            query = query.filter(Package.size > low)
        if high is not None:
            query = query.filter(Package.size <= high)

    bhk = _get_arg(args, 'bhk')
    if bhk:
        if bhk == '4+':
            query = query.filter(Package.bedrooms >= 4)
        elif bhk.isdigit():
            query = query.filter(Package.bedrooms == int(bhk))
        else:
            return query.filter(false())

    style = _get_arg(args, 'style')
    if style:
        query = query.filter(func.lower(Package.style) == style.lower())

    budget = _get_arg(args, 'budget')
    if budget:
        if budget not in BUDGET_BUCKETS:
            return query.filter(false())
        low, high, inclusive = BUDGET_BUCKETS[budget]
        query = query.filter(Package.price >= low if inclusive else Package.price > low)
        if high is not None:
            query = query.filter(Package.price <= high)

    return query.order_by(Package.id.asc())


def _not_found(message):
    return jsonify({'message': message}), 404


# ---- catalog ----

@api_bp.route('/packages')
def list_packages():
    packages = _build_package_query(request.args).all()
    return jsonify([package.to_dict() for package in packages])


@api_bp.route('/packages/<int:package_id>')
def get_package(package_id):
    package = db.session.get(Package, package_id)
    if package is None:
        return _not_found('Package not found')
    return jsonify(package.to_dict())


@api_bp.route('/materials')
def list_materials():
    query = Material.query
    category = _get_arg(request.args, 'category')
    if category:
        query = query.filter(Material.category == category)
    return jsonify([material.to_dict() for material in query.order_by(Material.id.asc()).all()])


@api_bp.route('/materials/<int:material_id>')
def get_material(material_id):
    material = db.session.get(Material, material_id)
    if material is None:
        return _not_found('Material not found')
    return jsonify(material.to_dict())


@api_bp.route('/projects')
def list_projects():
    projects = Project.query.order_by(Project.id.asc()).all()
    return jsonify([project.to_dict() for project in projects])


@api_bp.route('/projects/<int:project_id>')
def get_project(project_id):
    project = db.session.get(Project, project_id)
    if project is None:
        return _not_found('Project not found')
    return jsonify(project.to_dict())


# ---- estimation ----

@api_bp.route('/calculate-cost', methods=['POST'])
@limiter.limit(lambda: current_app.config.get('ESTIMATE_RATE_LIMIT', '120 per minute'))
def calculate_cost():
    """Authoritative estimate for a configuration payload."""
    try:
        config = HomeConfiguration.from_estimate_payload(request.get_json(silent=True))
    except ConfigurationError as exc:
        return jsonify({'message': exc.message, 'field': exc.field}), 400
    return jsonify({'estimatedCostRupees': estimate_cost(config)})


# ---- inquiries ----

@api_bp.route('/inquiries', methods=['POST'])
@limiter.limit(lambda: current_app.config.get('INQUIRY_RATE_LIMIT', '10 per hour'))
def submit_inquiry():
    form = InquiryForm()
    if not form.validate_on_submit():
        return jsonify({'message': 'Invalid inquiry data', 'errors': form.errors}), 400

    custom_package = None
    payload = request.get_json(silent=True)
    if isinstance(payload, dict) and payload.get('customPackage') is not None:
        try:
            custom_package = HomeConfiguration.from_dict(payload['customPackage']).to_dict()
        except ConfigurationError as exc:
            return jsonify({'message': exc.message, 'errors': {exc.field: [exc.message]}}), 400

    try:
        inquiry = create_inquiry(form, custom_package=custom_package)
    except Exception:
        return jsonify({'message': 'Failed to create inquiry'}), 500
    return jsonify(inquiry.to_dict()), 201


# ---- saved plans (server copy) ----

@api_bp.route('/saved-plans/<session_id>')
def get_saved_plans(session_id):
    return jsonify([plan.to_dict() for plan in list_saved_plans(session_id)])


@api_bp.route('/saved-plans', methods=['POST'])
def add_saved_plan():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({'message': 'Expected a JSON object', 'field': 'body'}), 400

    session_id = payload.get('sessionId')
    session_id = session_id.strip() if isinstance(session_id, str) else ''
    if not session_id:
        return jsonify({'message': 'sessionId is required', 'field': 'sessionId'}), 400

    try:
        entry = SavedPlanEntry.from_dict(payload)
    except ConfigurationError as exc:
        return jsonify({'message': exc.message, 'field': exc.field}), 400

    try:
        record = create_saved_plan(session_id, entry)
    except PackageNotFound:
        return _not_found('Package not found')
    except Exception:
        current_app.logger.exception('Failed to save plan for session %s', session_id)
        return jsonify({'message': 'Failed to save plan'}), 500
    return jsonify(record.to_dict()), 201


@api_bp.route('/saved-plans/<int:plan_id>', methods=['DELETE'])
def remove_saved_plan(plan_id):
    try:
        deleted = delete_saved_plan(plan_id)
    except Exception:
        current_app.logger.exception('Failed to delete saved plan %s', plan_id)
        return jsonify({'message': 'Failed to delete saved plan'}), 500
    if not deleted:
        return _not_found('Saved plan not found')
    return '', 204
