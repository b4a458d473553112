"""Routes for the custom home builder wizard.

Each request rebuilds the wizard from the session snapshot, applies one
action and answers with the resulting state.
"""

from flask import current_app, jsonify, request, send_file
from io import BytesIO

from buildmyhome.domain.home_configuration import ConfigurationError
from buildmyhome.domain.saved_plans import SavedPlanEntry
from buildmyhome.domain.wizard import BuilderWizard, StepBlocked
from buildmyhome.extensions import db, limiter
from buildmyhome.forms import BuilderInquiryForm
from buildmyhome.models import Inquiry, Package
from buildmyhome.services.estimate_pdf import build_estimate_pdf
from buildmyhome.services.estimator_client import EstimationService
from buildmyhome.services.inquiry_service import create_inquiry
from buildmyhome.services.saved_plan_sync import mirror_saved_plan
from buildmyhome.services.session_store import (
    FlaskSessionStore,
    client_session_id,
    load_saved_plans,
    store_saved_plans,
)
from . import custom_builder_bp


def _get_wizard():
    return BuilderWizard(
        FlaskSessionStore(),
        EstimationService.from_config(current_app.config),
        key=current_app.config.get('BUILDER_SESSION_KEY', 'homeBuilderDetails'),
    )


def _json_body():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _state(wizard, **extra):
    data = wizard.snapshot()
    data.update({
        'ok': True,
        'canAdvance': wizard.can_advance(),
        'blockingReason': wizard.blocking_reason(),
        'missingMaterials': wizard.missing_materials(),
    })
    data.update(extra)
    return jsonify(data)


def _invalid(exc):
    return jsonify({'ok': False, 'message': exc.message, 'field': exc.field}), 400


@custom_builder_bp.route('/state')
def state():
    return _state(_get_wizard())


@custom_builder_bp.route('/start', methods=['POST'])
def start():
    """Start fresh, optionally seeded from a catalog package."""
    wizard = _get_wizard()
    package_id = _json_body().get('packageId')
    if package_id is None:
        wizard.reset()
        return _state(wizard)

    try:
        package = db.session.get(Package, int(package_id))
    except (TypeError, ValueError):
        return jsonify({'ok': False, 'message': 'Expected a package id', 'field': 'packageId'}), 400
    if package is None:
        return jsonify({'ok': False, 'message': 'Package not found'}), 404

    wizard.start_from_package(
        size=package.size,
        bedrooms=package.bedrooms,
        bathrooms=package.bathrooms,
        style=package.style,
    )
    return _state(wizard, packageId=package.id)


@custom_builder_bp.route('/update', methods=['POST'])
def update():
    wizard = _get_wizard()
    try:
        wizard.update(_json_body())
    except ConfigurationError as exc:
        return _invalid(exc)
    return _state(wizard)


@custom_builder_bp.route('/design', methods=['POST'])
def design():
    wizard = _get_wizard()
    try:
        wizard.update_design(_json_body())
    except ConfigurationError as exc:
        return _invalid(exc)
    return _state(wizard)


@custom_builder_bp.route('/materials', methods=['POST'])
def materials():
    """Either ``{"category", "item"}`` for one pick or ``{"materials": {...}}``."""
    wizard = _get_wizard()
    body = _json_body()
    try:
        if 'category' in body:
            wizard.select_material(body['category'], body.get('item'))
        else:
            wizard.update_materials(body.get('materials', {}))
    except ConfigurationError as exc:
        return _invalid(exc)
    return _state(wizard)


@custom_builder_bp.route('/interiors', methods=['POST'])
def interiors():
    wizard = _get_wizard()
    body = _json_body()
    try:
        if 'toggleAppliance' in body:
            wizard.toggle_appliance(body['toggleAppliance'])
        else:
            wizard.update_interiors(body)
    except ConfigurationError as exc:
        return _invalid(exc)
    return _state(wizard)


@custom_builder_bp.route('/next', methods=['POST'])
def next_step():
    wizard = _get_wizard()
    try:
        wizard.next(_json_body() or None)
    except StepBlocked:
        return jsonify({'ok': False, 'canAdvance': False, 'step': wizard.step})
    except ConfigurationError as exc:
        return _invalid(exc)
    return _state(wizard)


@custom_builder_bp.route('/back', methods=['POST'])
def back():
    wizard = _get_wizard()
    wizard.back()
    return _state(wizard)


@custom_builder_bp.route('/reset', methods=['POST'])
def reset():
    wizard = _get_wizard()
    wizard.reset()
    return _state(wizard)


@custom_builder_bp.route('/save-plan', methods=['POST'])
def save_plan():
    """Save the current configuration to the visitor's saved plans."""
    wizard = _get_wizard()
    entry = SavedPlanEntry(custom_package=wizard.config.copy())
    plans = load_saved_plans()

    if not plans.add(entry):
        return jsonify({
            'ok': True,
            'saved': False,
            'alreadySaved': True,
            'message': 'This plan is already in your saved plans.',
            'count': len(plans),
        })

    store_saved_plans(plans)
    mirror_saved_plan(client_session_id(), entry)
    return jsonify({
        'ok': True,
        'saved': True,
        'alreadySaved': False,
        'message': 'Plan saved.',
        'count': len(plans),
    })


@custom_builder_bp.route('/inquiry', methods=['POST'])
@limiter.limit(lambda: current_app.config.get('INQUIRY_RATE_LIMIT', '10 per hour'))
def inquiry():
    """Submit an inquiry with the current configuration attached verbatim."""
    form = BuilderInquiryForm()
    if not form.validate_on_submit():
        return jsonify({'ok': False, 'message': 'Please correct the highlighted fields.', 'errors': form.errors}), 400

    wizard = _get_wizard()
    try:
        record = create_inquiry(form, source=Inquiry.SOURCE_BUILDER, custom_package=wizard.config.to_dict())
    except Exception:
        return jsonify({
            'ok': False,
            'message': "We couldn't submit your inquiry right now. Your design is saved; please try again.",
        }), 500

    return jsonify({
        'ok': True,
        'message': 'Thank you! Our team will contact you shortly.',
        'inquiry': record.to_dict(),
    }), 201


@custom_builder_bp.route('/estimate.pdf')
def estimate_pdf():
    wizard = _get_wizard()
    pdf = build_estimate_pdf(wizard.config, site_name=current_app.config.get('SITE_NAME', 'BuildMyHome'))
    return send_file(
        BytesIO(pdf),
        mimetype='application/pdf',
        as_attachment=True,
        download_name='buildmyhome-estimate.pdf',
    )
