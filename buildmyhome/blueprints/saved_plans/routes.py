"""Routes for the visitor's saved plans.

The session list is what the visitor sees; new entries are copied to the
server table on a best-effort basis.
"""

from flask import jsonify, request

from buildmyhome.domain.home_configuration import ConfigurationError
from buildmyhome.domain.saved_plans import SavedPlanEntry
from buildmyhome.services.saved_plan_sync import mirror_saved_plan
from buildmyhome.services.session_store import client_session_id, load_saved_plans, store_saved_plans
from . import saved_plans_bp


def _listing(plans, **extra):
    data = {'ok': True, 'sessionId': client_session_id(), 'plans': plans.to_list(), 'count': len(plans)}
    data.update(extra)
    return jsonify(data)


@saved_plans_bp.route('/', methods=['GET'])
def list_plans():
    return _listing(load_saved_plans())


@saved_plans_bp.route('/', methods=['POST'])
def add_plan():
    try:
        entry = SavedPlanEntry.from_dict(request.get_json(silent=True))
    except ConfigurationError as exc:
        return jsonify({'ok': False, 'message': exc.message, 'field': exc.field}), 400

    plans = load_saved_plans()
    if not plans.add(entry):
        return _listing(plans, saved=False, alreadySaved=True, message='This plan is already in your saved plans.')

    store_saved_plans(plans)
    mirror_saved_plan(client_session_id(), entry)
    return _listing(plans, saved=True, alreadySaved=False, message='Plan saved.'), 201


@saved_plans_bp.route('/<int:index>', methods=['DELETE'])
def remove_plan(index):
    plans = load_saved_plans()
    if plans.remove(index) is None:
        return jsonify({'ok': False, 'message': 'Saved plan not found'}), 404
    store_saved_plans(plans)
    return _listing(plans)


@saved_plans_bp.route('/clear', methods=['POST'])
def clear_plans():
    plans = load_saved_plans()
    plans.clear()
    store_saved_plans(plans)
    return _listing(plans)
