"""Flask session adapters: the builder's persistence slot and the saved plan list."""

import uuid

from flask import current_app, session

from buildmyhome.domain.home_configuration import ConfigurationError
from buildmyhome.domain.saved_plans import SavedPlanList


class FlaskSessionStore:
    """Stores JSON-safe blobs in the signed session cookie."""

    def load(self, key):
        blob = session.get(key)
        return blob if isinstance(blob, dict) else None

    def save(self, key, blob):
        session[key] = blob
        session.permanent = True
        session.modified = True

    def clear(self, key):
        session.pop(key, None)
        session.modified = True


def load_saved_plans():
    """The visitor's saved plan list; an unreadable list starts empty."""
    key = current_app.config.get('SAVED_PLANS_SESSION_KEY', 'bmh_saved_plans')
    try:
        return SavedPlanList.from_list(session.get(key))
    except (ConfigurationError, TypeError) as exc:
        current_app.logger.warning('Discarding unreadable saved plans list: %s', exc)
        session.pop(key, None)
        return SavedPlanList()


def store_saved_plans(plans):
    key = current_app.config.get('SAVED_PLANS_SESSION_KEY', 'bmh_saved_plans')
    session[key] = plans.to_list()
    session.permanent = True
    session.modified = True


def client_session_id():
    """Stable anonymous id for this browser, created on first use."""
    key = current_app.config.get('CLIENT_SESSION_ID_KEY', 'bmh_session_id')
    value = session.get(key)
    if not value:
        value = uuid.uuid4().hex
        session[key] = value
        session.permanent = True
    return value
