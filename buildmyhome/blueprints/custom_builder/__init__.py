"""Custom home builder wizard blueprint."""

from flask import Blueprint

custom_builder_bp = Blueprint('custom_builder', __name__)

from . import routes  # noqa: E402,F401
