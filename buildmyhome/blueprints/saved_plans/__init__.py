"""Saved plans (favorites) blueprint."""

from flask import Blueprint

saved_plans_bp = Blueprint('saved_plans', __name__)

from . import routes  # noqa: E402,F401
