"""
Flask Application Factory

This module implements the application factory pattern for creating
Flask application instances with different configurations.
"""

import logging
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from buildmyhome.config import config
from buildmyhome.extensions import db, migrate, mail, limiter


def create_app(config_name='default', overrides=None):
    """Create and configure a Flask application instance.

    ``overrides`` is applied on top of the selected config class (tests use
    it to point the estimator at a fake endpoint, for example).
    """
    app = Flask(__name__)

    # Instantiate so @property values (ProductionConfig.SQLALCHEMY_DATABASE_URI)
    # are evaluated.
    cfg = config.get(config_name) or config['default']
    app.config.from_object(cfg() if isinstance(cfg, type) else cfg)
    if overrides:
        app.config.update(overrides)

    _configure_logging(app)

    if config_name == 'production':
        if not app.config.get('SECRET_KEY'):
            app.logger.error('Production requires SECRET_KEY to be set via environment variable')
            raise RuntimeError('Missing SECRET_KEY in production')

        db_uri = app.config.get('SQLALCHEMY_DATABASE_URI')
        if not db_uri:
            app.logger.error('Production requires DATABASE_URL (SQLALCHEMY_DATABASE_URI) to be set')
            raise RuntimeError('Missing DATABASE_URL in production')
        if db_uri.strip().startswith('sqlite:'):
            app.logger.error('Production requires PostgreSQL (DATABASE_URL must not be sqlite)')
            raise RuntimeError('SQLite not allowed in production')
    elif not app.config.get('SECRET_KEY'):
        app.config['SECRET_KEY'] = os.urandom(32)
        app.logger.warning('SECRET_KEY was missing; generated an ephemeral key for this process.')

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)
    limiter.init_app(app)

    if config_name == 'development' or (config_name == 'default' and not app.config.get('TESTING')):
        from buildmyhome.db_init import ensure_development_schema
        ensure_development_schema(app)

    register_blueprints(app)
    register_error_handlers(app)
    register_shell_context(app)
    register_cli_commands(app)

    @app.after_request
    def _apply_security_headers(response):
        response.headers.setdefault('X-Frame-Options', 'DENY')
        response.headers.setdefault('X-Content-Type-Options', 'nosniff')
        response.headers.setdefault('Referrer-Policy', 'strict-origin-when-cross-origin')
        return response

    return app


def _configure_logging(app):
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)
    logging.getLogger('buildmyhome').setLevel(level)


def register_blueprints(app):
    """Register Flask blueprints"""

    from buildmyhome.routes.api import api_bp
    from buildmyhome.routes.health import health_bp
    from buildmyhome.blueprints.custom_builder import custom_builder_bp
    from buildmyhome.blueprints.saved_plans import saved_plans_bp

    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(health_bp)  # No prefix - accessible at /health
    app.register_blueprint(custom_builder_bp, url_prefix='/custom-builder')
    app.register_blueprint(saved_plans_bp, url_prefix='/saved-plans')


def register_error_handlers(app):
    """JSON error responses for every endpoint."""

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(429)
    def rate_limited_error(error):
        app.logger.info('Rate limit hit on %s: %s', request.path, error.description)
        return jsonify({'message': 'Too many requests. Please try again later.'}), 429

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.exception('Unhandled exception (500): %s', error)
        db.session.rollback()
        return jsonify({'message': 'Internal server error'}), 500

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'message': error.description}), error.code


def register_shell_context(app):
    """Register shell context for Flask CLI"""

    @app.shell_context_processor
    def make_shell_context():
        from buildmyhome.models import Package, Material, Project, Inquiry, SavedPlan
        return {
            'db': db,
            'Package': Package,
            'Material': Material,
            'Project': Project,
            'Inquiry': Inquiry,
            'SavedPlan': SavedPlan,
        }


def register_cli_commands(app):
    """Register custom Flask CLI commands."""
    from buildmyhome.cli import seed_catalog_command, estimate_cost_command

    app.cli.add_command(seed_catalog_command)
    app.cli.add_command(estimate_cost_command)
