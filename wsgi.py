"""
WSGI Entry Point for the BuildMyHome Application

This module serves as the entry point for WSGI servers (like Gunicorn)
to run the Flask application in production environments.

All environment variables must be set before this module is imported;
missing production settings fail fast with a clear message.
"""

import os
import sys

# Load .env only for local development. In production, environment variables
# must be provided by the platform.
if os.environ.get('FLASK_ENV', '').lower() != 'production' and os.environ.get('FLASK_CONFIG', '').lower() != 'production':
    from dotenv import load_dotenv

    load_dotenv(override=False)

from buildmyhome import create_app

config_name = (os.getenv('FLASK_CONFIG') or os.getenv('FLASK_ENV') or 'development').lower()

print(f'Initializing BuildMyHome with config: {config_name}', file=sys.stderr)

if config_name == 'production':
    required_vars = {
        'SECRET_KEY': 'Required for session signing',
        'DATABASE_URL': 'Required for PostgreSQL connection',
        'ADMIN_EMAIL': 'Required for inquiry notifications',
    }

    missing_vars = [
        f"  - {var_name}: {description}"
        for var_name, description in required_vars.items()
        if not os.getenv(var_name)
    ]

    if missing_vars:
        print(
            "\n" + "=" * 70 + "\n"
            "DEPLOYMENT FAILED: Missing required environment variables\n"
            + "=" * 70 + "\n\n"
            + "\n".join(missing_vars)
            + "\n",
            file=sys.stderr,
        )
        raise RuntimeError('Missing required environment variables in production')

try:
    app = create_app(config_name)
except Exception as exc:
    print(f'FATAL: Application initialization failed: {exc}', file=sys.stderr)
    print('Common causes: database connection failure (check DATABASE_URL), '
          'missing tables (run: flask db upgrade), invalid environment values.', file=sys.stderr)
    raise
