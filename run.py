"""Local development server.

Creates missing development tables and seeds the sample catalog before
serving, so a fresh checkout is usable immediately.
"""

import os

from wsgi import app
from buildmyhome.catalog_seed import seed_catalog


if __name__ == '__main__':
    if os.environ.get('SEED_CATALOG', '1') == '1':
        with app.app_context():
            created = seed_catalog()
            app.logger.info('Sample catalog: %s', created)

    host = os.environ.get('HOST', '127.0.0.1')
    port = int(os.environ.get('PORT', 5000))
    app.run(host=host, port=port)
