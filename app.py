# Contact Desk - server entry point
# Reads configuration from the environment (.env supported) and serves the
# contact API with the Flask development server.

import logging
import os
import signal
import sys

from contactdesk import create_app, shutdown

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)
logger = logging.getLogger('contactdesk')

app = create_app()


def handle_signal(signum, frame):
    """Release the database connection and exit."""
    logger.info(f'Received signal {signum}, shutting down')
    sys.exit(shutdown(app))


if __name__ == '__main__':
    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    port = app.config['PORT']
    logger.info(f'Server running on http://localhost:{port}')
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False), use_reloader=False)
