"""Flask application factory."""

import logging
import os

from flask import Flask, jsonify
from sqlalchemy.engine import make_url

from .config import config
from .errors import StorageError, ValidationError
from .extensions import db, cors
from .notifier import Notifier
from .services import SubmissionHandler
from .store import RecordStore

logger = logging.getLogger(__name__)


def create_app(config_name=None, notifier=None):
    """Create and configure the Flask application.

    The record store, notifier and submission handler are built once here and
    kept in ``app.extensions`` for the lifetime of the process.
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    logger.setLevel(str(app.config.get('LOG_LEVEL', 'INFO')).upper())

    # Create the SQLite directory
    database = make_url(app.config['SQLALCHEMY_DATABASE_URI']).database
    if database and database != ':memory:':
        os.makedirs(os.path.dirname(os.path.abspath(database)), exist_ok=True)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': '*'}}, send_wildcard=True)

    # Schema errors stop startup here
    store = RecordStore(app)
    if notifier is None:
        notifier = Notifier.from_config(app.config)

    app.extensions['record_store'] = store
    app.extensions['notifier'] = notifier
    app.extensions['submission_handler'] = SubmissionHandler(store, notifier)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Error handlers
    @app.errorhandler(ValidationError)
    def validation_error(error):
        return jsonify({'error': error.message, 'fields': error.fields}), 400

    @app.errorhandler(StorageError)
    def storage_error(error):
        logger.error(f'Storage error: {error}')
        return jsonify({'error': 'Internal server error'}), 500

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'error': 'Internal server error'}), 500

    return app


def shutdown(app):
    """Close the database connection; returns the process exit code."""
    try:
        app.extensions['record_store'].close(app)
    except Exception as e:
        logger.error(f'Error during shutdown: {e}')
        return 1
    logger.info('Server shutdown gracefully')
    return 0
