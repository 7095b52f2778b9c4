"""Flask application factory."""

import os
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .config import config
from .extensions import db


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)

    # Record store
    from .store import ContactStore
    from .errors import PersistenceError

    store = ContactStore(db.session, create_schema=db.create_all)
    app.extensions['contact_store'] = store

    # Keep serving if the database is down; tables are created on first use
    with app.app_context():
        try:
            store.ensure_schema()
        except PersistenceError:
            app.logger.exception('Database connection error')

    # Cross-origin headers and preflight
    from .utils.cors import init_cors
    init_cors(app)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Error handlers
    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        app.logger.exception('Unhandled exception')
        return jsonify({'message': 'Internal server error'}), 500

    return app


def shutdown_store(app):
    """Release the database connection pool of `app`."""
    with app.app_context():
        db.engine.dispose()
    app.logger.info('Database connections closed')
